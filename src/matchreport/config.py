"""Configuration dataclasses for the Match Report Engine.

All configuration containers are frozen (immutable) and slotted. Each
dataclass provides defaults matching the club's Live Tag Pro templates
so that a zero-argument ``ReportConfig()`` is always valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from matchreport.text import normalize

HOME_TEAM: str = "Coimbra Fc Porto"
AWAY_TEAM: str = "Adversario"
AWAY_DISPLAY_NAME: str = "Adversário"

FIRST_PERIOD: str = "1º Tempo"
SECOND_PERIOD: str = "2º Tempo"
TOTAL_PERIOD: str = "Total"

DEFAULT_COMPETITION: str = "CAMPEONATO NACIONAL"


@dataclass(frozen=True, slots=True)
class TeamConfig:
    """Names of the two sides as they appear in the export.

    Attributes:
        home_team: Name matched against team labels and codes for the
            home side; also used as its display name.
        away_team: Name matched against team labels and codes for the
            opponent.
        away_display: Display name of the opponent in the report header.
    """

    home_team: str = HOME_TEAM
    away_team: str = AWAY_TEAM
    away_display: str = AWAY_DISPLAY_NAME


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """Codes that drive the possession and time buckets.

    Attributes:
        effective_code: Code of intervals with the ball in play.
        out_code: Code of intervals with the ball out of play.
        home_possession_code: Text whose presence in a code marks a
            possession interval of the home side.
        away_possession_code: Text whose presence in a code marks a
            possession interval of the opponent.
    """

    effective_code: str = "Bola em Jogo"
    out_code: str = "Bola Fora do Jogo"
    home_possession_code: str = "Posse de Bola Coimbra"
    away_possession_code: str = "Posse de Bola Adversario"

    def __post_init__(self) -> None:
        """Reject codes that normalize to the empty string.

        An empty possession code is contained in every code and would
        count all events as possession.
        """
        codes = (
            self.effective_code,
            self.out_code,
            self.home_possession_code,
            self.away_possession_code,
        )
        if not all(normalize(c) for c in codes):
            msg = f"clock codes must be non-empty, got {codes!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Master configuration for report generation.

    Attributes:
        teams: Side names used for matching and display.
        clock: Possession and time-bucket codes.
        first_period: Label of the first half.
        second_period: Label of the second half.
        total_period: Identifier of the merged period.
        competition: Default competition name for the header.
        date_format: ``strftime`` format of the header date.
        goal_label: Indicator label the score is derived from.

    Raises:
        ValueError: If any configuration invariant is violated.
    """

    teams: TeamConfig = field(default_factory=TeamConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)
    first_period: str = FIRST_PERIOD
    second_period: str = SECOND_PERIOD
    total_period: str = TOTAL_PERIOD
    competition: str = DEFAULT_COMPETITION
    date_format: str = "%d/%m/%Y"
    goal_label: str = "Gol"

    def __post_init__(self) -> None:
        """Validate configuration invariants after initialization."""
        periods = (self.first_period, self.second_period, self.total_period)
        if not all(p.strip() for p in periods):
            msg = f"period names must be non-empty, got {periods!r}"
            raise ValueError(msg)
        if len(set(periods)) != len(periods):
            msg = f"period names must be distinct, got {periods!r}"
            raise ValueError(msg)

        home = normalize(self.teams.home_team)
        away = normalize(self.teams.away_team)
        if not home or not away:
            msg = (
                f"team names must be non-empty, got "
                f"{self.teams.home_team!r} and {self.teams.away_team!r}"
            )
            raise ValueError(msg)
        if home == away:
            msg = f"team names must differ after normalization, got {home!r}"
            raise ValueError(msg)
