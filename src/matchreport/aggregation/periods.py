"""Per-period aggregation of tagged intervals.

Filters a match's events to one period and computes the indicator
table together with possession and ball-in-play durations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from matchreport.aggregation.indicators import StatRow, tally_indicators
from matchreport.config import ReportConfig
from matchreport.text import normalize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from matchreport.adapters.schemas import TagEvent

logger = logging.getLogger(__name__)

MIN_TOTAL_SECONDS: float = 1.0


# ------------------------------------------------------------------
# Dataclasses
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PossessionSummary:
    """Possession and clock buckets of one period, in seconds.

    Attributes:
        coimbra_seconds: Possession time of the home side.
        adversario_seconds: Possession time of the opponent.
        effective_seconds: Time with the ball in play.
        out_seconds: Time with the ball out of play.
        total_seconds: Period duration; at least
            :data:`MIN_TOTAL_SECONDS` for aggregated periods.
    """

    coimbra_seconds: float
    adversario_seconds: float
    effective_seconds: float
    out_seconds: float
    total_seconds: float

    def __add__(self, other: PossessionSummary) -> PossessionSummary:
        if not isinstance(other, PossessionSummary):
            return NotImplemented
        return PossessionSummary(
            coimbra_seconds=self.coimbra_seconds + other.coimbra_seconds,
            adversario_seconds=self.adversario_seconds + other.adversario_seconds,
            effective_seconds=self.effective_seconds + other.effective_seconds,
            out_seconds=self.out_seconds + other.out_seconds,
            total_seconds=self.total_seconds + other.total_seconds,
        )


@dataclass(frozen=True, slots=True)
class PeriodStats:
    """Full statistical snapshot of one period.

    Attributes:
        period: Period identifier (e.g. ``"1º Tempo"``).
        indicators: One row per stat category, in category order.
        possession: Possession and clock buckets.
    """

    period: str
    indicators: tuple[StatRow, ...]
    possession: PossessionSummary

    def indicator(self, label: str) -> StatRow | None:
        """Return the row named *label*, or ``None`` if absent."""
        for row in self.indicators:
            if row.label == label:
                return row
        return None


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _sum_durations(
    events: Iterable[TagEvent],
    predicate: Callable[[str], bool],
) -> float:
    """Sum ``end - start`` over events whose normalized code passes."""
    return sum((e.duration for e in events if predicate(normalize(e.code))), 0.0)


def _period_duration(
    events: list[TagEvent],
    period_name: str,
    fallback: float,
) -> float:
    """Return the span of the period marker event, or *fallback*.

    A marker is an event whose code is the period name itself. Results
    below :data:`MIN_TOTAL_SECONDS` (zero, or negative spans from a
    malformed export) are raised to it.
    """
    marker_code = normalize(period_name)
    marker = next((e for e in events if normalize(e.code) == marker_code), None)
    total = marker.duration if marker is not None else fallback
    if total < MIN_TOTAL_SECONDS:
        logger.warning(
            "Period %r has duration %.1f s; using %.0f s",
            period_name,
            total,
            MIN_TOTAL_SECONDS,
        )
        return MIN_TOTAL_SECONDS
    return total


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------


def aggregate_period(
    events: Iterable[TagEvent],
    period_name: str,
    config: ReportConfig | None = None,
) -> PeriodStats:
    """Compute the indicator table and clock buckets of one period.

    Only events whose raw ``period_label`` equals *period_name* are
    considered. Possession is accumulated from codes containing a side's
    possession code; effective and out time from codes equal to the
    configured clock codes.

    Args:
        events: All events of the match.
        period_name: Exact period label to filter on.
        config: Report configuration; defaults to ``ReportConfig()``.

    Returns:
        A complete :class:`PeriodStats`; absent data yields zeros.
    """
    cfg = config if config is not None else ReportConfig()
    teams = cfg.teams
    clock = cfg.clock

    period_events = [e for e in events if e.period_label == period_name]
    logger.debug("Period %r: %d events", period_name, len(period_events))

    indicators = tally_indicators(period_events, teams.home_team, teams.away_team)

    home_key = normalize(clock.home_possession_code)
    away_key = normalize(clock.away_possession_code)
    effective_key = normalize(clock.effective_code)
    out_key = normalize(clock.out_code)

    effective = _sum_durations(period_events, lambda c: c == effective_key)
    out = _sum_durations(period_events, lambda c: c == out_key)

    possession = PossessionSummary(
        coimbra_seconds=_sum_durations(period_events, lambda c: home_key in c),
        adversario_seconds=_sum_durations(period_events, lambda c: away_key in c),
        effective_seconds=effective,
        out_seconds=out,
        total_seconds=_period_duration(period_events, period_name, effective + out),
    )
    return PeriodStats(period=period_name, indicators=indicators, possession=possession)
