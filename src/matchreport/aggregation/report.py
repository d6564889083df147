"""Report assembly for a single match.

Runs the period aggregator for both halves, merges them into the match
total and wraps everything with an editable presentation header.

Public API
----------
.. function:: build_report

    Parse a raw export and return a complete :class:`MatchReport`.

.. function:: load_report

    Same as :func:`build_report`, reading through any
    :class:`~matchreport.adapters.base.EventSource`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from matchreport.adapters.livetag import LiveTagAdapter, parse_events
from matchreport.aggregation.periods import PeriodStats, aggregate_period
from matchreport.config import ReportConfig

if TYPE_CHECKING:
    from pathlib import Path

    from matchreport.adapters.base import EventSource
    from matchreport.adapters.schemas import TagEvent

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Dataclasses
# ------------------------------------------------------------------


@dataclass(slots=True)
class MatchHeader:
    """Presentation metadata shown above the statistics.

    Unlike the statistics, the header is mutable: the consuming UI may
    rename teams, attach logos or fix the date after generation. It is
    never recomputed from events once set.

    Attributes:
        home_team: Display name of the home side.
        away_team: Display name of the opponent.
        date: Match date as displayed.
        competition: Competition name.
        score: Final score as ``"<home> - <away>"``.
        home_logo: Base64 data URI of the home crest, if any.
        away_logo: Base64 data URI of the opponent crest, if any.
    """

    home_team: str
    away_team: str
    date: str
    competition: str
    score: str
    home_logo: str | None = None
    away_logo: str | None = None


@dataclass(frozen=True, slots=True)
class MatchReport:
    """Statistics of both halves and the match total.

    Attributes:
        header: Editable presentation header.
        p1: First-half statistics.
        p2: Second-half statistics.
        total: Elementwise sum of *p1* and *p2*.
    """

    header: MatchHeader
    p1: PeriodStats
    p2: PeriodStats
    total: PeriodStats

    @property
    def periods(self) -> tuple[PeriodStats, PeriodStats, PeriodStats]:
        """The three period snapshots in display order."""
        return (self.p1, self.p2, self.total)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def merge_periods(first: PeriodStats, second: PeriodStats, period: str) -> PeriodStats:
    """Sum two periods index by index.

    Both periods carry the full category list in the same order, so
    rows are added positionally; totals are never recounted from events.

    Args:
        first: Statistics of the first period.
        second: Statistics of the second period.
        period: Identifier of the merged period.

    Returns:
        The merged :class:`PeriodStats`.
    """
    indicators = tuple(
        a + b for a, b in zip(first.indicators, second.indicators, strict=True)
    )
    return PeriodStats(
        period=period,
        indicators=indicators,
        possession=first.possession + second.possession,
    )


def derive_score(total: PeriodStats, goal_label: str) -> str:
    """Format the score from the goal indicator of *total*."""
    goals = total.indicator(goal_label)
    home = goals.coimbra if goals is not None else 0
    away = goals.adversario if goals is not None else 0
    return f"{home} - {away}"


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------


def assemble_report(
    events: list[TagEvent],
    config: ReportConfig | None = None,
    *,
    today: date | None = None,
) -> MatchReport:
    """Aggregate already-extracted events into a :class:`MatchReport`.

    Args:
        events: All events of the match.
        config: Report configuration; defaults to ``ReportConfig()``.
        today: Date shown in the header; defaults to the current date.

    Returns:
        The assembled report.
    """
    cfg = config if config is not None else ReportConfig()

    p1 = aggregate_period(events, cfg.first_period, cfg)
    p2 = aggregate_period(events, cfg.second_period, cfg)
    total = merge_periods(p1, p2, cfg.total_period)
    score = derive_score(total, cfg.goal_label)

    header = MatchHeader(
        home_team=cfg.teams.home_team,
        away_team=cfg.teams.away_display,
        date=(today or date.today()).strftime(cfg.date_format),
        competition=cfg.competition,
        score=score,
    )
    logger.info("Built report from %d events, score %s", len(events), score)
    return MatchReport(header=header, p1=p1, p2=p2, total=total)


def build_report(
    document: str | bytes,
    config: ReportConfig | None = None,
    *,
    today: date | None = None,
) -> MatchReport:
    """Parse a raw Live Tag Pro export and build its report.

    Args:
        document: The export's XML text.
        config: Report configuration; defaults to ``ReportConfig()``.
        today: Date shown in the header; defaults to the current date.

    Returns:
        The assembled report.

    Raises:
        ParseError: If *document* is not well-formed XML. No partial
            report is produced.
    """
    return assemble_report(parse_events(document), config, today=today)


def load_report(
    source: str | Path,
    adapter: EventSource | None = None,
    config: ReportConfig | None = None,
) -> MatchReport:
    """Build a report by loading events through an adapter.

    Args:
        source: Path to an export file, or the raw document text.
        adapter: Event source to read with; defaults to
            :class:`~matchreport.adapters.livetag.LiveTagAdapter`.
        config: Report configuration; defaults to ``ReportConfig()``.

    Returns:
        The assembled report.

    Raises:
        ParseError: If the export is not a well-formed document.
    """
    source_adapter = adapter if adapter is not None else LiveTagAdapter()
    return assemble_report(source_adapter.load_events(source), config)
