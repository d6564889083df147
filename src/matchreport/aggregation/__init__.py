"""Aggregation of tagged intervals into match statistics.

Provides the stat-category taxonomy, per-period aggregation and the
report assembler.
"""

from matchreport.aggregation.indicators import (
    CATEGORIES,
    CATEGORY_LABELS,
    StatCategory,
    StatRow,
    count_category,
    matches_side,
    tally_indicators,
)
from matchreport.aggregation.periods import (
    MIN_TOTAL_SECONDS,
    PeriodStats,
    PossessionSummary,
    aggregate_period,
)
from matchreport.aggregation.report import (
    MatchHeader,
    MatchReport,
    assemble_report,
    build_report,
    load_report,
    merge_periods,
)

__all__ = [
    "CATEGORIES",
    "CATEGORY_LABELS",
    "MIN_TOTAL_SECONDS",
    "MatchHeader",
    "MatchReport",
    "PeriodStats",
    "PossessionSummary",
    "StatCategory",
    "StatRow",
    "aggregate_period",
    "assemble_report",
    "build_report",
    "count_category",
    "load_report",
    "matches_side",
    "merge_periods",
    "tally_indicators",
]
