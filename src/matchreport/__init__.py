"""Match Report Engine.

Turns Live Tag Pro tag-timeline exports into per-period and total
football match statistics.
"""

from matchreport.aggregation.report import MatchHeader, MatchReport, build_report
from matchreport.config import ReportConfig
from matchreport.exceptions import MatchReportError, ParseError

__version__ = "0.1.0"

__all__ = [
    "MatchHeader",
    "MatchReport",
    "MatchReportError",
    "ParseError",
    "ReportConfig",
    "__version__",
    "build_report",
]
