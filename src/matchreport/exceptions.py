"""Custom exceptions for the Match Report Engine.

All exceptions inherit from :class:`MatchReportError` so callers can
catch the full family with a single ``except MatchReportError`` clause.
"""


class MatchReportError(Exception):
    """Base exception for all match report errors."""


class ParseError(MatchReportError):
    """Raised when an export cannot be read as a tag-timeline document."""


class ExportError(MatchReportError):
    """Raised when a report or one of its assets cannot be written or read."""
