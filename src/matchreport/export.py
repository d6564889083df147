"""Derived figures and serialization for consumers of a match report.

Renderers, PDF generators and narrative writers read the report
through the helpers below: percentage shares, clock formatting, tidy
:class:`polars.DataFrame` views and JSON serialization. The header is
the only part they may edit, via :func:`update_header`.
"""

from __future__ import annotations

import base64
import dataclasses
import logging
import math
import mimetypes
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
import polars as pl

from matchreport.aggregation.report import MatchHeader
from matchreport.exceptions import ExportError

if TYPE_CHECKING:
    from matchreport.aggregation.indicators import StatRow
    from matchreport.aggregation.periods import PossessionSummary
    from matchreport.aggregation.report import MatchReport

logger = logging.getLogger(__name__)

_HEADER_FIELDS: frozenset[str] = frozenset(
    f.name for f in dataclasses.fields(MatchHeader)
)


# ------------------------------------------------------------------
# Derived figures
# ------------------------------------------------------------------


def format_clock(seconds: float) -> str:
    """Format a duration as ``M:SS``; negative values show as ``0:00``."""
    whole = int(max(seconds, 0.0))
    minutes, secs = divmod(whole, 60)
    return f"{minutes}:{secs:02d}"


def possession_share(summary: PossessionSummary) -> tuple[int, int]:
    """Split possession between the sides as whole percentages.

    The home share is rounded and the opponent gets the remainder, so
    the pair always sums to 100 unless neither side has possession, in
    which case ``(0, 0)`` is returned.

    Args:
        summary: Possession buckets of one period.

    Returns:
        ``(home_pct, away_pct)``.
    """
    contested = summary.coimbra_seconds + summary.adversario_seconds
    if contested <= 0:
        return (0, 0)
    # Round half up; round() would round 12.5 down to 12.
    home = math.floor(summary.coimbra_seconds / contested * 100 + 0.5)
    return (home, 100 - home)


def time_share(seconds: float, summary: PossessionSummary) -> float:
    """Return *seconds* as a percentage of the period duration."""
    return seconds / summary.total_seconds * 100


def indicator_share(row: StatRow) -> tuple[float, float]:
    """Split an indicator between the sides as percentages.

    Returns ``(50.0, 50.0)`` when neither side registered the event.
    """
    if row.total <= 0:
        return (50.0, 50.0)
    return (row.coimbra / row.total * 100, row.adversario / row.total * 100)


# ------------------------------------------------------------------
# Tabular views
# ------------------------------------------------------------------


def indicators_frame(report: MatchReport) -> pl.DataFrame:
    """Return one row per (period, indicator) across the report.

    Columns are ``period``, ``label``, ``coimbra`` and ``adversario``,
    ordered by period (first half, second half, total) and then by
    category order.
    """
    rows: list[dict[str, object]] = [
        {
            "period": stats.period,
            "label": row.label,
            "coimbra": row.coimbra,
            "adversario": row.adversario,
        }
        for stats in report.periods
        for row in stats.indicators
    ]
    return pl.DataFrame(
        rows,
        schema={
            "period": pl.Utf8,
            "label": pl.Utf8,
            "coimbra": pl.Int64,
            "adversario": pl.Int64,
        },
    )


def possession_frame(report: MatchReport) -> pl.DataFrame:
    """Return one row per period with every possession bucket.

    Adds ``coimbra_pct`` and ``adversario_pct`` from
    :func:`possession_share`.
    """
    rows: list[dict[str, object]] = []
    for stats in report.periods:
        home_pct, away_pct = possession_share(stats.possession)
        row: dict[str, object] = {"period": stats.period}
        row.update(dataclasses.asdict(stats.possession))
        row["coimbra_pct"] = home_pct
        row["adversario_pct"] = away_pct
        rows.append(row)
    return pl.DataFrame(rows)


# ------------------------------------------------------------------
# Serialization
# ------------------------------------------------------------------


def report_to_dict(report: MatchReport) -> dict[str, Any]:
    """Convert the report into plain dicts and lists."""
    return dataclasses.asdict(report)


def report_to_json(report: MatchReport) -> bytes:
    """Serialize the report as indented UTF-8 JSON."""
    return orjson.dumps(report_to_dict(report), option=orjson.OPT_INDENT_2)


def write_report(report: MatchReport, path: Path) -> None:
    """Write the report as JSON using an atomic write.

    Writes to a temporary file in the destination directory and
    renames it to *path*, so readers never see a partial file.

    Args:
        report: Report to serialize.
        path: Destination file; its parent directory is created.

    Raises:
        ExportError: If the file cannot be written.
    """
    payload = report_to_json(report)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path_str = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    except OSError as exc:
        msg = f"Cannot write report to {path}: {exc}"
        raise ExportError(msg) from exc

    tmp_path = Path(tmp_path_str)
    try:
        with open(fd, "wb") as f:
            f.write(payload)
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        msg = f"Cannot write report to {path}: {exc}"
        raise ExportError(msg) from exc
    logger.debug("Wrote report to %s", path)


# ------------------------------------------------------------------
# Header editing
# ------------------------------------------------------------------


def encode_logo(path: Path) -> str:
    """Read an image file and return it as a base64 data URI.

    Args:
        path: Image file (PNG, JPEG, SVG, ...).

    Returns:
        A ``data:<mime>;base64,<payload>`` string suitable for
        :attr:`MatchHeader.home_logo` or :attr:`MatchHeader.away_logo`.

    Raises:
        ExportError: If the file cannot be read.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read logo {path}: {exc}"
        raise ExportError(msg) from exc
    mime, _ = mimetypes.guess_type(path.name)
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime or 'application/octet-stream'};base64,{encoded}"


def update_header(report: MatchReport, **fields: str | None) -> MatchHeader:
    """Apply presentation edits to the report header in place.

    Only the header changes; the statistics are left untouched.

    Args:
        report: Report whose header is edited.
        **fields: Header attributes to overwrite (e.g.
            ``away_team="Benfica"``).

    Returns:
        The edited header.

    Raises:
        ValueError: If a field name is not a header attribute.
    """
    unknown = sorted(set(fields) - _HEADER_FIELDS)
    if unknown:
        msg = f"Unknown header fields: {unknown}"
        raise ValueError(msg)
    for name, value in fields.items():
        setattr(report.header, name, value)
    return report.header
