"""Build match reports for every Live Tag Pro export in the data folder.

Reads each ``*.xml`` export from ``data/exports``, writes one JSON
report per match to ``data/reports`` plus a combined indicator table
(``indicators.parquet``), and logs a score line per match followed by
distribution statistics across all matches.

Usage::

    python scripts/build_reports.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import numpy as np
import polars as pl
from tqdm import tqdm

# ---------------------------------------------------------------------------
# Ensure the src package is importable when running as a standalone script.
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT / "src"))

from matchreport.adapters import LiveTagAdapter  # noqa: E402
from matchreport.aggregation.report import load_report  # noqa: E402
from matchreport.config import ReportConfig  # noqa: E402
from matchreport.exceptions import ExportError, ParseError  # noqa: E402
from matchreport.export import (  # noqa: E402
    format_clock,
    indicators_frame,
    possession_share,
    write_report,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

EXPORT_DIR = _PROJECT_ROOT / "data" / "exports"
OUTPUT_DIR = _PROJECT_ROOT / "data" / "reports"


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _format_distribution(values: np.ndarray) -> str:
    """Return a one-line summary string.

    Args:
        values: 1-D numeric array.

    Returns:
        Formatted string with mean, std, min, median, max.
    """
    if len(values) == 0:
        return "(no data)"
    return (
        f"mean={np.mean(values):.2f}  std={np.std(values):.2f}  "
        f"min={np.min(values):.0f}  p50={np.median(values):.0f}  "
        f"max={np.max(values):.0f}"
    )


def _write_table(frames: list[pl.DataFrame], path: Path) -> bool:
    """Write the combined indicator table, logging any I/O failure.

    Returns:
        ``True`` if the table was written.
    """
    try:
        pl.concat(frames).write_parquet(path)
    except OSError:
        logger.exception("Failed to write indicator table to %s", path)
        return False
    logger.info("Wrote indicator table to %s", path)
    return True


# ------------------------------------------------------------------
# Main
# ------------------------------------------------------------------


def main() -> None:
    """Build and write a report for every export, then log a summary."""
    exports = sorted(EXPORT_DIR.glob("*.xml")) if EXPORT_DIR.is_dir() else []
    logger.info("Discovered %d exports in %s", len(exports), EXPORT_DIR)

    if not exports:
        logger.error("No exports found -- copy XML exports into %s", EXPORT_DIR)
        sys.exit(1)

    adapter = LiveTagAdapter()
    config = ReportConfig()

    # -- accumulators --------------------------------------------------
    goals_for: list[int] = []
    goals_against: list[int] = []
    effective_minutes: list[float] = []
    frames: list[pl.DataFrame] = []
    skipped: int = 0

    # -- process each export -------------------------------------------
    for path in tqdm(exports, desc="Building reports", unit="match"):
        try:
            report = load_report(path, adapter, config)
        except (ParseError, OSError):
            logger.exception("Failed to parse %s", path.name)
            skipped += 1
            continue

        try:
            write_report(report, OUTPUT_DIR / f"{path.stem}.json")
        except ExportError:
            logger.exception("Failed to write report for %s", path.name)
            skipped += 1
            continue

        gol = report.total.indicator(config.goal_label)
        goals_for.append(gol.coimbra if gol is not None else 0)
        goals_against.append(gol.adversario if gol is not None else 0)
        effective_minutes.append(report.total.possession.effective_seconds / 60.0)
        frames.append(
            indicators_frame(report).with_columns(pl.lit(path.stem).alias("match"))
        )

        home_pct, away_pct = possession_share(report.total.possession)
        logger.info(
            "%-30s  %s  possession %d%%/%d%%  effective %s",
            path.stem,
            report.header.score,
            home_pct,
            away_pct,
            format_clock(report.total.possession.effective_seconds),
        )

    if frames:
        _write_table(frames, OUTPUT_DIR / "indicators.parquet")

    # -- log summary ---------------------------------------------------
    sep = "=" * 72
    logger.info("")
    logger.info(sep)
    logger.info("REPORT STATISTICS")
    logger.info(sep)
    logger.info(
        "Reports written: %d  |  Skipped: %d  |  Exports: %d",
        len(goals_for),
        skipped,
        len(exports),
    )
    logger.info("--- Goals scored ---")
    logger.info("  %s", _format_distribution(np.array(goals_for)))
    logger.info("--- Goals conceded ---")
    logger.info("  %s", _format_distribution(np.array(goals_against)))
    logger.info("--- Effective playing time (min) ---")
    logger.info("  %s", _format_distribution(np.array(effective_minutes)))
    logger.info(sep)


if __name__ == "__main__":
    main()
