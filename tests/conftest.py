"""Shared test fixtures for the Match Report Engine.

Provides reusable fixtures used across multiple test modules:

* :func:`sample_export` -- a Live Tag Pro XML export covering both
  halves, with period markers, clock buckets, possession intervals and
  team-labelled indicator events.
* :func:`sample_events` -- the events extracted from that export.
* :func:`sample_report` -- the report built from that export, dated
  :data:`REPORT_DATE`.
* :func:`empty_export` -- a well-formed export with no instances.

The expected figures for :func:`sample_export` are exposed as module
constants so tests can assert against them directly.
"""

from __future__ import annotations

from datetime import date

import pytest

from matchreport.adapters.livetag import parse_events
from matchreport.adapters.schemas import TagEvent
from matchreport.aggregation.report import MatchReport, build_report

REPORT_DATE = date(2024, 3, 2)


def _instance(
    event_id: str,
    code: str,
    start: float,
    end: float,
    *,
    team: str | None = None,
    period: str | None = None,
) -> str:
    """Render one ``instance`` element of a Live Tag Pro export."""
    labels = ""
    if team is not None:
        labels += f"<label><group>Team</group><text>{team}</text></label>"
    if period is not None:
        labels += f"<label><group>Label</group><text>{period}</text></label>"
    return (
        f"<instance><ID>{event_id}</ID><start>{start}</start><end>{end}</end>"
        f"<code>{code}</code>{labels}</instance>"
    )


_P1 = "1º Tempo"
_P2 = "2º Tempo"
_HOME = "Coimbra Fc Porto"

_INSTANCES: tuple[str, ...] = (
    # -- first half --
    _instance("1", "1º Tempo", 0, 2700, period=_P1),
    _instance("2", "Bola em Jogo", 0, 1800, period=_P1),
    _instance("3", "Bola Fora do Jogo", 1800, 2700, period=_P1),
    _instance("4", "Posse de Bola Coimbra", 100, 700, period=_P1),
    _instance("5", "Posse de Bola Adversário", 700, 1100, period=_P1),
    _instance("6", "Gol", 300, 310, team=_HOME, period=_P1),
    _instance("7", "Finalização", 400, 405, team="COIMBRA FC PORTO", period=_P1),
    _instance("8", "Cartão Amarelo", 500, 505, team="Adversário", period=_P1),
    # -- second half --
    _instance("9", "2º Tempo", 2700, 5520, period=_P2),
    _instance("10", "Gol", 3000, 3010, team="Adversario", period=_P2),
    _instance("11", "Gol", 4000, 4010, team=_HOME, period=_P2),
    _instance("12", "Escanteio", 4100, 4105, team=_HOME, period=_P2),
    _instance("13", "escanteio", 4200, 4205, team=_HOME, period=_P2),
    _instance("14", "Posse de Bola Coimbra", 2800, 3100, period=_P2),
    _instance("15", "Bola em Jogo", 2700, 4500, period=_P2),
    # -- no period label: ignored by every period --
    _instance("16", "Gol", 5000, 5010, team=_HOME),
)

SAMPLE_EXPORT: str = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<file><SESSION_INFO><start_time>2024-03-02 15:00:00</start_time>"
    "</SESSION_INFO><ALL_INSTANCES>"
    + "".join(_INSTANCES)
    + "</ALL_INSTANCES></file>"
)

N_SAMPLE_EVENTS = len(_INSTANCES)

# Expected figures for SAMPLE_EXPORT.
P1_TOTAL_SECONDS = 2700.0
P2_TOTAL_SECONDS = 2820.0
EXPECTED_SCORE = "2 - 1"


@pytest.fixture()
def sample_export() -> str:
    """A two-half Live Tag Pro export (see module docstring)."""
    return SAMPLE_EXPORT


@pytest.fixture()
def sample_events(sample_export: str) -> list[TagEvent]:
    """Events extracted from :func:`sample_export`."""
    return parse_events(sample_export)


@pytest.fixture()
def sample_report(sample_export: str) -> MatchReport:
    """Report built from :func:`sample_export`, dated REPORT_DATE."""
    return build_report(sample_export, today=REPORT_DATE)


@pytest.fixture()
def empty_export() -> str:
    """A well-formed export with no ``instance`` elements."""
    return "<file><ALL_INSTANCES></ALL_INSTANCES></file>"
