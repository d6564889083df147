"""Tests for the Live Tag Pro export adapter.

Validates field extraction, document ordering, missing-field defaults,
first-wins label handling, structural parse failures and file loading
for :mod:`matchreport.adapters.livetag`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

import pytest

from matchreport.adapters import EventSource, LiveTagAdapter
from matchreport.adapters.livetag import extract_events, parse_events
from matchreport.exceptions import ParseError
from tests.conftest import N_SAMPLE_EVENTS

if TYPE_CHECKING:
    from pathlib import Path

    from matchreport.adapters.schemas import TagEvent


def _wrap(*instances: str) -> str:
    """Wrap raw ``instance`` markup in a minimal export document."""
    return "<file><ALL_INSTANCES>" + "".join(instances) + "</ALL_INSTANCES></file>"


# ------------------------------------------------------------------
# Field extraction
# ------------------------------------------------------------------


class TestFieldExtraction:
    """Each instance must map onto a TagEvent field by field."""

    def test_full_instance(self) -> None:
        """All present fields are read."""
        (event,) = parse_events(
            _wrap(
                "<instance><ID>7</ID><start>12.5</start><end>20.25</end>"
                "<code>Gol</code>"
                "<label><group>Team</group><text>Coimbra Fc Porto</text></label>"
                "<label><group>Label</group><text>1º Tempo</text></label>"
                "</instance>"
            )
        )
        assert event.event_id == "7"
        assert event.code == "Gol"
        assert event.start == 12.5
        assert event.end == 20.25
        assert event.team == "Coimbra Fc Porto"
        assert event.period_label == "1º Tempo"

    def test_sample_export_count(self, sample_events: list[TagEvent]) -> None:
        """Every instance of the sample export is extracted."""
        assert len(sample_events) == N_SAMPLE_EVENTS

    def test_document_order(self, sample_events: list[TagEvent]) -> None:
        """Events keep the order of the instances in the document."""
        ids = [e.event_id for e in sample_events]
        assert ids == [str(i) for i in range(1, N_SAMPLE_EVENTS + 1)]

    def test_unknown_elements_ignored(self) -> None:
        """Extra elements inside an instance do not disturb extraction."""
        (event,) = parse_events(
            _wrap(
                "<instance><ID>1</ID><start>1</start><end>2</end>"
                "<pos_x>10</pos_x><free_text>note</free_text>"
                "<code>Escanteio</code></instance>"
            )
        )
        assert event.code == "Escanteio"
        assert event.team is None

    def test_nested_instances_found(self) -> None:
        """Instances are collected wherever they sit under the root."""
        events = parse_events(
            "<file><a><instance><code>X</code></instance></a>"
            "<b><c><instance><code>Y</code></instance></c></b></file>"
        )
        assert [e.code for e in events] == ["X", "Y"]

    def test_extract_from_element(self) -> None:
        """extract_events works on an already-parsed tree."""
        root = ET.fromstring(_wrap("<instance><code>Gol</code></instance>"))
        assert [e.code for e in extract_events(root)] == ["Gol"]


# ------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------


class TestDefaults:
    """Missing or malformed optional fields fall back to defaults."""

    def test_empty_instance(self) -> None:
        """An empty instance yields all defaults."""
        (event,) = parse_events(_wrap("<instance/>"))
        assert event.event_id == "0"
        assert event.code == ""
        assert event.start == 0.0
        assert event.end == 0.0
        assert event.team is None
        assert event.period_label is None

    def test_positional_id(self) -> None:
        """Missing IDs fall back to the zero-based position."""
        events = parse_events(
            _wrap(
                "<instance><ID>abc</ID></instance>",
                "<instance></instance>",
                "<instance><ID></ID></instance>",
            )
        )
        assert [e.event_id for e in events] == ["abc", "1", "2"]

    @pytest.mark.parametrize("raw", ["abc", "12,5", "nan", "inf", "  "])
    def test_unparseable_seconds(self, raw: str) -> None:
        """Unparseable or non-finite times become 0.0."""
        (event,) = parse_events(
            _wrap(f"<instance><start>{raw}</start><end>{raw}</end></instance>")
        )
        assert event.start == 0.0
        assert event.end == 0.0

    def test_unparseable_seconds_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A warning names the offending instance."""
        with caplog.at_level(logging.WARNING, logger="matchreport.adapters.livetag"):
            parse_events(_wrap("<instance><ID>9</ID><start>oops</start></instance>"))
        assert "Instance 9" in caplog.text

    def test_whitespace_around_seconds(self) -> None:
        """Surrounding whitespace does not prevent parsing."""
        (event,) = parse_events(
            _wrap("<instance><start> 3.5 </start><end>\n7</end></instance>")
        )
        assert event.start == 3.5
        assert event.end == 7.0

    def test_empty_label_text_is_absent(self) -> None:
        """A label with empty text does not set the attribute."""
        (event,) = parse_events(
            _wrap(
                "<instance><code>Gol</code>"
                "<label><group>Team</group><text></text></label></instance>"
            )
        )
        assert event.team is None


# ------------------------------------------------------------------
# Labels
# ------------------------------------------------------------------


class TestLabels:
    """Label pairs are read by group with first-wins semantics."""

    def test_first_label_of_group_wins(self) -> None:
        """Later labels of the same group are ignored."""
        (event,) = parse_events(
            _wrap(
                "<instance><code>Gol</code>"
                "<label><group>Team</group><text>Adversario</text></label>"
                "<label><group>Label</group><text>2º Tempo</text></label>"
                "<label><group>Team</group><text>Coimbra Fc Porto</text></label>"
                "<label><group>Label</group><text>1º Tempo</text></label>"
                "</instance>"
            )
        )
        assert event.team == "Adversario"
        assert event.period_label == "2º Tempo"

    def test_other_groups_ignored(self) -> None:
        """Groups other than Team and Label carry no attribution."""
        (event,) = parse_events(
            _wrap(
                "<instance><code>Gol</code>"
                "<label><group>Player</group><text>10</text></label>"
                "</instance>"
            )
        )
        assert event.team is None
        assert event.period_label is None

    def test_group_match_is_exact(self) -> None:
        """Group names are compared verbatim."""
        (event,) = parse_events(
            _wrap(
                "<instance><code>Gol</code>"
                "<label><group>team</group><text>Adversario</text></label>"
                "</instance>"
            )
        )
        assert event.team is None


# ------------------------------------------------------------------
# Structural errors
# ------------------------------------------------------------------


class TestParseErrors:
    """Only documents that are not well-formed raise ParseError."""

    @pytest.mark.parametrize(
        "document",
        ["", "not xml at all", "<file><instance></file>", "{\"instances\": []}"],
    )
    def test_malformed_raises(self, document: str) -> None:
        """Malformed input raises ParseError."""
        with pytest.raises(ParseError):
            parse_events(document)

    def test_cause_preserved(self) -> None:
        """The underlying XML error is chained."""
        with pytest.raises(ParseError) as exc_info:
            parse_events("<broken")
        assert isinstance(exc_info.value.__cause__, ET.ParseError)

    def test_no_instances(self, empty_export: str) -> None:
        """A well-formed document without instances yields no events."""
        assert parse_events(empty_export) == []

    def test_bytes_input(self, sample_export: str) -> None:
        """Encoded bytes parse the same as text."""
        events = parse_events(sample_export.encode("utf-8"))
        assert events == parse_events(sample_export)


# ------------------------------------------------------------------
# Adapter
# ------------------------------------------------------------------


class TestLiveTagAdapter:
    """LiveTagAdapter satisfies EventSource for files and text."""

    def test_satisfies_protocol(self) -> None:
        """The adapter is a runtime EventSource."""
        assert isinstance(LiveTagAdapter(), EventSource)

    def test_load_from_text(self, sample_export: str) -> None:
        """A str is treated as the document itself."""
        events = LiveTagAdapter().load_events(sample_export)
        assert len(events) == N_SAMPLE_EVENTS

    def test_load_from_file(self, tmp_path: Path, sample_export: str) -> None:
        """A Path is read from disk."""
        path = tmp_path / "match.xml"
        path.write_text(sample_export, encoding="utf-8")
        events = LiveTagAdapter().load_events(path)
        assert events == parse_events(sample_export)
        assert events[4].code == "Posse de Bola Adversário"

    def test_missing_file(self, tmp_path: Path) -> None:
        """An unreadable path surfaces as OSError."""
        with pytest.raises(OSError):
            LiveTagAdapter().load_events(tmp_path / "missing.xml")

    def test_malformed_file(self, tmp_path: Path) -> None:
        """A malformed file raises ParseError."""
        path = tmp_path / "bad.xml"
        path.write_text("<file><instance>", encoding="utf-8")
        with pytest.raises(ParseError):
            LiveTagAdapter().load_events(path)
