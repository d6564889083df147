"""Live Tag Pro export adapter for the Match Report Engine.

Implements the :class:`~matchreport.adapters.base.EventSource` protocol
for the tag-timeline XML export: a root holding repeated ``instance``
elements, each with ``code``, ``start``, ``end``, an optional ``ID``
and zero or more ``label`` elements carrying ``group``/``text`` pairs.
Unknown elements are ignored.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from pathlib import Path

from matchreport.adapters.schemas import PERIOD_GROUP, TEAM_GROUP, TagEvent
from matchreport.exceptions import ParseError

logger = logging.getLogger(__name__)


def _text_of(parent: ET.Element, tag: str) -> str:
    """Return the text of the first *tag* descendant, or ``""``."""
    element = parent.find(f".//{tag}")
    if element is None:
        return ""
    return "".join(element.itertext())


def _parse_seconds(raw: str, field_name: str, event_id: str) -> float:
    """Convert a ``start``/``end`` value to seconds, defaulting to 0.0."""
    if not raw.strip():
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            "Instance %s has unparseable %s %r; using 0.0", event_id, field_name, raw
        )
        return 0.0
    if not math.isfinite(value):
        logger.warning(
            "Instance %s has non-finite %s %r; using 0.0", event_id, field_name, raw
        )
        return 0.0
    return value


def _label_map(instance: ET.Element) -> dict[str, str]:
    """Collect the instance's ``label`` pairs into a group -> text mapping.

    The first label of each group wins; later labels of the same group
    are ignored.
    """
    labels: dict[str, str] = {}
    for label in instance.iter("label"):
        group = _text_of(label, "group")
        labels.setdefault(group, _text_of(label, "text"))
    return labels


def _build_event(instance: ET.Element, position: int) -> TagEvent:
    """Construct a :class:`TagEvent` from one ``instance`` element."""
    event_id = _text_of(instance, "ID") or str(position)
    labels = _label_map(instance)
    return TagEvent(
        event_id=event_id,
        code=_text_of(instance, "code"),
        start=_parse_seconds(_text_of(instance, "start"), "start", event_id),
        end=_parse_seconds(_text_of(instance, "end"), "end", event_id),
        team=labels.get(TEAM_GROUP) or None,
        period_label=labels.get(PERIOD_GROUP) or None,
    )


def extract_events(root: ET.Element) -> list[TagEvent]:
    """Extract every ``instance`` under *root* as a :class:`TagEvent`.

    Args:
        root: Parsed document root.

    Returns:
        Events in document order.
    """
    events = [
        _build_event(instance, position)
        for position, instance in enumerate(root.iter("instance"))
    ]
    logger.debug("Extracted %d instances", len(events))
    return events


def parse_events(document: str | bytes) -> list[TagEvent]:
    """Parse a raw Live Tag Pro export into events.

    Args:
        document: The export's XML text (or its encoded bytes).

    Returns:
        Events in document order; empty when the document holds no
        ``instance`` elements.

    Raises:
        ParseError: If *document* is not well-formed XML.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        msg = f"Export is not a well-formed tag-timeline document: {exc}"
        raise ParseError(msg) from exc
    return extract_events(root)


class LiveTagAdapter:
    """Adapter for loading Live Tag Pro exports from disk or memory.

    Satisfies the :class:`~matchreport.adapters.base.EventSource`
    protocol.  A :class:`~pathlib.Path` is read as a file; a ``str``
    is treated as the document text itself.
    """

    __slots__ = ()

    def load_events(self, source: str | Path) -> list[TagEvent]:
        """Load every tagged interval from an export.

        Args:
            source: Path to an export file, or the raw document text.

        Returns:
            List of :class:`TagEvent` in document order.

        Raises:
            ParseError: If the export is not a well-formed document.
            OSError: If *source* is a path that cannot be read.
        """
        return parse_events(self._read(source))

    @staticmethod
    def _read(source: str | Path) -> str | bytes:
        if isinstance(source, Path):
            logger.info("Reading export %s", source)
            return source.read_bytes()
        return source
