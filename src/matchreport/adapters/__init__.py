"""Export adapter layer for the Match Report Engine.

Re-exports the event schema, the adapter protocol and the Live Tag Pro
concrete adapter so that downstream code can import everything from
:mod:`matchreport.adapters`.
"""

from matchreport.adapters.base import EventSource
from matchreport.adapters.livetag import LiveTagAdapter, extract_events, parse_events
from matchreport.adapters.schemas import PERIOD_GROUP, TEAM_GROUP, TagEvent

__all__ = [
    "PERIOD_GROUP",
    "TEAM_GROUP",
    "EventSource",
    "LiveTagAdapter",
    "TagEvent",
    "extract_events",
    "parse_events",
]
