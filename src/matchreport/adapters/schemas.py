"""Internal event schema for the Match Report Engine.

Defines the canonical tagged-interval structure produced by every
adapter and consumed by the aggregation stage.
"""

from __future__ import annotations

from dataclasses import dataclass

TEAM_GROUP: str = "Team"
PERIOD_GROUP: str = "Label"


@dataclass(frozen=True, slots=True)
class TagEvent:
    """One annotated interval from a tag-timeline export.

    ``end >= start`` is expected but not enforced; a malformed export
    can yield a negative :attr:`duration`.

    Attributes:
        event_id: Identifier of the instance, unique within one parse.
        code: Free-text category label (e.g. ``"Gol"``,
            ``"Posse de Bola Coimbra"``).
        start: Interval start in seconds.
        end: Interval end in seconds.
        team: Team attribution from the ``Team`` label group, or
            ``None``.
        period_label: Period attribution from the ``Label`` label
            group, or ``None``.
    """

    event_id: str
    code: str
    start: float
    end: float
    team: str | None = None
    period_label: str | None = None

    @property
    def duration(self) -> float:
        """Interval length in seconds (``end - start``)."""
        return self.end - self.start
