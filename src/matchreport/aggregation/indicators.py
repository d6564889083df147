"""Stat categories and two-sided indicator counting.

Holds the fixed, order-sensitive category table and the rule that
decides whether a tagged interval counts towards a side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from matchreport.text import normalize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from matchreport.adapters.schemas import TagEvent

# ------------------------------------------------------------------
# Dataclasses
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StatCategory:
    """One entry of the indicator taxonomy.

    Attributes:
        label: Display name of the indicator.
        code: Tag code counted for this indicator.
    """

    label: str
    code: str


@dataclass(frozen=True, slots=True)
class StatRow:
    """One indicator's two-sided tally.

    Attributes:
        label: Display name of the indicator.
        coimbra: Count for the home side.
        adversario: Count for the opponent.
    """

    label: str
    coimbra: int
    adversario: int

    @property
    def total(self) -> int:
        """Sum of both sides."""
        return self.coimbra + self.adversario

    def __add__(self, other: StatRow) -> StatRow:
        if not isinstance(other, StatRow):
            return NotImplemented
        if other.label != self.label:
            msg = f"Cannot add indicator {other.label!r} to {self.label!r}"
            raise ValueError(msg)
        return StatRow(
            label=self.label,
            coimbra=self.coimbra + other.coimbra,
            adversario=self.adversario + other.adversario,
        )


# ------------------------------------------------------------------
# Constants
# ------------------------------------------------------------------

CATEGORIES: tuple[StatCategory, ...] = (
    StatCategory("Gol", "Gol"),
    StatCategory("Finalização", "Finalização"),
    StatCategory("Finalização no Gol", "Finalização no Gol"),
    StatCategory("Finalização Fora/Bloq.", "Finalização Para Fora/Bloqueada"),
    StatCategory("Cruzamento", "Cruzamento"),
    StatCategory("Impedimento", "Impedimento"),
    StatCategory("Falta Cometida", "Falta Cometida"),
    StatCategory("Escanteio", "Escanteio"),
    StatCategory("Tiro de Meta", "Tiro de Meta"),
    StatCategory("Cartão Amarelo", "Cartão Amarelo"),
    StatCategory("Cartão Vermelho", "Cartão Vermelho"),
)

CATEGORY_LABELS: tuple[str, ...] = tuple(c.label for c in CATEGORIES)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------


def matches_side(event: TagEvent, side: str) -> bool:
    """Return whether *event* is attributed to *side*.

    Either the ``Team`` label names the side, or the side name appears
    inside the code itself (some exports use combined labels such as
    ``"Gol Adversario"``). Both checks are always evaluated.

    Args:
        event: Tagged interval to test.
        side: Side name as configured.

    Returns:
        True if either check holds.
    """
    target = normalize(side)
    by_team = event.team is not None and normalize(event.team) == target
    return by_team or target in normalize(event.code)


def count_category(events: Iterable[TagEvent], code: str, side: str) -> int:
    """Count events with code *code* attributed to *side*.

    Args:
        events: Events of a single period.
        code: Category code to match (accent- and case-insensitive).
        side: Side name as configured.

    Returns:
        Number of matching events.
    """
    wanted = normalize(code)
    return sum(
        1 for e in events if normalize(e.code) == wanted and matches_side(e, side)
    )


def tally_indicators(
    events: Iterable[TagEvent],
    home_team: str,
    away_team: str,
) -> tuple[StatRow, ...]:
    """Build one :class:`StatRow` per category, in category order.

    Args:
        events: Events of a single period.
        home_team: Home side name.
        away_team: Opponent side name.

    Returns:
        Complete tuple of rows, one per entry of :data:`CATEGORIES`.
    """
    pool = list(events)
    return tuple(
        StatRow(
            label=category.label,
            coimbra=count_category(pool, category.code, home_team),
            adversario=count_category(pool, category.code, away_team),
        )
        for category in CATEGORIES
    )
