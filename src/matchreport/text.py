"""Accent-insensitive text normalization for tag matching.

Every comparison between codes, team names and period names goes
through :func:`normalize`; raw strings are never compared directly.
"""

from __future__ import annotations

import unicodedata


def normalize(value: str) -> str:
    """Return *value* without diacritics, lowercased and stripped.

    The string is decomposed (NFD) so that accented letters become a
    base letter followed by combining marks, which are then dropped.

    Args:
        value: Arbitrary label text, possibly empty.

    Returns:
        The canonical form used for matching (``"Cartão"`` becomes
        ``"cartao"``).
    """
    # Lowercase first: some uppercase letters lower into a base letter
    # plus a combining mark (e.g. "İ").
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()
