"""Abstract adapter protocol for annotation exports.

Defines the :class:`EventSource` structural interface that every
concrete export adapter must satisfy.  Adapters are responsible for:

* **Document parsing** -- turning the provider's file format into an
  ordered list of :class:`~matchreport.adapters.schemas.TagEvent`.
* **Field defaults** -- substituting best-effort values for missing
  or unparseable optional fields instead of failing.
* **Structural errors** -- raising
  :class:`~matchreport.exceptions.ParseError` when the input is not a
  document of the expected shape at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from matchreport.adapters.schemas import TagEvent


@runtime_checkable
class EventSource(Protocol):
    """Structural interface for annotation-export providers.

    Any class that implements the method below is a valid
    ``EventSource`` without needing to inherit from this class.
    """

    def load_events(self, source: str | Path) -> list[TagEvent]:
        """Load every tagged interval from an export.

        Args:
            source: Path to an export file, or the raw document text.

        Returns:
            List of :class:`TagEvent` in document order.

        Raises:
            ParseError: If the export is not a well-formed document.
        """
        ...
