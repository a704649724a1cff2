from __future__ import annotations

from typing import Any, Dict, Optional, Protocol


class DocumentStore(Protocol):
    """Key/document store the view counter is written against."""

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the document stored under ``key`` or None."""
        ...

    def set_merge(self, key: str, fields: Dict[str, Any]) -> None:
        """Write ``fields`` into the document, creating it if missing."""
        ...

    def increment(self, key: str, field: str, amount: int = 1) -> int:
        """Atomically add ``amount`` to ``field`` and return the new value.

        Raises ``CounterTypeError`` when the stored field is not numeric.
        """
        ...

    def ping(self) -> None:
        ...
