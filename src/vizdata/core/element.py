"""Shared closeable lifecycle for table elements."""

from __future__ import annotations

from typing import Any

from vizdata.core.errors import StateError


class DataElement:
    """
    Base class for cells, columns and rows.

    An element is mutable while it is being built. Once closed, any
    attribute assignment raises StateError. There is no way to reopen it.
    """

    _closed: bool = False

    @property
    def closed(self) -> bool:
        """Whether the element rejects further modification."""
        return self._closed

    def close(self) -> None:
        """Mark the element as closed (idempotent)."""
        object.__setattr__(self, "_closed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._closed:
            raise StateError(
                f"Can't modify closed {type(self).__name__} (attribute '{name}')"
            )
        object.__setattr__(self, name, value)
