"""Cell: a single value entry within a row."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from vizdata.core.element import DataElement

_CELL_KEYS = frozenset({"v", "value", "f", "formatted_value", "p", "properties"})


class Cell(DataElement):
    """
    A single value with optional display formatting and metadata.

    Attributes:
        value: The raw value (any serializable scalar, or None).
        formatted_value: Optional display string for the value.
        properties: Optional read-only mapping of arbitrary metadata.

    A cell is closed as soon as it is constructed.
    """

    value: Any
    formatted_value: str | None
    properties: Mapping[str, Any] | None

    def __init__(
        self,
        value: Any = None,
        formatted_value: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ):
        if formatted_value is not None and not isinstance(formatted_value, str):
            raise ValueError(
                f"Formatted value must be a string, got {type(formatted_value).__name__}"
            )
        if properties is not None and not isinstance(properties, Mapping):
            raise ValueError(
                f"Cell properties must be a mapping, got {type(properties).__name__}"
            )
        self.value = value
        self.formatted_value = formatted_value
        self.properties = (
            MappingProxyType(dict(properties)) if properties is not None else None
        )
        self.close()

    @classmethod
    def from_obj(cls, obj: Any) -> Cell:
        """
        Normalize a cell specification into a Cell.

        Accepts a Cell (returned as is), a mapping with `v`/`value`,
        `f`/`formatted_value` and `p`/`properties` keys (at least one of them),
        or any other value, which becomes the cell value.
        """
        if isinstance(obj, Cell):
            return obj
        if isinstance(obj, Mapping):
            if not _CELL_KEYS.intersection(obj):
                raise ValueError(
                    f"Cell mapping needs one of {sorted(_CELL_KEYS)}, got {sorted(map(str, obj))}"
                )
            return cls(
                value=obj.get("v", obj.get("value")),
                formatted_value=obj.get("f", obj.get("formatted_value")),
                properties=obj.get("p", obj.get("properties")),
            )
        return cls(obj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (
            self.value == other.value
            and self.formatted_value == other.formatted_value
            and self.properties == other.properties
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = [repr(self.value)]
        if self.formatted_value is not None:
            parts.append(f"formatted_value={self.formatted_value!r}")
        if self.properties:
            parts.append(f"properties={dict(self.properties)!r}")
        return f"Cell({', '.join(parts)})"
