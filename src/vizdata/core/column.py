"""DataColumn: schema descriptor for one table column."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from vizdata.core.element import DataElement
from vizdata.core.values import ColumnType


class DataColumn(DataElement):
    """
    Describes one column of a DataTable.

    Attributes:
        id: Column identifier (may be empty).
        label: Display label (may be empty).
        type: Declared ColumnType of the column values.
        pattern: Optional display format pattern for the column values.
        properties: Optional read-only mapping of arbitrary metadata.
    """

    def __init__(
        self,
        id: str = "",  # noqa: A002
        type: ColumnType | str | None = ColumnType.STRING,  # noqa: A002
        label: str = "",
        *,
        pattern: str | None = None,
        properties: Mapping[str, Any] | None = None,
    ):
        if not isinstance(id, str):
            raise ValueError(f"Column id must be a string, got {type_name(id)}")
        if not isinstance(label, str):
            raise ValueError(f"Column label must be a string, got {type_name(label)}")
        if properties is not None and not isinstance(properties, Mapping):
            raise ValueError(
                f"Column properties must be a mapping, got {type_name(properties)}"
            )
        self.id = id
        self.type = ColumnType.parse(type)
        self.label = label
        self.pattern = pattern
        self.properties = (
            MappingProxyType(dict(properties)) if properties is not None else None
        )
        self.close()

    @classmethod
    def from_obj(cls, obj: Any) -> DataColumn:
        """
        Normalize a column specification into a DataColumn.

        Accepted forms:
          - a DataColumn (returned as is)
          - a mapping with `id`, `label`, `type`, `pattern` and `p`/`properties`
          - a tuple or list `(id, type[, label])`
          - a bare string, used as the id of a string column

        Raises:
            ValueError: If the specification has none of these shapes.
        """
        if isinstance(obj, DataColumn):
            return obj
        if isinstance(obj, Mapping):
            return cls(
                id=_or_empty(obj.get("id", "")),
                type=obj.get("type"),
                label=_or_empty(obj.get("label", "")),
                pattern=obj.get("pattern"),
                properties=obj.get("p", obj.get("properties")),
            )
        if isinstance(obj, (tuple, list)):
            if not 1 <= len(obj) <= 3:
                raise ValueError(
                    f"Column tuple must be (id, type[, label]), got {len(obj)} items"
                )
            return cls(*obj)
        if isinstance(obj, str):
            return cls(id=obj)
        raise ValueError(f"Invalid column specification: {obj!r}")

    def __repr__(self) -> str:
        return f"DataColumn(id={self.id!r}, type={self.type.value!r}, label={self.label!r})"


def type_name(obj: Any) -> str:
    """Return the class name of obj for error messages."""
    return type(obj).__name__


def _or_empty(value: Any) -> Any:
    """Map a JSON null to the empty string; anything else passes through."""
    return "" if value is None else value
