"""DataTable: a two-dimensional, mutable table of typed values.

Columns define the schema and rows hold one cell per column. The table
follows a schema-then-data lifecycle: columns may only be added while the
table is OPEN (no rows yet); the first appended row moves it to LOCKED,
after which the column set is frozen for good.

The table is not thread-safe. Callers sharing a table across threads must
serialize every mutating call (add_column(s), add_row(s), sort_rows)
themselves. Mutating the table while iterating over columns() or rows()
is not allowed.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Sequence

from vizdata.core.cell import Cell
from vizdata.core.column import DataColumn
from vizdata.core.errors import ComparisonError, SchemaError, StateError
from vizdata.core.formatters.registry import get_formatter
from vizdata.core.row import DataRow
from vizdata.core.values import check_comparable, sort_key

logger = logging.getLogger(__name__)


class TableState(str, Enum):
    """
    Schema lock state of a DataTable.

    Values:
        OPEN: No rows yet; columns may still be added.
        LOCKED: At least one row exists; the column set is frozen.
    """

    OPEN = "OPEN"
    LOCKED = "LOCKED"


class SortOrder(str, Enum):
    """Direction used by DataTable.sort_rows."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: SortOrder | str) -> SortOrder:
        """Return the SortOrder for an enum member or a name like 'asc'/'desc'."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized in ("ascending", "asc"):
            return cls.ASCENDING
        if normalized in ("descending", "desc"):
            return cls.DESCENDING
        raise ValueError(
            f"Invalid sort order: '{value}' (expected ascending or descending)"
        )


class DataTable:
    """
    Two-dimensional table with a fixed column schema and ordered rows.

    Args:
        columns: Optional initial column specifications, added first.
        rows: Optional initial row specifications, added after the columns.
        properties: Optional table-level metadata mapping.
    """

    def __init__(
        self,
        columns: Iterable[Any] | None = None,
        rows: Iterable[Any] | None = None,
        *,
        properties: Mapping[str, Any] | None = None,
    ):
        self._columns: list[DataColumn] = []
        self._rows: list[DataRow] = []
        self._state = TableState.OPEN
        if properties is not None and not isinstance(properties, Mapping):
            raise ValueError(
                f"Table properties must be a mapping, got {type(properties).__name__}"
            )
        self.properties = (
            MappingProxyType(dict(properties)) if properties is not None else None
        )
        if columns:
            self.add_columns(columns)
        if rows:
            self.add_rows(rows)

    @property
    def state(self) -> TableState:
        return self._state

    @property
    def columns_count(self) -> int:
        return len(self._columns)

    @property
    def rows_count(self) -> int:
        return len(self._rows)

    def column(self, index: int) -> DataColumn:
        """Return the column at index (IndexError if out of range)."""
        return self._columns[index]

    def row(self, index: int) -> DataRow:
        """Return the row at index (IndexError if out of range)."""
        return self._rows[index]

    def cell(self, row_index: int, column_index: int) -> Cell:
        """Return the cell at (row_index, column_index)."""
        return self.row(row_index).cell(column_index)

    def columns(self) -> Sequence[DataColumn]:
        """Return a read-only, order-preserving view of the columns."""
        return _ReadOnlyView(self._columns)

    def rows(self) -> Sequence[DataRow]:
        """Return a read-only, order-preserving view of the rows."""
        return _ReadOnlyView(self._rows)

    def column_index(self, column_id: str) -> int:
        """
        Return the position of the first column with the given id.

        Raises:
            KeyError: If no column has that id.
        """
        for i, col in enumerate(self._columns):
            if col.id == column_id:
                return i
        raise KeyError(column_id)

    def add_column(self, obj: Any) -> DataTable:
        """
        Append a single column and return the table.

        Raises:
            StateError: If the table already holds rows.
            ValueError: If obj is not a valid column specification.
        """
        if self._state is TableState.LOCKED:
            raise StateError("Can't modify columns of a table that already has rows")
        col = DataColumn.from_obj(obj)
        col.close()
        self._columns.append(col)
        return self

    def add_columns(self, objs: Iterable[Any]) -> DataTable:
        """Append columns one by one; earlier columns stay if a later one fails."""
        for obj in objs:
            self.add_column(obj)
        return self

    def add_row(self, obj: Any) -> DataTable:
        """
        Append a single row and return the table.

        The first successful call locks the column schema.

        Raises:
            SchemaError: If the row's cell count differs from columns_count.
        """
        row = DataRow.from_obj(obj)
        if row.cells_count != self.columns_count:
            raise SchemaError(
                f"Invalid row size: got {row.cells_count} cell(s), "
                f"table has {self.columns_count} column(s)"
            )
        row.close()
        self._rows.append(row)
        if self._state is TableState.OPEN:
            self._state = TableState.LOCKED
            logger.debug("Schema locked with %d column(s)", self.columns_count)
        return self

    def add_rows(self, objs: Iterable[Any]) -> DataTable:
        """Append rows one by one; earlier rows stay if a later one fails."""
        for obj in objs:
            self.add_row(obj)
        return self

    def sort_rows(
        self,
        column_index: int,
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> DataTable:
        """
        Sort the rows in place by the values of one column.

        The sort is stable in both directions: rows with equal values keep
        their relative order. Nulls sort first when ascending and last when
        descending.

        Args:
            column_index: Position of the column to sort by.
            order: SortOrder or its name ('ascending', 'asc', 'descending', 'desc').

        Raises:
            IndexError: If column_index is out of range.
            ComparisonError: If the column holds values that cannot be ordered
                against each other. Row order may be partially permuted then,
                but no row is lost or duplicated.
        """
        order = SortOrder.parse(order)
        if not -self.columns_count <= column_index < self.columns_count:
            raise IndexError(
                f"Column index {column_index} out of range "
                f"for {self.columns_count} column(s)"
            )

        check_comparable(r.cell(column_index).value for r in self._rows)
        try:
            self._rows.sort(
                key=lambda r: sort_key(r.cell(column_index).value),
                reverse=order is SortOrder.DESCENDING,
            )
        except TypeError as exc:
            raise ComparisonError(
                f"Cannot order values of column {column_index}: {exc}"
            ) from exc

        logger.debug(
            "Sorted %d row(s) by column %d (%s)",
            self.rows_count,
            column_index,
            order.value,
        )
        return self

    def dump(self, format: str) -> str:  # noqa: A002
        """
        Serialize the table to the named format (case-insensitive).

        Raises:
            FormatError: If no formatter is registered for the format.
        """
        formatter = get_formatter(format)
        logger.debug("Dumping table as %s with %s", format, type(formatter).__name__)
        return formatter.render(self)

    def __repr__(self) -> str:
        return (
            f"DataTable(columns={self.columns_count}, rows={self.rows_count}, "
            f"state={self._state.value})"
        )


class _ReadOnlyView(Sequence):
    """Live, read-only sequence over a list owned by a DataTable."""

    __slots__ = ("_items",)

    def __init__(self, items: list):
        self._items = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
