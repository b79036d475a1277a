"""DataRow: a fixed-length sequence of cells."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from vizdata.core.cell import Cell
from vizdata.core.element import DataElement


class DataRow(DataElement):
    """
    An ordered, fixed-length sequence of Cells, one per table column.

    A row is built from a list (or tuple) of raw values and/or Cells, a
    wire-form mapping `{"c": [...]}`, or a single bare value for a
    one-cell row. It is closed after construction; the cell count never
    changes.
    """

    def __init__(self, cells: Any):
        if isinstance(cells, Mapping) and "c" in cells:
            cells = cells["c"]
            if not isinstance(cells, (list, tuple)):
                raise ValueError("Row mapping 'c' must be a list of cells")
        if isinstance(cells, (list, tuple)):
            items = cells
        else:
            items = [cells]
        self._cells: tuple[Cell, ...] = tuple(Cell.from_obj(c) for c in items)
        self.close()

    @classmethod
    def from_obj(cls, obj: Any) -> DataRow:
        """Return obj if it is already a DataRow, otherwise build one from it."""
        if isinstance(obj, DataRow):
            return obj
        return cls(obj)

    @property
    def cells_count(self) -> int:
        return len(self._cells)

    def cell(self, index: int) -> Cell:
        """Return the cell at index (IndexError if out of range)."""
        return self._cells[index]

    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    def values(self) -> list[Any]:
        """Return the raw cell values in column order."""
        return [c.value for c in self._cells]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataRow):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DataRow({list(self._cells)!r})"
