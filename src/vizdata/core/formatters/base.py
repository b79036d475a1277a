"""Formatter abstraction for serializing data tables.

A formatter is a stateless strategy that walks a DataTable's columns and
rows and produces an external wire representation. Formatters are looked
up by a case-insensitive format name through a registry; the DataTable
itself never knows which formats exist.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vizdata.core.table import DataTable


class TableFormatter(ABC):
    """
    Abstract base class for all table formatters.
    """

    name: str

    @abstractmethod
    def render(self, table: DataTable) -> str:
        """
        Serialize the table.

        Args:
            table: DataTable to serialize.

        Returns:
            The serialized document. Column order, row order and cell order
            are preserved exactly as stored.
        """
        ...
