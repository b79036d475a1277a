"""Terminal UI utilities for vizdata."""

from __future__ import annotations

import questionary

from vizdata.cli.common.output import out
from vizdata.core.column import DataColumn
from vizdata.core.table import DataTable

_MAX_COLUMN_NAME_WIDTH = 64


def _truncate(text: str, max_len: int) -> str:
    """Return text capped at max_len characters using an ASCII ellipsis."""
    if max_len <= 3 or len(text) <= max_len:
        return text[:max_len]
    return f"{text[: max_len - 3]}..."


def _column_name(column: DataColumn, index: int) -> str:
    """Label, else id, else the position."""
    return column.label or column.id or f"column {index}"


def _column_choice_title(column: DataColumn, index: int, *, name_width: int) -> str:
    """Format one column choice as `<name>  (type: <type>)` with aligned type column."""
    short_name = _truncate(_column_name(column, index), _MAX_COLUMN_NAME_WIDTH)
    return f"{short_name.ljust(name_width)}  (type: {column.type.value})"


def select_sort_column(table: DataTable) -> int | None:
    """Prompt for the column to sort by.

    Args:
        table: Table whose columns are offered.

    Returns:
        The selected column position, or None if cancelled or no columns.
    """
    columns = list(table.columns())
    shown_names = [
        _truncate(_column_name(c, i), _MAX_COLUMN_NAME_WIDTH)
        for i, c in enumerate(columns)
    ]
    name_width = max((len(name) for name in shown_names), default=0)

    choices = [
        questionary.Choice(
            title=_column_choice_title(c, i, name_width=name_width),
            value=i,
        )
        for i, c in enumerate(columns)
    ]

    return out.select_one("Sort rows by:", choices)
