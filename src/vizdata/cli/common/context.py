"""Table loading and column resolution helpers for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from vizdata.cli.common.exits import die, exit_from_exc
from vizdata.core.errors import DataTableError
from vizdata.core.formatters.json_format import load_table
from vizdata.core.table import DataTable, SortOrder


def read_table(path: str) -> DataTable:
    """
    Load a DataTable from a JSON document on disk ('-' reads stdin).

    Exits with code 1 on I/O or document errors.
    """
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        exit_from_exc(exc, message=f"Cannot read {path}: {exc.strerror or exc}")
    except UnicodeDecodeError as exc:
        exit_from_exc(exc, message=f"Cannot read {path}: not valid UTF-8 ({exc.reason})")

    try:
        return load_table(text)
    except DataTableError as exc:
        exit_from_exc(exc, message=f"Invalid table document {path}: {exc}")


def resolve_column(table: DataTable, column: str | int) -> int:
    """
    Turn a column id or a zero-based index into a column position.

    For strings an exact id match wins over an index, so a column whose
    id is "0" is found by id. Integers are always positions.

    Raises:
        KeyError: If column is neither a known id nor a valid index.
    """
    if isinstance(column, int):
        index = column
    else:
        try:
            return table.column_index(column)
        except KeyError:
            pass
        try:
            index = int(column)
        except ValueError:
            raise KeyError(column) from None
    if not 0 <= index < table.columns_count:
        raise KeyError(column)
    return index


def sort_table(table: DataTable, column: str | int, order: SortOrder | str) -> None:
    """Sort table rows in place by a column id or index, exiting on errors."""
    try:
        order_value = SortOrder.parse(order)
    except ValueError as exc:
        die(str(exc), code=2)

    try:
        index = resolve_column(table, column)
    except KeyError:
        die(f"Unknown column: '{column}'", code=2)

    try:
        table.sort_rows(index, order_value)
    except DataTableError as exc:
        exit_from_exc(exc, message=str(exc))
