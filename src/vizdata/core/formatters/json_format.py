"""JSON wire format for data tables.

The document layout follows the visualization DataTable JSON literal:

    {
      "cols": [{"id": "name", "label": "Name", "type": "string"}, ...],
      "rows": [{"c": [{"v": "Alice"}, {"v": 30, "f": "30 yrs"}]}, ...],
      "p": {...}
    }

Dates are written as "Date(Y, M, D)" strings with a zero-based month,
datetimes as "Date(Y, M, D, h, m, s[, ms])" and times of day as
[h, m, s[, ms]] arrays. Optional keys (f, p, pattern) are omitted when
unset.

Temporal values carry millisecond precision and no timezone: microseconds
are truncated to whole milliseconds and tzinfo is dropped, so an aware
value is written in its own wall-clock time.
"""

from __future__ import annotations

import datetime as dt
import json
import re
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Mapping

from vizdata.core.errors import FormatError, SchemaError
from vizdata.core.formatters.base import TableFormatter
from vizdata.core.values import ColumnType

if TYPE_CHECKING:
    from vizdata.core.cell import Cell
    from vizdata.core.column import DataColumn
    from vizdata.core.table import DataTable

_DATE_RE = re.compile(r"^Date\(\s*(-?\d+(?:\s*,\s*\d+)*)\s*\)$")


def encode_value(value: Any) -> Any:
    """Convert a cell value to its JSON wire representation."""
    if isinstance(value, dt.datetime):
        parts = [
            value.year,
            value.month - 1,
            value.day,
            value.hour,
            value.minute,
            value.second,
        ]
        if value.microsecond:
            parts.append(value.microsecond // 1000)
        return f"Date({', '.join(str(p) for p in parts)})"
    if isinstance(value, dt.date):
        return f"Date({value.year}, {value.month - 1}, {value.day})"
    if isinstance(value, dt.time):
        parts = [value.hour, value.minute, value.second]
        if value.microsecond:
            parts.append(value.microsecond // 1000)
        return parts
    if isinstance(value, (Decimal, Fraction)):
        return float(value)
    return value


def decode_value(value: Any, column_type: ColumnType) -> Any:
    """
    Convert a wire value back into a Python value for the declared column type.

    Raises:
        FormatError: If a date/datetime/timeofday value is malformed.
    """
    if value is None:
        return None
    if column_type in (ColumnType.DATE, ColumnType.DATETIME):
        if not isinstance(value, str):
            raise FormatError(f"Invalid {column_type.value} value: {value!r}")
        m = _DATE_RE.match(value.strip())
        if not m:
            raise FormatError(f"Invalid {column_type.value} value: {value!r}")
        parts = [int(p) for p in m.group(1).split(",")]
        try:
            if column_type is ColumnType.DATE:
                year, month, day = parts[:3]
                return dt.date(year, month + 1, day)
            year, month, day, *rest = parts + [0] * max(0, 7 - len(parts))
            hour, minute, second, millis = rest[:4]
            return dt.datetime(year, month + 1, day, hour, minute, second, millis * 1000)
        except ValueError as exc:
            raise FormatError(f"Invalid {column_type.value} value: {value!r}") from exc
    if column_type is ColumnType.TIMEOFDAY:
        if not isinstance(value, list) or not 3 <= len(value) <= 4:
            raise FormatError(f"Invalid timeofday value: {value!r}")
        hour, minute, second, *millis = value
        try:
            return dt.time(hour, minute, second, (millis[0] if millis else 0) * 1000)
        except (TypeError, ValueError) as exc:
            raise FormatError(f"Invalid timeofday value: {value!r}") from exc
    return value


def column_to_dict(column: DataColumn) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": column.id,
        "label": column.label,
        "type": column.type.value,
    }
    if column.pattern is not None:
        data["pattern"] = column.pattern
    if column.properties:
        data["p"] = dict(column.properties)
    return data


def cell_to_dict(cell: Cell) -> dict[str, Any]:
    data: dict[str, Any] = {"v": encode_value(cell.value)}
    if cell.formatted_value is not None:
        data["f"] = cell.formatted_value
    if cell.properties:
        data["p"] = dict(cell.properties)
    return data


def table_to_dict(table: DataTable) -> dict[str, Any]:
    """Build the JSON-ready mapping for a table."""
    data: dict[str, Any] = {
        "cols": [column_to_dict(c) for c in table.columns()],
        "rows": [{"c": [cell_to_dict(c) for c in r]} for r in table.rows()],
    }
    if table.properties:
        data["p"] = dict(table.properties)
    return data


class JsonFormatter(TableFormatter):
    """Serialize a DataTable to the JSON wire format."""

    name = "json"

    def __init__(self, *, indent: int | None = None):
        self.indent = indent

    def render(self, table: DataTable) -> str:
        return json.dumps(table_to_dict(table), indent=self.indent, ensure_ascii=False)


def load_table(document: str | bytes | Mapping[str, Any]) -> DataTable:
    """
    Build a DataTable from a JSON wire document.

    Args:
        document: JSON text, or an already-parsed mapping.

    Returns:
        A new DataTable holding the document's columns and rows.

    Raises:
        FormatError: If the document is not valid JSON or lacks the
            expected structure.
        SchemaError: If a row's cell count differs from the column count.
    """
    # Imported here: table.py dispatches dump() through this package.
    from vizdata.core.table import DataTable

    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FormatError(f"Invalid JSON document: {exc}") from exc

    if not isinstance(document, Mapping):
        raise FormatError("Table document must be a JSON object")
    cols = document.get("cols", [])
    rows = document.get("rows", [])
    if not isinstance(cols, list) or not isinstance(rows, list):
        raise FormatError("Table document 'cols' and 'rows' must be arrays")

    try:
        table = DataTable(properties=document.get("p"))
        table.add_columns(cols)
    except ValueError as exc:
        raise FormatError(f"Invalid column: {exc}") from exc

    types = [c.type for c in table.columns()]
    for i, raw_row in enumerate(rows):
        cells = raw_row.get("c") if isinstance(raw_row, Mapping) else raw_row
        if not isinstance(cells, list):
            raise FormatError(f"Row {i} must be an object with a 'c' array")
        if len(cells) != len(types):
            raise SchemaError(
                f"Row {i} has {len(cells)} cell(s), table has {len(types)} column(s)"
            )
        try:
            table.add_row([_decode_cell(c, t) for c, t in zip(cells, types)])
        except ValueError as exc:
            raise FormatError(f"Invalid cell in row {i}: {exc}") from exc

    return table


def _decode_cell(raw: Any, column_type: ColumnType) -> dict[str, Any] | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        return {"v": decode_value(raw, column_type)}
    return {
        "v": decode_value(raw.get("v"), column_type),
        "f": raw.get("f"),
        "p": raw.get("p"),
    }
