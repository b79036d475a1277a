"""Commands for inspecting, sorting and serializing data tables."""

from pathlib import Path

import typer

from vizdata.cli.common.context import read_table, sort_table
from vizdata.cli.common.exits import die, exit_from_exc, warn_exit
from vizdata.cli.common.logs import configure_logging
from vizdata.cli.common.options import (
    FileArg,
    FormatOpt,
    IndentOpt,
    LimitOpt,
    OrderOpt,
    OutputOpt,
    SortOpt,
    VerboseOpt,
)
from vizdata.cli.common.output import out
from vizdata.cli.tui import select_sort_column
from vizdata.core.errors import FormatError
from vizdata.core.formatters.json_format import JsonFormatter
from vizdata.core.formatters.registry import get_formatter
from vizdata.core.table import DataTable, SortOrder

app = typer.Typer(
    help="Inspect, sort and serialize data tables",
    no_args_is_help=True,
)


@app.callback()
def _init(verbose: bool = VerboseOpt):
    """Configure logging for table commands."""
    configure_logging(verbose)


def _serialize(table: DataTable, fmt: str, indent: int | None) -> str:
    """Render with the registered formatter; JSON honours --indent."""
    try:
        formatter = get_formatter(fmt)
    except FormatError as exc:
        exit_from_exc(exc, message=f"{exc}", code=2)
    if indent is not None and isinstance(formatter, JsonFormatter):
        formatter = JsonFormatter(indent=indent)
    return formatter.render(table)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        out.raw(text)
        return
    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        exit_from_exc(exc, message=f"Cannot write {output}: {exc.strerror or exc}")
    out.success(f"Wrote {output}")


@app.command()
def info(file: str = FileArg):
    """
    Show row/column counts and the column schema.
    """
    table = read_table(file)

    out.kv(
        {
            "Columns": table.columns_count,
            "Rows": table.rows_count,
            "State": table.state.value,
        }
    )
    if table.columns_count:
        out.schema_table(table)


@app.command()
def show(
    file: str = FileArg,
    sort: str | None = SortOpt,
    order: str = OrderOpt,
    limit: int | None = LimitOpt,
):
    """
    Render the table in the terminal.
    """
    table = read_table(file)

    if table.columns_count == 0:
        warn_exit("Table has no columns", code=0)

    if sort is not None:
        sort_table(table, sort, order)

    out.data_table(table, title=Path(file).name if file != "-" else None, limit=limit)


@app.command()
def dump(
    file: str = FileArg,
    fmt: str = FormatOpt,
    sort: str | None = SortOpt,
    order: str = OrderOpt,
    output: Path | None = OutputOpt,
    indent: int | None = IndentOpt,
):
    """
    Serialize the table, optionally after sorting it.
    """
    table = read_table(file)

    if sort is not None:
        sort_table(table, sort, order)

    _emit(_serialize(table, fmt, indent), output)


@app.command()
def sort(
    file: str = FileArg,
    order: str = OrderOpt,
    output: Path | None = OutputOpt,
    indent: int | None = IndentOpt,
):
    """
    Pick a sort column interactively, then print the sorted JSON.
    """
    try:
        order_value = SortOrder.parse(order)
    except ValueError as e:
        die(str(e), code=2)

    table = read_table(file)

    if table.columns_count == 0:
        warn_exit("Table has no columns", code=0)

    index = select_sort_column(table)
    if index is None:
        warn_exit("No column selected", code=0)

    sort_table(table, index, order_value)
    _emit(_serialize(table, "json", indent), output)
