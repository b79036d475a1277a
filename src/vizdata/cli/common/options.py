"""Common CLI options and arguments."""

import typer

FileArg = typer.Argument(
    ...,
    help="JSON table document ('-' reads stdin)",
    show_default=False,
)

FormatOpt = typer.Option(
    "json",
    "--format",
    "-f",
    envvar="VIZDATA_FORMAT",
    help="Output format",
)

SortOpt = typer.Option(
    None,
    "--sort",
    "-s",
    help="Column to sort rows by (column id or zero-based index)",
)

OrderOpt = typer.Option(
    "ascending",
    "--order",
    envvar="VIZDATA_SORT_ORDER",
    help="Sort order: ascending/asc or descending/desc",
)

OutputOpt = typer.Option(
    None,
    "--output",
    "-o",
    help="Write the output to a file instead of stdout",
    dir_okay=False,
    writable=True,
)

IndentOpt = typer.Option(
    None,
    "--indent",
    help="Indent JSON output by this many spaces",
    min=0,
)

LimitOpt = typer.Option(
    None,
    "--limit",
    "-n",
    help="Show at most this many rows",
    min=0,
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable debug logging",
)
