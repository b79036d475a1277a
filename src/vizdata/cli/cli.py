"""CLI application for vizdata tables."""

import typer

from vizdata.cli.commands.tables import app as tables_app
from vizdata.cli.common.output import out
from vizdata.core.formatters.registry import available_formats

app = typer.Typer(
    help="vizdata - typed data tables for visualization clients",
    no_args_is_help=True,
)

app.add_typer(tables_app, name="table", help="Inspect / sort / dump table documents.")


@app.command()
def formats():
    """
    List the registered output formats.
    """
    for name in available_formats():
        out.raw(name)


if __name__ == "__main__":
    app()
