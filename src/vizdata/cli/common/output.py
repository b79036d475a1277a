"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import questionary
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from vizdata.cli.common.tui_style import QUESTIONARY_STYLE_SELECT
from vizdata.core.table import DataTable
from vizdata.core.values import ColumnType

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)

_RIGHT_ALIGNED = {ColumnType.NUMBER}


def cell_text(cell: Any) -> str:
    """Display text for a cell: its formatted value, or the raw value."""
    if cell.formatted_value is not None:
        return cell.formatted_value
    if cell.value is None:
        return ""
    return str(cell.value)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be VIZDATA consistent."""
        return f"[vizdata] {message}"

    def success(self, msg: str) -> None:
        """Print a success message."""
        err_console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        err_console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        err_console.print(f"[err]✗[/] {msg}")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def raw(self, text: str) -> None:
        """Write text verbatim to stdout (pipe-friendly, no Rich rendering)."""
        typer.echo(text)

    def select_one(self, message: str, choices: list[Any]) -> Any | None:
        """
        Prompt the user to select a single item from a list (radio list).

        Returns:
            The selected value, or None if cancelled.
        """
        if not choices:
            return None

        return questionary.select(
            self._q(message),
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            instruction="Use ↑/↓ then Enter",
        ).ask()

    def schema_table(self, table: DataTable, title: str = "Columns") -> None:
        """Render the column schema of a DataTable."""
        t = Table(title=title, show_lines=False)
        t.add_column("#", style="meta", no_wrap=True)
        t.add_column("ID", style="ok")
        t.add_column("Label")
        t.add_column("Type", style="meta")

        for i, col in enumerate(table.columns()):
            t.add_row(str(i), Text(col.id), Text(col.label), col.type.value)

        console.print(t)

    def data_table(
        self, table: DataTable, title: str | None = None, limit: int | None = None
    ) -> None:
        """
        Render the rows of a DataTable.

        Column headers use the label, falling back to the id. Cells show
        their formatted value when one is set.
        """
        t = Table(title=title, show_lines=False)
        for col in table.columns():
            t.add_column(
                Text(col.label or col.id),
                justify="right" if col.type in _RIGHT_ALIGNED else "left",
            )

        rows = table.rows()
        shown = rows if limit is None else rows[:limit]
        for row in shown:
            t.add_row(*(Text(cell_text(c)) for c in row))

        console.print(t)
        if limit is not None and len(rows) > limit:
            console.print(f"[meta]… {len(rows) - limit} more row(s)[/]")


out = Out()
