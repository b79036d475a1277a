"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from vizdata.cli.common.output import err_console


def configure_logging(verbose: bool = False) -> None:
    """
    Route library logging through a Rich handler on stderr.

    The core only emits DEBUG records, so without --verbose the console
    stays quiet apart from warnings.
    """
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.addHandler(
        RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    )
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
