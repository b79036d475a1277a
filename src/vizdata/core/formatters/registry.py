"""Format name to formatter registry."""

from __future__ import annotations

import logging

from vizdata.core.errors import FormatError
from vizdata.core.formatters.base import TableFormatter
from vizdata.core.formatters.json_format import JsonFormatter

logger = logging.getLogger(__name__)

_FORMATTERS: dict[str, TableFormatter] = {
    "json": JsonFormatter(),
}


def _normalize(name: str) -> str:
    return str(name).strip().lower()


def register_formatter(name: str, formatter: TableFormatter) -> None:
    """
    Register (or replace) the formatter used for a format name.

    Raises:
        ValueError: If the name is empty or formatter is not a TableFormatter.
    """
    key = _normalize(name)
    if not key:
        raise ValueError("Format name must not be empty")
    if not isinstance(formatter, TableFormatter):
        raise ValueError(
            f"Formatter must be a TableFormatter, got {type(formatter).__name__}"
        )
    if key in _FORMATTERS:
        logger.debug("Replacing formatter for format '%s'", key)
    _FORMATTERS[key] = formatter


def get_formatter(name: str) -> TableFormatter:
    """
    Return the formatter registered for a format name (case-insensitive).

    Raises:
        FormatError: If no formatter is registered under that name.
    """
    try:
        return _FORMATTERS[_normalize(name)]
    except KeyError:
        raise FormatError(f"invalid format: '{name}'") from None


def available_formats() -> list[str]:
    """Return the registered format names, sorted."""
    return sorted(_FORMATTERS)
