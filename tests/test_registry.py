import pytest

from vizdata.core.errors import FormatError
from vizdata.core.formatters import registry
from vizdata.core.formatters.base import TableFormatter
from vizdata.core.formatters.json_format import JsonFormatter
from vizdata.core.table import DataTable


class _CountFormatter(TableFormatter):
    name = "count"

    def render(self, table: DataTable) -> str:
        return f"{table.columns_count}x{table.rows_count}"


@pytest.fixture
def clean_registry(monkeypatch):
    monkeypatch.setattr(registry, "_FORMATTERS", dict(registry._FORMATTERS))


def test_json_is_registered_by_default():
    assert isinstance(registry.get_formatter("json"), JsonFormatter)
    assert "json" in registry.available_formats()


def test_get_formatter_is_case_insensitive():
    assert registry.get_formatter(" Json ") is registry.get_formatter("json")


def test_get_formatter_unknown_name_raises_format_error():
    with pytest.raises(FormatError, match="invalid format"):
        registry.get_formatter("xml")


def test_registered_formatter_is_used_by_dump(clean_registry, people):
    registry.register_formatter("COUNT", _CountFormatter())

    assert people.dump("count") == "2x2"


def test_register_formatter_validates_input(clean_registry):
    with pytest.raises(ValueError, match="empty"):
        registry.register_formatter("  ", _CountFormatter())
    with pytest.raises(ValueError, match="TableFormatter"):
        registry.register_formatter("csv", object())  # type: ignore[arg-type]
