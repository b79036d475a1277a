import json

import pytest
from typer.testing import CliRunner

from vizdata.cli.cli import app

runner = CliRunner()


@pytest.fixture
def table_file(tmp_path, people):
    path = tmp_path / "people.json"
    path.write_text(people.dump("json"), encoding="utf-8")
    return path


def _values(output: str) -> list[list]:
    doc = json.loads(output)
    return [[c["v"] for c in r["c"]] for r in doc["rows"]]


def test_dump_prints_json(table_file):
    result = runner.invoke(app, ["table", "dump", str(table_file)])

    assert result.exit_code == 0
    assert _values(result.stdout) == [["Alice", 30], ["Bob", 25]]


def test_dump_sorted_by_column_id(table_file):
    result = runner.invoke(
        app, ["table", "dump", str(table_file), "--sort", "age", "--order", "desc"]
    )

    assert result.exit_code == 0
    assert _values(result.stdout) == [["Alice", 30], ["Bob", 25]]


def test_dump_sorted_by_column_index(table_file):
    result = runner.invoke(app, ["table", "dump", str(table_file), "--sort", "1"])

    assert result.exit_code == 0
    assert _values(result.stdout) == [["Bob", 25], ["Alice", 30]]


def test_dump_writes_output_file(table_file, tmp_path):
    target = tmp_path / "out.json"
    result = runner.invoke(
        app, ["table", "dump", str(table_file), "--indent", "2", "-o", str(target)]
    )

    assert result.exit_code == 0
    assert _values(target.read_text(encoding="utf-8")) == [["Alice", 30], ["Bob", 25]]


def test_dump_unknown_format_exits_with_error(table_file):
    result = runner.invoke(app, ["table", "dump", str(table_file), "--format", "xml"])

    assert result.exit_code == 2
    assert "invalid format" in result.output


def test_dump_unknown_sort_column_exits_with_error(table_file):
    result = runner.invoke(app, ["table", "dump", str(table_file), "--sort", "email"])

    assert result.exit_code == 2
    assert "Unknown column" in result.output


def test_dump_reads_stdin(people):
    result = runner.invoke(app, ["table", "dump", "-"], input=people.dump("json"))

    assert result.exit_code == 0
    assert _values(result.stdout) == [["Alice", 30], ["Bob", 25]]


def test_missing_file_exits_with_error(tmp_path):
    result = runner.invoke(app, ["table", "info", str(tmp_path / "nope.json")])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_invalid_document_exits_with_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{broken", encoding="utf-8")

    result = runner.invoke(app, ["table", "info", str(path)])

    assert result.exit_code == 1
    assert "Invalid table document" in result.output


def test_undecodable_file_exits_with_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b"\xff\xfe\xfa{")

    result = runner.invoke(app, ["table", "info", str(path)])

    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_info_shows_counts_and_schema(table_file):
    result = runner.invoke(app, ["table", "info", str(table_file)])

    assert result.exit_code == 0
    assert "Rows" in result.output
    assert "LOCKED" in result.output
    assert "age" in result.output


def test_show_renders_rows(table_file):
    result = runner.invoke(app, ["table", "show", str(table_file), "--sort", "age"])

    assert result.exit_code == 0
    assert result.output.index("Bob") < result.output.index("Alice")


def test_sort_uses_selected_column(monkeypatch, table_file):
    monkeypatch.setattr("vizdata.cli.commands.tables.select_sort_column", lambda t: 1)

    result = runner.invoke(app, ["table", "sort", str(table_file)])

    assert result.exit_code == 0
    assert _values(result.stdout) == [["Bob", 25], ["Alice", 30]]


def test_sort_cancelled_prompt_exits_cleanly(monkeypatch, table_file):
    monkeypatch.setattr("vizdata.cli.commands.tables.select_sort_column", lambda t: None)

    result = runner.invoke(app, ["table", "sort", str(table_file)])

    assert result.exit_code == 0
    assert "No column selected" in result.output


def test_formats_lists_json():
    result = runner.invoke(app, ["formats"])

    assert result.exit_code == 0
    assert "json" in result.stdout.split()
