import pytest

from vizdata.core.cell import Cell
from vizdata.core.column import DataColumn
from vizdata.core.errors import StateError
from vizdata.core.row import DataRow
from vizdata.core.values import ColumnType


def test_cell_is_closed_after_construction():
    cell = Cell(1, "one", {"style": "bold"})

    assert cell.closed is True
    with pytest.raises(StateError, match="closed Cell"):
        cell.value = 2
    assert cell.value == 1


def test_cell_properties_are_read_only():
    cell = Cell(1, properties={"a": 1})

    with pytest.raises(TypeError):
        cell.properties["a"] = 2  # type: ignore[index]


def test_cell_rejects_non_string_formatted_value():
    with pytest.raises(ValueError, match="Formatted value"):
        Cell(1, formatted_value=1)  # type: ignore[arg-type]


def test_cell_from_obj_accepts_wire_and_long_keys():
    assert Cell.from_obj({"v": 1, "f": "1.0"}) == Cell(1, "1.0")
    assert Cell.from_obj({"value": 2, "properties": {"k": "v"}}) == Cell(
        2, properties={"k": "v"}
    )
    assert Cell.from_obj("raw") == Cell("raw")


def test_cell_from_obj_returns_existing_cell():
    cell = Cell(5)
    assert Cell.from_obj(cell) is cell


def test_column_from_mapping():
    col = DataColumn.from_obj({"id": "age", "label": "Age", "type": "Number"})

    assert (col.id, col.label, col.type) == ("age", "Age", ColumnType.NUMBER)
    assert col.closed is True


def test_column_from_tuple_and_bare_string():
    assert DataColumn.from_obj(("age", "number", "Age")).label == "Age"
    bare = DataColumn.from_obj("name")
    assert (bare.id, bare.label, bare.type) == ("name", "", ColumnType.STRING)


@pytest.mark.parametrize("spec", [42, (), ("a", "string", "A", "extra"), {"type": "nope"}])
def test_column_rejects_malformed_specs(spec):
    with pytest.raises(ValueError):
        DataColumn.from_obj(spec)


def test_column_is_immutable():
    col = DataColumn("x")
    with pytest.raises(StateError):
        col.label = "X"


def test_row_from_values_and_cells():
    row = DataRow(["a", Cell(1, "one")])

    assert row.cells_count == 2
    assert row.cell(0) == Cell("a")
    assert row.cell(1).formatted_value == "one"
    assert row.values() == ["a", 1]


def test_row_from_single_bare_value():
    row = DataRow(7)

    assert row.cells_count == 1
    assert row.cell(0).value == 7


def test_row_cell_out_of_range_raises_index_error():
    row = DataRow([1, 2])

    with pytest.raises(IndexError):
        row.cell(2)


def test_row_is_closed():
    row = DataRow([1])

    assert row.closed is True
    with pytest.raises(StateError):
        row._cells = ()


def test_cell_mapping_without_known_keys_raises():
    with pytest.raises(ValueError, match="Cell mapping needs one of"):
        Cell.from_obj({"x": 1})


def test_row_accepts_wire_mapping():
    row = DataRow({"c": [{"v": 1}, 2]})

    assert row.values() == [1, 2]


def test_row_wire_mapping_requires_cell_list():
    with pytest.raises(ValueError, match="must be a list"):
        DataRow({"c": 5})


@pytest.mark.parametrize("bad_id", [0, False])
def test_column_mapping_rejects_falsy_non_string_id(bad_id):
    with pytest.raises(ValueError, match="Column id must be a string"):
        DataColumn.from_obj({"id": bad_id})


def test_column_mapping_null_id_and_label_become_empty():
    column = DataColumn.from_obj({"id": None, "label": None, "type": "number"})

    assert column.id == ""
    assert column.label == ""
    assert column.type is ColumnType.NUMBER
