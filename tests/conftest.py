from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Import vizdata from the local src tree even when an older wheel is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from vizdata.core.table import DataTable  # noqa: E402


@pytest.fixture
def people() -> DataTable:
    return DataTable(
        columns=[
            {"id": "name", "label": "Name", "type": "string"},
            {"id": "age", "label": "Age", "type": "number"},
        ],
        rows=[["Alice", 30], ["Bob", 25]],
    )
