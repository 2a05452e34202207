"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Any

import pytest

from gridtext.config import Config
from gridtext.models.table import TextTable


class SparseTable:
    """Minimal table-like object whose cells may be missing or hold None."""

    def __init__(self, height: int, width: int, cells: dict[tuple[int, int], Any]):
        self.height = height
        self.width = width
        self.cells = cells

    def cell_exists(self, row: int, col: int) -> bool:
        return (row, col) in self.cells

    def get(self, row: int, col: int) -> Any:
        return self.cells[(row, col)]


@pytest.fixture
def sample_rows() -> list[list[str]]:
    """Rows of a small, rectangular table."""
    return [
        ["Product", "Price", "Quantity"],
        ["Widget A", "19.99", "5"],
        ["Widget B", "29.99", "3"],
    ]


@pytest.fixture
def sample_table(sample_rows: list[list[str]]) -> TextTable:
    """A 3x3 table built from ``sample_rows``."""
    return TextTable.from_rows(sample_rows)


@pytest.fixture
def tricky_table() -> TextTable:
    """Table whose values need quoting when written as CSV."""
    return TextTable.from_rows(
        [
            ["plain", 'say "hi"', "a,b"],
            ["multi\nline", "", '"'],
            ["", "trailing space ", ",,"],
        ]
    )


@pytest.fixture
def make_sparse_table() -> type[SparseTable]:
    """Factory for custom sparse table-like objects."""
    return SparseTable


@pytest.fixture
def sparse_table() -> SparseTable:
    """Table-like object with gaps, None values and missing trailing cells."""
    return SparseTable(
        height=3,
        width=4,
        cells={
            (0, 0): "a",
            (0, 2): "c",
            (1, 1): None,
            (1, 3): 42,
            (2, 0): "x",
        },
    )


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    """CSV file with mixed line endings and a quoted CRLF inside a field."""
    path = tmp_path / "sample.csv"
    path.write_bytes(b'id,note\r\n1,"line one\r\nline two"\r2,plain\n')
    return path


@pytest.fixture
def default_config() -> Config:
    """Configuration with library defaults."""
    return Config()
