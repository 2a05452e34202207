"""Data models for GridText."""

from .cell_reference import REF_ERROR, CellReference, transposed_compare
from .table import BaseTable, TableLike, TextTable

__all__ = [
    "CellReference",
    "REF_ERROR",
    "transposed_compare",
    "BaseTable",
    "TableLike",
    "TextTable",
]
