"""GridText - string tables with CSV I/O and A1/R1C1 cell references."""

__version__ = "0.1.0"

from gridtext.config import Config
from gridtext.core.exceptions import (
    ConfigurationError,
    CSVParseError,
    GridTextError,
    InvalidReferenceError,
    TableIndexError,
    TableValueError,
)
from gridtext.gridtext import GridText
from gridtext.models import REF_ERROR, BaseTable, CellReference, TableLike, TextTable
from gridtext.readers import CSVReader, parse_csv, read_csv
from gridtext.writers import CSVWriter, to_csv, write_csv

__all__ = [
    "GridText",
    "Config",
    "TextTable",
    "BaseTable",
    "TableLike",
    "CellReference",
    "REF_ERROR",
    "CSVReader",
    "CSVWriter",
    "parse_csv",
    "read_csv",
    "to_csv",
    "write_csv",
    "GridTextError",
    "TableIndexError",
    "TableValueError",
    "InvalidReferenceError",
    "CSVParseError",
    "ConfigurationError",
]
