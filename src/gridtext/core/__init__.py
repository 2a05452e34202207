"""Core constants and exceptions for GridText."""

from .constants import CSV_FORMAT, REFERENCE
from .exceptions import (
    ConfigurationError,
    CSVParseError,
    GridTextError,
    InvalidReferenceError,
    TableIndexError,
    TableValueError,
)

__all__ = [
    "CSV_FORMAT",
    "REFERENCE",
    "GridTextError",
    "TableIndexError",
    "TableValueError",
    "InvalidReferenceError",
    "CSVParseError",
    "ConfigurationError",
]
