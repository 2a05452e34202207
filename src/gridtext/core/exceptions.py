"""Custom exceptions for GridText."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.table import TextTable


class GridTextError(Exception):
    """Base exception for all GridText errors."""

    pass


class TableIndexError(GridTextError, IndexError):
    """Raised when a row or column index is outside the table."""

    pass


class TableValueError(GridTextError, ValueError):
    """Raised when an argument would break the table's invariants."""

    pass


class InvalidReferenceError(TableValueError):
    """Raised when a cell reference is negative or its notation is malformed."""

    pass


class ConfigurationError(GridTextError):
    """Raised when a configuration override names an unknown option.

    Invalid values for known options raise pydantic's ``ValidationError``.
    """

    pass


class CSVParseError(GridTextError):
    """Raised when CSV content cannot be fully tokenized.

    The rows parsed before the failure are kept in ``table_so_far`` and the
    unconsumed text in ``remainder``, so callers can report the exact failure
    point or recover the partial result.
    """

    def __init__(
        self,
        message: str,
        table_so_far: "TextTable",
        remainder: str,
        position: int,
    ):
        super().__init__(message)
        self.table_so_far = table_so_far
        self.remainder = remainder
        self.position = position
