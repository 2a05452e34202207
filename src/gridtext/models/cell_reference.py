"""Cell reference model with A1 and R1C1 notation support.

A ``CellReference`` addresses one cell of a table by zero-based row and
column, the same convention ``TextTable`` uses. The distinguished
``REF_ERROR`` reference stands in for "no such cell": it sorts below every
valid reference, equals only itself and renders as ``#REF!``.
"""

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.constants import REFERENCE
from ..core.exceptions import InvalidReferenceError
from ..utils.excel_utils import column_index_from_letters, get_column_letter

_A1_RE = re.compile(REFERENCE.A1_PATTERN, re.IGNORECASE | re.ASCII)
_R1C1_RE = re.compile(REFERENCE.R1C1_PATTERN, re.IGNORECASE | re.ASCII)
_R1C1_LENIENT_RE = re.compile(REFERENCE.R1C1_LENIENT_PATTERN, re.IGNORECASE | re.ASCII)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class CellReference(BaseModel):
    """Immutable reference to a single table cell."""

    model_config = ConfigDict(frozen=True, strict=True)

    REF_ERROR: ClassVar["CellReference"]

    row: int = Field(..., ge=-1, description="Row index (0-based), -1 for #REF!")
    column: int = Field(..., ge=-1, description="Column index (0-based), -1 for #REF!")

    @model_validator(mode="after")
    def _check_coordinates(self) -> "CellReference":
        error_parts = (self.row == REFERENCE.ERROR_INDEX, self.column == REFERENCE.ERROR_INDEX)
        if any(error_parts) and not all(error_parts):
            raise ValueError(
                f"Negative cell references are not allowed: row {self.row}, column {self.column}"
            )
        return self

    @classmethod
    def of(cls, row: int, col: int) -> "CellReference":
        """Return the reference for a zero-based row and column.

        The top left cell of a table is ``CellReference.of(0, 0)``.

        Raises:
            InvalidReferenceError: If either coordinate is negative
        """
        if row < 0 or col < 0:
            raise InvalidReferenceError(
                f"Relative or negative cell references are not allowed: row {row}, column {col}"
            )
        return cls(row=row, column=col)

    @classmethod
    def of_a1(cls, text: str) -> "CellReference":
        """Parse A1 notation such as ``B3``, ``aa10`` or ``$C$7``.

        Column letters are case-insensitive and ``$`` markers are accepted but
        ignored. Row numbers are 1-based and must not have a leading zero.

        Raises:
            InvalidReferenceError: If the text is not valid A1 notation
        """
        match = _A1_RE.fullmatch(text)
        if match is None:
            raise InvalidReferenceError(f"Invalid A1 notation: {text}")

        column = column_index_from_letters(match.group(1))
        row = int(match.group(2)) - 1
        return cls.of(row, column)

    @classmethod
    def of_r1c1(cls, text: str) -> "CellReference":
        """Parse absolute R1C1 notation such as ``R3C2``.

        Relative forms (``R[-1]C[2]``, ``RC``) and zero or negative numbers are
        recognized only to produce a more specific error.

        Raises:
            InvalidReferenceError: If the text is not valid absolute R1C1 notation
        """
        match = _R1C1_RE.fullmatch(text)
        if match is None:
            if _R1C1_LENIENT_RE.fullmatch(text):
                raise InvalidReferenceError(
                    f"Relative or negative cell references are not allowed: {text}"
                )
            raise InvalidReferenceError(f"Invalid R1C1 notation: {text}")

        return cls.of(int(match.group(1)) - 1, int(match.group(2)) - 1)

    @property
    def is_ref_error(self) -> bool:
        """True if this is the ``#REF!`` reference."""
        return self.row == REFERENCE.ERROR_INDEX and self.column == REFERENCE.ERROR_INDEX

    def transpose(self) -> "CellReference":
        """Return the reference with row and column swapped."""
        if self.is_ref_error:
            return REF_ERROR
        return CellReference(row=self.column, column=self.row)

    def to_a1(self) -> str:
        """Return the reference in A1 notation, e.g. ``of(2, 1)`` -> ``B3``."""
        if self.is_ref_error:
            return REFERENCE.ERROR_TOKEN
        return f"{get_column_letter(self.column)}{self.row + 1}"

    def to_r1c1(self) -> str:
        """Return the reference in R1C1 notation, e.g. ``of(2, 1)`` -> ``R3C2``."""
        if self.is_ref_error:
            return REFERENCE.ERROR_TOKEN
        return f"R{self.row + 1}C{self.column + 1}"

    def sort_key(self) -> tuple[int, int]:
        """Key for row-major sorting; ``REF_ERROR`` sorts first."""
        return (self.row, self.column)

    def transposed_sort_key(self) -> tuple[int, int]:
        """Key for column-major sorting; ``REF_ERROR`` sorts first."""
        return (self.column, self.row)

    def compare_to(self, other: "CellReference") -> int:
        """Compare row first, then column.

        Returns:
            -1, 0 or 1 as this reference is less than, equal to or greater
            than ``other``
        """
        error_order = self._compare_errors(other)
        if error_order is not None:
            return error_order
        if self.row != other.row:
            return _sign(self.row - other.row)
        return _sign(self.column - other.column)

    def compare_transposed(self, other: "CellReference") -> int:
        """Compare column first, then row. Returns -1, 0 or 1."""
        error_order = self._compare_errors(other)
        if error_order is not None:
            return error_order
        if self.column != other.column:
            return _sign(self.column - other.column)
        return _sign(self.row - other.row)

    def _compare_errors(self, other: "CellReference") -> int | None:
        if not isinstance(other, CellReference):
            raise TypeError(f"Cannot compare CellReference with {type(other).__name__}")
        if self.is_ref_error and other.is_ref_error:
            return 0
        if self.is_ref_error:
            return -1
        if other.is_ref_error:
            return 1
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellReference):
            return NotImplemented
        if self.is_ref_error or other.is_ref_error:
            return self.is_ref_error and other.is_ref_error
        return self.row == other.row and self.column == other.column

    def __hash__(self) -> int:
        if self.is_ref_error:
            return REFERENCE.ERROR_HASH
        return hash((self.row, self.column))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CellReference):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CellReference):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CellReference):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CellReference):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        if self.is_ref_error:
            return REFERENCE.ERROR_TOKEN
        return f"{self.row}, {self.column}"


REF_ERROR = CellReference(row=REFERENCE.ERROR_INDEX, column=REFERENCE.ERROR_INDEX)
CellReference.REF_ERROR = REF_ERROR


def transposed_compare(left: CellReference, right: CellReference) -> int:
    """Column-major comparison function, for use with ``functools.cmp_to_key``."""
    return left.compare_transposed(right)
