"""Centralized constants for GridText.

This module contains the constants shared by the table model, the cell
reference codec and the CSV reader/writer, grouped by category.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class CSVFormatConstants:
    """Constants for the CSV text format."""

    DELIMITER: Final[str] = ","
    QUOTE: Final[str] = '"'
    ESCAPED_QUOTE: Final[str] = '""'

    # Writer always emits LF; the reader also accepts CRLF and lone CR
    ROW_SEPARATOR: Final[str] = "\n"

    # Characters that force a field to be quoted on output
    SPECIAL_CHARS: Final[tuple[str, ...]] = ('"', ",", "\r", "\n")

    # Characters shown around a parse failure in error messages
    ERROR_CONTEXT_CHARS: Final[int] = 20


@dataclass(frozen=True)
class ReferenceConstants:
    """Constants for A1 / R1C1 cell reference notation."""

    ERROR_TOKEN: Final[str] = "#REF!"
    ERROR_INDEX: Final[int] = -1
    ERROR_HASH: Final[int] = 0xFFFFFFFF

    ALPHABET_SIZE: Final[int] = 26

    A1_PATTERN: Final[str] = r"^\$?([A-Za-z]+)\$?([1-9]\d*)$"
    R1C1_PATTERN: Final[str] = r"^R([1-9]\d*)C([1-9]\d*)$"
    # Matches relative (R[-1]C[2]) and negative forms so they get a clearer error
    R1C1_LENIENT_PATTERN: Final[str] = r"^R(-?\d+|\[-?\d+\])?C(-?\d+|\[-?\d+\])?$"


CSV_FORMAT = CSVFormatConstants()
REFERENCE = ReferenceConstants()
