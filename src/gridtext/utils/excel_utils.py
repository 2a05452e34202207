"""Spreadsheet column letter helpers.

Column letters use bijective base-26: A-Z are the digits 1-26 and there is no
zero digit, so Z is followed by AA, AZ by BA and ZZ by AAA.
"""

import string

from ..core.constants import REFERENCE


def get_column_letter(col: int) -> str:
    """Convert a 0-based column index to its letters (0 -> 'A', 26 -> 'AA').

    Args:
        col: Column index, 0 or greater

    Returns:
        Upper-case column letters

    Raises:
        ValueError: If the index is negative
    """
    if col < 0:
        raise ValueError(f"Column index must not be negative, got {col}")

    letters = []
    current = col + 1
    while current > 0:
        current, remainder = divmod(current - 1, REFERENCE.ALPHABET_SIZE)
        letters.append(string.ascii_uppercase[remainder])
    return "".join(reversed(letters))


def column_index_from_letters(letters: str) -> int:
    """Convert column letters to a 0-based column index ('A' -> 0, 'AA' -> 26).

    Letters are case-insensitive. Each letter is consumed in turn, multiplying
    the running value by 26 before adding the letter's 1-26 digit.

    Raises:
        ValueError: If the string is empty or contains a non A-Z letter
    """
    if not letters:
        raise ValueError("Column letters must not be empty")

    index = 0
    for char in letters.upper():
        digit = string.ascii_uppercase.find(char) + 1
        if digit == 0:
            raise ValueError(f"Invalid column letters: {letters!r}")
        index = index * REFERENCE.ALPHABET_SIZE + digit
    return index - 1
