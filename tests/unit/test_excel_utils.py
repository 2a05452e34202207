"""Unit tests for column letter helpers."""

import pytest

from gridtext.utils.excel_utils import column_index_from_letters, get_column_letter


class TestGetColumnLetter:
    """Test index -> letters."""

    @pytest.mark.parametrize(
        "index,letters",
        [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA"), (18277, "ZZZ")],
    )
    def test_letters(self, index, letters):
        assert get_column_letter(index) == letters

    def test_negative(self):
        with pytest.raises(ValueError):
            get_column_letter(-1)


class TestColumnIndexFromLetters:
    """Test letters -> index."""

    @pytest.mark.parametrize(
        "letters,index",
        [("A", 0), ("z", 25), ("AA", 26), ("Az", 51), ("BA", 52), ("ZZ", 701), ("AAA", 702), ("XFD", 16383)],
    )
    def test_index(self, letters, index):
        assert column_index_from_letters(letters) == index

    def test_every_letter_is_consumed(self):
        # AB and AA differ only after the first letter
        assert column_index_from_letters("AB") == column_index_from_letters("AA") + 1
        assert column_index_from_letters("BA") != column_index_from_letters("BB")

    @pytest.mark.parametrize("letters", ["", "A1", "-", "Ä"])
    def test_invalid(self, letters):
        with pytest.raises(ValueError):
            column_index_from_letters(letters)

    def test_round_trip(self):
        for index in range(0, 20000, 7):
            assert column_index_from_letters(get_column_letter(index)) == index
