"""Tests for the GridText entry point."""

import pytest

from gridtext import GridText
from gridtext.config import Config
from gridtext.core.exceptions import ConfigurationError, InvalidReferenceError
from gridtext.models.cell_reference import CellReference
from gridtext.models.table import TextTable


@pytest.fixture
def gridtext(default_config: Config) -> GridText:
    """GridText with default configuration."""
    return GridText(default_config)


class TestInitialization:
    """Test configuration handling."""

    def test_overrides(self, default_config):
        instance = GridText(default_config, null_value="NULL", log_level="error")
        assert instance.config.null_value == "NULL"
        assert instance.config.log_level == "ERROR"
        assert default_config.null_value == ""

    def test_unknown_override(self, default_config):
        with pytest.raises(ConfigurationError, match="colour"):
            GridText(default_config, colour="blue")

    def test_loads_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GRIDTEXT_NULL_VALUE", "?")
        assert GridText().config.null_value == "?"


class TestReadWrite:
    """Test CSV I/O through the facade."""

    def test_parse_and_dumps(self, gridtext):
        table = gridtext.parse('a,"b,c"\r\n1,2\r\n')
        assert table.to_rows() == [["a", "b,c"], ["1", "2"]]
        assert gridtext.dumps(table) == 'a,"b,c"\n1,2'

    def test_dumps_uses_config_null_value(self, sparse_table):
        instance = GridText(Config(null_value="NA"))
        assert instance.dumps(sparse_table) == "a,,c\n,NA,,42\nx"
        assert instance.dumps(sparse_table, null_value="") == "a,,c\n,,,42\nx"

    def test_write_and_read(self, gridtext, tmp_path, tricky_table):
        path = gridtext.write(tricky_table, tmp_path / "table.csv")
        assert gridtext.read(path) == tricky_table


class TestReference:
    """Test notation detection."""

    @pytest.mark.parametrize(
        "text,row,col",
        [("R2C3", 1, 2), ("r10c1", 9, 0), ("C2", 1, 2), ("RC1", 0, 470), ("$AA$10", 9, 26)],
    )
    def test_reference(self, text, row, col):
        assert GridText.reference(text) == CellReference.of(row, col)

    def test_relative_r1c1(self):
        with pytest.raises(InvalidReferenceError, match="Relative or negative"):
            GridText.reference("R[1]C[1]")

    def test_invalid(self):
        with pytest.raises(InvalidReferenceError, match="Invalid A1 notation"):
            GridText.reference("not a cell")

    @pytest.mark.parametrize("text", ["\u017f1", "\u212a1", "R1\u0661C1"])
    def test_non_ascii_is_invalid(self, text):
        with pytest.raises(InvalidReferenceError):
            GridText.reference(text)

    def test_lookup_in_table(self, gridtext):
        table = TextTable.from_rows([["a", "b"], ["c", "d"]])
        assert table.get_at(gridtext.reference("B2")) == "d"
        assert table.get_at(gridtext.reference("R1C2")) == "b"
