"""CSV writer for ``TextTable`` and other table-like objects.

Rows are separated by a single LF and no separator follows the last row.
Fields containing a quote, comma, CR or LF are quoted with inner quotes
doubled. Tables that report nonexistent cells (sparse sources) get separating
commas for interior gaps and nothing after their last existing cell.
"""

from collections.abc import Iterator
from pathlib import Path

from ..config import Config
from ..core.constants import CSV_FORMAT
from ..models.table import TableLike
from ..utils.logging_context import FileContext, OperationContext, get_contextual_logger

logger = get_contextual_logger(__name__)


def escape_field(text: str) -> str:
    """Quote a field if it contains a special character."""
    if any(char in text for char in CSV_FORMAT.SPECIAL_CHARS):
        escaped = text.replace(CSV_FORMAT.QUOTE, CSV_FORMAT.ESCAPED_QUOTE)
        return f"{CSV_FORMAT.QUOTE}{escaped}{CSV_FORMAT.QUOTE}"
    return text


def format_row(table: TableLike, row: int, null_value: str = "") -> str:
    """Render one table row as a CSV line, without a line terminator."""
    parts: list[str] = []
    last_col = 0

    for col in range(table.width):
        if not table.cell_exists(row, col):
            continue

        # One comma per column stepped over since the previous existing cell
        parts.append(CSV_FORMAT.DELIMITER * (col - last_col))
        last_col = col

        value = table.get(row, col)
        parts.append(escape_field(null_value if value is None else str(value)))

    return "".join(parts)


def iter_csv_lines(table: TableLike, null_value: str = "") -> Iterator[str]:
    """Yield the CSV line for each row of ``table``."""
    for row in range(table.height):
        yield format_row(table, row, null_value)


class CSVWriter:
    """Serializes table-like objects to CSV text and files."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()

    def dumps(self, table: TableLike, null_value: str | None = None) -> str:
        """Convert a table to CSV text.

        Args:
            table: Any table-like object
            null_value: Text for None cells; defaults to ``config.null_value``.
                Nonexistent cells are always written as nothing.

        Returns:
            The CSV text
        """
        if null_value is None:
            null_value = self.config.null_value

        text = CSV_FORMAT.ROW_SEPARATOR.join(iter_csv_lines(table, null_value))
        logger.debug(f"Serialized {table.height} rows to {len(text)} characters")
        return text

    def write(self, table: TableLike, path: str | Path, null_value: str | None = None) -> Path:
        """Write a table to a CSV file, one row at a time.

        The file is always flushed and closed before this returns or raises.

        Returns:
            The path written to

        Raises:
            OSError: If the file cannot be written
        """
        if null_value is None:
            null_value = self.config.null_value

        path = Path(path)
        with FileContext(str(path)), OperationContext("write_csv"):
            rows_written = 0
            with open(path, "w", encoding=self.config.encoding, newline="") as handle:
                for line in iter_csv_lines(table, null_value):
                    if rows_written:
                        handle.write(CSV_FORMAT.ROW_SEPARATOR)
                    handle.write(line)
                    rows_written += 1

            logger.info(f"Wrote {rows_written} rows")
        return path


def to_csv(table: TableLike, null_value: str = "") -> str:
    """Convert a table to CSV text, writing ``null_value`` for None cells."""
    return CSVWriter().dumps(table, null_value)


def write_csv(
    table: TableLike, path: str | Path, null_value: str = "", encoding: str = "utf-8"
) -> Path:
    """Write a table to a CSV file, writing ``null_value`` for None cells."""
    return CSVWriter(Config(encoding=encoding)).write(table, path, null_value)
