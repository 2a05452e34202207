"""CSV reader producing ``TextTable`` objects.

Input follows RFC 4180 with two relaxations: rows may have different field
counts (the table is padded to the widest row), and CRLF, lone CR and lone LF
are all accepted as row separators.
"""

import re
from pathlib import Path

from ..config import Config
from ..core.constants import CSV_FORMAT
from ..core.exceptions import CSVParseError
from ..models.table import TextTable
from ..utils.logging_context import FileContext, OperationContext, get_contextual_logger

logger = get_contextual_logger(__name__)

# One field and the terminator that follows it, matched at an exact position.
# Group 1: quoted field body, with "" still escaped
# Group 2: unquoted field
# Group 3: terminator; empty only at end of input
# The quoted body alternates a non-quote char with a doubled quote. The two
# branches can never match the same text, which keeps the scan linear.
FIELD_PATTERN = re.compile(r'(?:"((?:[^"]|"")*)"|([^",\r\n]*))(\r\n|\r|\n|,|\Z)')


class CSVReader:
    """Parses CSV text and files into ``TextTable`` objects."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()

    def parse(self, content: str) -> TextTable:
        """Parse CSV text into a table.

        A trailing line break does not add a blank last row, and empty
        content gives a table with no rows.

        Args:
            content: The CSV text

        Returns:
            The parsed table, padded to rectangular form

        Raises:
            CSVParseError: If the content cannot be fully tokenized. The error
                carries the rows parsed so far and the unparsed remainder.
        """
        rows: list[list[str]] = []
        row: list[str] = []
        rows.append(row)

        position = 0
        complete = False

        while True:
            match = FIELD_PATTERN.match(content, position)
            if match is None:
                break

            quoted, unquoted, terminator = match.groups()
            if quoted is not None:
                row.append(quoted.replace(CSV_FORMAT.ESCAPED_QUOTE, CSV_FORMAT.QUOTE))
            else:
                row.append(unquoted)

            if not terminator:
                complete = True
                break

            position = match.end()
            if terminator != CSV_FORMAT.DELIMITER:
                row = []
                rows.append(row)

        # A final line break leaves an empty last row that is not part of the data
        if not row or row == [""]:
            rows.pop()

        table = TextTable.from_rows(rows)

        if not complete:
            remainder = content[position:]
            line = _line_number(content, position)
            snippet = remainder[: CSV_FORMAT.ERROR_CONTEXT_CHARS]
            logger.warning(
                f"CSV parsing stopped at offset {position} (line {line}) "
                f"after {table.height} rows"
            )
            raise CSVParseError(
                f"Malformed CSV at line {line}, offset {position}: {snippet!r}",
                table,
                remainder,
                position,
            )

        logger.debug(f"Parsed CSV into {table.height}x{table.width} table")
        return table

    def read(self, path: str | Path) -> TextTable:
        """Read and parse a CSV file.

        The file is decoded with the configured encoding. ``newline=''`` keeps
        CR and CRLF inside quoted fields intact.

        Raises:
            OSError: If the file cannot be read
            CSVParseError: If the file cannot be successfully parsed
        """
        path = Path(path)
        with FileContext(str(path)), OperationContext("read_csv"):
            with open(path, encoding=self.config.encoding, newline="") as handle:
                content = handle.read()
            logger.debug(f"Read {len(content)} characters")

            table = self.parse(content)
            logger.info(f"Loaded {table.height}x{table.width} table")
            return table


def _line_number(content: str, position: int) -> int:
    """1-based line of ``position``, counting CRLF, CR and LF as one break each."""
    head = content[:position]
    return head.count("\n") + head.count("\r") - head.count("\r\n") + 1


def parse_csv(content: str) -> TextTable:
    """Parse CSV text into a ``TextTable``."""
    return CSVReader().parse(content)


def read_csv(path: str | Path, encoding: str = "utf-8") -> TextTable:
    """Read a CSV file into a ``TextTable``."""
    return CSVReader(Config(encoding=encoding)).read(path)
