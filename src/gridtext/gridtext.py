"""Main GridText class."""

import logging
import re
from pathlib import Path

from .config import Config
from .core.constants import REFERENCE
from .core.exceptions import ConfigurationError, InvalidReferenceError
from .models import CellReference, TableLike, TextTable
from .readers import CSVReader
from .utils.logging_context import configure_logging
from .writers import CSVWriter

logger = logging.getLogger(__name__)

_R1C1_RE = re.compile(REFERENCE.R1C1_PATTERN, re.IGNORECASE | re.ASCII)
_R1C1_LENIENT_RE = re.compile(REFERENCE.R1C1_LENIENT_PATTERN, re.IGNORECASE | re.ASCII)


class GridText:
    """Entry point tying configuration, logging and CSV I/O together."""

    def __init__(self, config: Config | None = None, **kwargs):
        """Initialize GridText.

        Args:
            config: Configuration object. If None, loads from environment.
            **kwargs: Config field overrides, e.g. ``encoding="latin-1"``

        Raises:
            ConfigurationError: If an override names an unknown config field
        """
        if config is None:
            config = Config.from_env()

        unknown = sorted(key for key in kwargs if key not in Config.model_fields)
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(unknown)}")
        if kwargs:
            config = Config.model_validate({**config.model_dump(), **kwargs})

        self.config = config
        configure_logging(config)

        self._reader = CSVReader(config)
        self._writer = CSVWriter(config)

        logger.debug(f"GridText initialized with config: {config}")

    def parse(self, content: str) -> TextTable:
        """Parse CSV text into a table."""
        return self._reader.parse(content)

    def read(self, path: str | Path) -> TextTable:
        """Read a CSV file into a table."""
        return self._reader.read(path)

    def dumps(self, table: TableLike, null_value: str | None = None) -> str:
        """Convert a table to CSV text."""
        return self._writer.dumps(table, null_value)

    def write(self, table: TableLike, path: str | Path, null_value: str | None = None) -> Path:
        """Write a table to a CSV file."""
        return self._writer.write(table, path, null_value)

    @staticmethod
    def reference(text: str) -> CellReference:
        """Parse a cell reference in either R1C1 or A1 notation.

        Absolute R1C1 is tried first, then A1. Text that is neither but looks
        like a relative R1C1 reference reports the R1C1 error.

        Raises:
            InvalidReferenceError: If the text is valid in neither notation
        """
        if _R1C1_RE.fullmatch(text):
            return CellReference.of_r1c1(text)

        try:
            return CellReference.of_a1(text)
        except InvalidReferenceError:
            if _R1C1_LENIENT_RE.fullmatch(text):
                return CellReference.of_r1c1(text)
            raise
