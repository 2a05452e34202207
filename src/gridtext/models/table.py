"""Table models.

``BaseTable`` is the generic table interface: subclasses implement the
``(row, col)`` primitives and inherit the ``CellReference`` conveniences.
``TextTable`` is the concrete, always-rectangular table of strings.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol, runtime_checkable

from ..core.exceptions import TableIndexError, TableValueError
from .cell_reference import CellReference


@runtime_checkable
class TableLike(Protocol):
    """Anything the CSV writer and ``TextTable.from_table`` can read from."""

    @property
    def height(self) -> int: ...

    @property
    def width(self) -> int: ...

    def cell_exists(self, row: int, col: int) -> bool: ...

    def get(self, row: int, col: int) -> Any: ...


class BaseTable(ABC):
    """Generic table interface.

    The coordinate-pair methods (``get_at``, ``set_at`` and friends) are
    implemented once here in terms of the ``(row, col)`` primitives.
    """

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cells that hold a value."""

    @property
    def area(self) -> int:
        """Rows times columns."""
        return self.height * self.width

    def dimensions(self) -> tuple[int, int]:
        """Table shape as (height, width)."""
        return (self.height, self.width)

    @abstractmethod
    def cell_exists(self, row: int, col: int) -> bool:
        """Check whether the cell at ``(row, col)`` exists."""

    @abstractmethod
    def get(self, row: int, col: int) -> Any:
        """Get the value at ``(row, col)``."""

    @abstractmethod
    def set(self, row: int, col: int, value: Any) -> Any:
        """Set the value at ``(row, col)`` and return the previous value."""

    @abstractmethod
    def get_row(self, row: int) -> list[Any]:
        """Get a copy of one row."""

    @abstractmethod
    def get_column(self, col: int) -> list[Any]:
        """Get a copy of one column."""

    @abstractmethod
    def add_row(self, values: Sequence[Any] = (), index: int | None = None) -> None:
        """Insert a row at ``index`` (default: after the last row)."""

    @abstractmethod
    def add_column(self, values: Sequence[Any] = (), index: int | None = None) -> None:
        """Insert a column at ``index`` (default: after the last column)."""

    def cell_exists_at(self, ref: CellReference) -> bool:
        if ref.is_ref_error:
            return False
        return self.cell_exists(ref.row, ref.column)

    def get_at(self, ref: CellReference) -> Any:
        return self.get(ref.row, ref.column)

    def set_at(self, ref: CellReference, value: Any) -> Any:
        return self.set(ref.row, ref.column, value)

    def get_row_at(self, ref: CellReference) -> list[Any]:
        return self.get_row(ref.row)

    def get_column_at(self, ref: CellReference) -> list[Any]:
        return self.get_column(ref.column)

    def add_row_at(self, ref: CellReference, values: Sequence[Any] = ()) -> None:
        self.add_row(values, index=ref.row)

    def add_column_at(self, ref: CellReference, values: Sequence[Any] = ()) -> None:
        self.add_column(values, index=ref.column)

    def __getitem__(self, key: CellReference | tuple[int, int]) -> Any:
        row, col = self._split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: CellReference | tuple[int, int], value: Any) -> None:
        row, col = self._split_key(key)
        self.set(row, col, value)

    @staticmethod
    def _split_key(key: CellReference | tuple[int, int]) -> tuple[int, int]:
        if isinstance(key, CellReference):
            return key.row, key.column
        row, col = key
        return row, col


def _to_text(value: Any) -> str:
    """Convert an arbitrary source value to cell text; ``None`` becomes ''."""
    if value is None:
        return ""
    return str(value)


def _check_value(value: Any) -> str:
    if value is None:
        raise TableValueError("TextTable cannot hold None values")
    if not isinstance(value, str):
        raise TableValueError(f"TextTable values must be str, got {type(value).__name__}")
    return value


class TextTable(BaseTable):
    """Mutable, always-rectangular table of strings.

    Every row holds exactly ``width`` cells. Rows and columns handed out are
    copies, so mutating them never changes the table.
    """

    def __init__(self, height: int = 0, width: int = 0):
        """Create a table of ``height`` x ``width`` empty-string cells.

        Raises:
            TableValueError: If either dimension is negative
        """
        if height < 0 or width < 0:
            raise TableValueError(f"Table sizes must not be negative, got {height}x{width}")

        self._rows: list[list[str]] = [["" for _ in range(width)] for _ in range(height)]
        self._width = width

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> "TextTable":
        """Create a table from any iterable of rows.

        Values are converted with ``str()`` and ``None`` becomes ''. The width
        is the longest row; shorter rows are padded on the right.
        """
        table = cls()
        table._rows = [[_to_text(value) for value in row] for row in rows]
        table._width = max((len(row) for row in table._rows), default=0)
        for row in table._rows:
            row.extend("" for _ in range(table._width - len(row)))
        return table

    @classmethod
    def from_table(cls, source: TableLike) -> "TextTable":
        """Copy any table-like object; missing or ``None`` cells become ''."""
        table = cls(source.height, source.width)
        for r, row in enumerate(table._rows):
            for c in range(table._width):
                if source.cell_exists(r, c):
                    row[c] = _to_text(source.get(r, c))
        return table

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> int:
        # Rectangular with no missing cells, so size equals area
        return self.area

    def cell_exists(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self._width

    def get(self, row: int, col: int) -> str:
        self._check_row(row)
        self._check_column(col)
        return self._rows[row][col]

    def set(self, row: int, col: int, value: str) -> str:
        """Set a cell and return the value it replaced.

        Raises:
            TableValueError: If ``value`` is None or not a str
            TableIndexError: If the cell is outside the table
        """
        _check_value(value)
        self._check_row(row)
        self._check_column(col)

        previous = self._rows[row][col]
        self._rows[row][col] = value
        return previous

    def get_row(self, row: int) -> list[str]:
        self._check_row(row)
        return list(self._rows[row])

    def get_column(self, col: int) -> list[str]:
        self._check_column(col)
        return [row[col] for row in self._rows]

    def add_row(self, values: Sequence[str] = (), index: int | None = None) -> None:
        """Insert a row, shifting later rows down.

        An empty (0x0) table takes its width from ``values``. Otherwise a
        shorter row is padded with '' and a longer one is rejected.

        Raises:
            TableIndexError: If ``index`` is not in ``[0, height]``
            TableValueError: If the row is wider than the table or holds None
        """
        if index is None:
            index = self.height
        if not 0 <= index <= self.height:
            raise TableIndexError(f"Expected row 0 to {self.height}, got {index}")

        new_row = [_check_value(value) for value in values]

        if self._width == 0 and not self._rows:
            self.resize(0, len(new_row))

        if len(new_row) > self._width:
            raise TableValueError(
                f"Row width {len(new_row)} exceeds table width {self._width}"
            )

        new_row.extend("" for _ in range(self._width - len(new_row)))
        self._rows.insert(index, new_row)

    def add_column(self, values: Sequence[str] = (), index: int | None = None) -> None:
        """Insert a column, shifting later columns right.

        An empty (0x0) table takes its height from ``values``. Otherwise a
        shorter column is padded with '' and a taller one is rejected.

        Raises:
            TableIndexError: If ``index`` is not in ``[0, width]``
            TableValueError: If the column is taller than the table or holds None
        """
        if index is None:
            index = self._width
        if not 0 <= index <= self._width:
            raise TableIndexError(f"Expected column 0 to {self._width}, got {index}")

        new_column = [_check_value(value) for value in values]

        if self._width == 0 and not self._rows:
            self.resize(len(new_column), 0)

        if len(new_column) > self.height:
            raise TableValueError(
                f"Column height {len(new_column)} exceeds table height {self.height}"
            )

        new_column.extend("" for _ in range(self.height - len(new_column)))
        for row, value in zip(self._rows, new_column):
            row.insert(index, value)
        self._width += 1

    def resize(self, min_height: int, min_width: int) -> None:
        """Grow the table to at least ``min_height`` x ``min_width``.

        Axes that are already large enough are left alone; the table never
        shrinks. New cells are ''.
        """
        if self._width < min_width:
            for row in self._rows:
                row.extend("" for _ in range(min_width - self._width))
            self._width = min_width

        while len(self._rows) < min_height:
            self._rows.append(["" for _ in range(self._width)])

    def to_rows(self) -> list[list[str]]:
        """Return a copy of all rows."""
        return [list(row) for row in self._rows]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.height:
            raise TableIndexError(f"Expected row 0 to {self.height - 1}, got {row}")

    def _check_column(self, col: int) -> None:
        if not 0 <= col < self._width:
            raise TableIndexError(f"Expected column 0 to {self._width - 1}, got {col}")

    def __len__(self) -> int:
        return self.height

    def __iter__(self) -> Iterator[list[str]]:
        for row in self._rows:
            yield list(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextTable):
            return NotImplemented
        return self._width == other._width and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextTable(height={self.height}, width={self._width})"
