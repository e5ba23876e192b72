"""Grid construction, validation and row/column extraction."""

from typing import Iterable, List, Sequence, Tuple, Union

from .models import InvalidGridError


Row = Union[str, Sequence[str]]


def build_rows(rows: Iterable[Row]) -> List[str]:
    """
    Normalize and validate grid rows.

    Rows may be strings or sequences of single-character cells. The grid must
    be non-empty and rectangular, since columns are read by index across
    every row.

    Raises:
        InvalidGridError: with code EMPTY_GRID, EMPTY_ROW, INVALID_ROW, INVALID_CELL or
            RAGGED_GRID
    """
    built: List[str] = []

    for i, row in enumerate(rows):
        if isinstance(row, str):
            text = row
        elif not isinstance(row, (list, tuple)):
            raise InvalidGridError(
                "INVALID_ROW",
                f"Row {i} must be a string or a list of characters, got {type(row).__name__}",
                row=i,
            )
        else:
            cells = list(row)
            for j, cell in enumerate(cells):
                if not isinstance(cell, str) or len(cell) != 1:
                    raise InvalidGridError(
                        "INVALID_CELL",
                        f"Cell ({i}, {j}) must be a single character, got {cell!r}",
                        row=i,
                    )
            text = "".join(cells)

        if not text:
            raise InvalidGridError("EMPTY_ROW", f"Row {i} is empty", row=i)

        if built and len(text) != len(built[0]):
            raise InvalidGridError(
                "RAGGED_GRID",
                f"Row {i} has length {len(text)}, expected {len(built[0])}",
                row=i,
            )
        built.append(text)

    if not built:
        raise InvalidGridError("EMPTY_GRID", "Grid has no rows")

    return built


class Grid:
    """
    Immutable snapshot of a word-soup grid.

    Rows are stored as strings; columns are derived from the character array
    on demand and never stored.
    """

    def __init__(self, rows: Iterable[Row]):
        self._rows: Tuple[str, ...] = tuple(build_rows(rows))
        self._cells: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in self._rows)

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    def row(self, index: int) -> str:
        return self._rows[index]

    def column(self, index: int) -> str:
        """Characters at ``index`` in every row, top to bottom."""
        return "".join(cells[index] for cells in self._cells)

    def __len__(self) -> int:
        return self.height

    def __repr__(self) -> str:
        return f"Grid({self.height}x{self.width})"


def render_grid(grid: Grid, separator: str = " ") -> str:
    """Render the grid to a string, one row per line."""
    return "\n".join(separator.join(row) for row in grid.rows)
