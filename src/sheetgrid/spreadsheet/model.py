"""
Spreadsheet model classes.

This module provides the state objects behind the spreadsheet widget:
- Grid: An immutable rectangular table of string cell values
- CellRange: A rectangle given by two unordered corner cells
- Selection: The pointer-driven selection (anchor, drag end, active flag)
- Clipboard: A snapshot of a rectangular sub-grid

and the pure functions that move values and styles between them
(copy_range, paste, toggle_bold).
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from sheetgrid.spreadsheet.address import address_to_cell, cell_to_address

Cell = Tuple[int, int]


def _cell_text(value) -> str:
    return "" if value is None else str(value)


class Grid:
    """Rectangular table of cell values, indexed from (0, 0).

    A Grid never changes after construction. Every editing method returns a
    new Grid, so any holder of an older grid keeps a consistent view.

    Attributes:
        rows: Tuple of row tuples, all of equal length
    """

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        """Initialize a Grid from row data.

        Args:
            rows: Non-empty sequence of equal-length rows of strings; None
                becomes an empty cell

        Raises:
            ValueError: If there are no rows, no columns, or rows differ in length
        """
        frozen = tuple(tuple(_cell_text(value) for value in row) for row in rows)
        if not frozen or not frozen[0]:
            raise ValueError("Grid must have at least one row and one column")
        width = len(frozen[0])
        if any(len(row) != width for row in frozen):
            raise ValueError("All grid rows must have the same length")
        self.rows: Tuple[Tuple[str, ...], ...] = frozen

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """Create a rows x cols grid of empty strings.

        Raises:
            ValueError: If dimensions are not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError("Grid dimensions must be positive integers")
        return cls([[""] * cols for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """Create a grid from a list of lists (e.g. decoded JSON)."""
        return cls(rows)

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.n_rows and 0 <= col < self.n_cols

    def get(self, row: int, col: int) -> str:
        """Return the stored value at (row, col).

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.n_rows}x{self.n_cols} grid")
        return self.rows[row][col]

    def edit_cell(self, row: int, col: int, value: str) -> "Grid":
        """Return a grid with one value replaced.

        Edits outside the grid are ignored and the same grid is returned.
        """
        if not self.in_bounds(row, col):
            return self
        new_row = self.rows[row][:col] + (_cell_text(value),) + self.rows[row][col + 1:]
        return Grid(self.rows[:row] + (new_row,) + self.rows[row + 1:])

    def add_row(self) -> "Grid":
        """Return a grid with one empty row appended at the bottom."""
        return Grid(self.rows + (("",) * self.n_cols,))

    def add_column(self) -> "Grid":
        """Return a grid with one empty column appended on the right."""
        return Grid([row + ("",) for row in self.rows])

    def to_list(self) -> List[List[str]]:
        """Return the values as a fresh list of lists."""
        return [list(row) for row in self.rows]

    def __repr__(self) -> str:
        return f"Grid(rows={self.n_rows}, cols={self.n_cols})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)


@dataclass(frozen=True)
class CellRange:
    """A rectangle spanned by two corner cells.

    The corners are kept exactly as the pointer produced them: ``start`` is
    where the drag began and ``end`` where it currently is, so ``start`` may
    lie below or to the right of ``end``. Use ``bounds()`` for the
    normalized rectangle.

    Attributes:
        start: (row, col) anchor corner
        end: (row, col) drag corner
    """
    start: Cell
    end: Cell

    @classmethod
    def single(cls, row: int, col: int) -> "CellRange":
        return cls(start=(row, col), end=(row, col))

    @classmethod
    def from_a1(cls, notation: str) -> "CellRange":
        """Parse "B3" or "A1:C4" into a range.

        Raises:
            InvalidAddressError: If either corner is not a valid address
        """
        if ":" in notation:
            first, _, second = notation.partition(":")
            return cls(start=address_to_cell(first), end=address_to_cell(second))
        cell = address_to_cell(notation)
        return cls(start=cell, end=cell)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return (min_row, max_row, min_col, max_col)."""
        (r1, c1), (r2, c2) = self.start, self.end
        return min(r1, r2), max(r1, r2), min(c1, c2), max(c1, c2)

    @property
    def top_left(self) -> Cell:
        min_row, _, min_col, _ = self.bounds()
        return min_row, min_col

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (height, width) of the normalized rectangle."""
        min_row, max_row, min_col, max_col = self.bounds()
        return max_row - min_row + 1, max_col - min_col + 1

    def contains(self, row: int, col: int) -> bool:
        min_row, max_row, min_col, max_col = self.bounds()
        return min_row <= row <= max_row and min_col <= col <= max_col

    def cells(self) -> Iterator[Cell]:
        """Yield every (row, col) in the rectangle in row-major order."""
        min_row, max_row, min_col, max_col = self.bounds()
        for row in range(min_row, max_row + 1):
            for col in range(min_col, max_col + 1):
                yield row, col

    def to_a1(self) -> str:
        """Format the normalized rectangle in A1 notation ("A1" or "A1:B2")."""
        min_row, max_row, min_col, max_col = self.bounds()
        first = cell_to_address(min_row, min_col)
        if (min_row, min_col) == (max_row, max_col):
            return first
        return f"{first}:{cell_to_address(max_row, max_col)}"

    def __repr__(self) -> str:
        return f"CellRange({self.to_a1()!r})"


class Selection:
    """Pointer-driven rectangular selection.

    ``begin`` starts a drag, ``extend`` follows the pointer while the drag is
    active, and ``finish`` ends the drag. The finished range stays selected
    until the next ``begin``.
    """

    def __init__(self) -> None:
        self.start: Optional[Cell] = None
        self.end: Optional[Cell] = None
        self.active = False

    def begin(self, row: int, col: int) -> None:
        self.start = (row, col)
        self.end = (row, col)
        self.active = True

    def extend(self, row: int, col: int) -> None:
        """Move the drag corner; ignored unless a drag is in progress."""
        if not self.active:
            return
        self.end = (row, col)

    def finish(self) -> None:
        self.active = False

    @property
    def range(self) -> Optional[CellRange]:
        if self.start is None or self.end is None:
            return None
        return CellRange(start=self.start, end=self.end)

    def contains(self, row: int, col: int) -> bool:
        current = self.range
        return current is not None and current.contains(row, col)

    def __repr__(self) -> str:
        return f"Selection(range={self.range!r}, active={self.active})"


@dataclass(frozen=True)
class Clipboard:
    """Values captured by a copy, row-major.

    Attributes:
        values: Tuple of equal-length row tuples
    """
    values: Tuple[Tuple[str, ...], ...]

    @property
    def height(self) -> int:
        return len(self.values)

    @property
    def width(self) -> int:
        return len(self.values[0]) if self.values else 0

    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0


def copy_range(grid: Grid, cell_range: CellRange) -> Clipboard:
    """Capture the values under ``cell_range``.

    The rectangle is normalized and clipped to the grid, so a range that
    hangs off the grid copies only its in-bounds part.
    """
    min_row, max_row, min_col, max_col = cell_range.bounds()
    max_row = min(max_row, grid.n_rows - 1)
    max_col = min(max_col, grid.n_cols - 1)
    values = tuple(
        tuple(grid.rows[row][min_col:max_col + 1])
        for row in range(min_row, max_row + 1)
    )
    if values and not values[0]:
        values = ()
    return Clipboard(values=values)


def paste(grid: Grid, clipboard: Clipboard, anchor: Cell) -> Grid:
    """Write the clipboard into ``grid`` with its top-left at ``anchor``.

    Destination cells that fall outside the grid are skipped, so pasting
    near the bottom-right edge writes only the part that fits.
    """
    if clipboard.is_empty():
        return grid

    anchor_row, anchor_col = anchor
    rows = grid.to_list()
    for dr, clip_row in enumerate(clipboard.values):
        for dc, value in enumerate(clip_row):
            row, col = anchor_row + dr, anchor_col + dc
            if grid.in_bounds(row, col):
                rows[row][col] = value
    return Grid(rows)


def toggle_bold(bold: FrozenSet[Cell], cell_range: CellRange) -> FrozenSet[Cell]:
    """Flip bold membership of every cell in the range independently.

    Cells that were bold become normal and vice versa; this is not a block
    set/clear, so a mixed range stays mixed (inverted).
    """
    return frozenset(bold) ^ frozenset(cell_range.cells())
