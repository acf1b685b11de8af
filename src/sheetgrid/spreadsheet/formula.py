"""
Formula evaluation for display values.

A cell whose text starts with ``=`` is a formula. The only formula this
evaluator understands is ``=SUM(<addr>:<addr>)`` over a rectangular range of
the current grid. Evaluation is a read-time projection: the stored value
stays the formula text and only the displayed value is computed.

``evaluate`` is total. Anything it cannot compute comes back as a LITERAL
evaluation carrying the original text, so a malformed formula is shown as
typed instead of as an error marker.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sheetgrid.exceptions import InvalidAddressError
from sheetgrid.spreadsheet.address import address_to_cell
from sheetgrid.spreadsheet.model import CellRange, Grid

_SUM_RE = re.compile(r"=SUM\(([A-Z]+[0-9]+):([A-Z]+[0-9]+)\)")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class EvalKind(Enum):
    """Whether a display value was computed or passed through."""
    LITERAL = "literal"
    COMPUTED = "computed"


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating one cell value.

    Attributes:
        kind: LITERAL for plain text and unrecognized formulas, COMPUTED otherwise
        display: Text to show in the cell
        value: Numeric result for COMPUTED evaluations, else None
    """
    kind: EvalKind
    display: str
    value: Optional[float] = None

    @classmethod
    def literal(cls, text: str) -> "Evaluation":
        return cls(kind=EvalKind.LITERAL, display=text)

    @classmethod
    def computed(cls, value: float) -> "Evaluation":
        return cls(kind=EvalKind.COMPUTED, display=format_number(value), value=value)

    @property
    def is_computed(self) -> bool:
        return self.kind is EvalKind.COMPUTED


def is_formula(value: str) -> bool:
    return isinstance(value, str) and value.startswith("=")


def evaluate(value: str, grid: Grid) -> Evaluation:
    """Compute the display value for a stored cell value.

    Args:
        value: Stored cell text
        grid: Grid that range references resolve against

    Returns:
        COMPUTED evaluation for a recognized ``=SUM(A1:B2)``; LITERAL
        evaluation with ``value`` unchanged for everything else
    """
    if not is_formula(value):
        return Evaluation.literal(value)

    match = _SUM_RE.fullmatch(value)
    if not match:
        return Evaluation.literal(value)

    try:
        start = address_to_cell(match.group(1))
        end = address_to_cell(match.group(2))
        total = sum_range(grid, CellRange(start=start, end=end))
    except (InvalidAddressError, ValueError, OverflowError):
        return Evaluation.literal(value)

    return Evaluation.computed(total)


def sum_range(grid: Grid, cell_range: CellRange) -> float:
    """Add up the numeric cells of a range in row-major order.

    Blank and non-numeric cells are skipped rather than counted as
    zero, as are cells beyond the edge of the grid. An all-skipped range
    sums to 0.
    """
    min_row, max_row, min_col, max_col = cell_range.bounds()
    max_row = min(max_row, grid.n_rows - 1)
    max_col = min(max_col, grid.n_cols - 1)

    total = 0.0
    for row in range(min_row, max_row + 1):
        for col in range(min_col, max_col + 1):
            number = parse_number(grid.rows[row][col])
            if number is not None:
                total += number
    return total


def parse_number(text: str) -> Optional[float]:
    """Parse cell text as a float, or return None if it is not a number.

    Only plain decimal and exponent forms count ("12", "-0.5", "1e3");
    Python-only spellings such as "1_000", "inf" or "nan" do not.
    """
    if not text:
        return None
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return None
    return float(stripped)


def format_number(value: float) -> str:
    """Render a number the way a spreadsheet cell shows it.

    Integral values drop the fractional part (10.0 -> "10"); other values
    use the shortest repr that round-trips (0.1 + 0.2 -> "0.30000000000000004").
    """
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
