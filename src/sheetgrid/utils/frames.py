"""
pandas projections of a spreadsheet.

Lets a host inspect grid contents with the usual DataFrame tooling. Columns
are labelled with A1 column letters and the index with 1-based row numbers,
so ``df.loc[3, "B"]`` is cell B3.
"""

import pandas as pd

from ..spreadsheet.address import column_labels
from ..spreadsheet.formula import evaluate
from ..spreadsheet.model import Grid


def to_dataframe(grid: Grid, evaluated: bool = False) -> pd.DataFrame:
    """Build a string DataFrame from a grid.

    Args:
        grid: The grid to project
        evaluated: If True, formula cells hold their display value instead
            of their stored text

    Returns:
        DataFrame of shape (grid.n_rows, grid.n_cols), dtype object
    """
    if not isinstance(grid, Grid):
        raise TypeError(f"Expected Grid, got {type(grid)}")

    if evaluated:
        data = [[evaluate(value, grid).display for value in row] for row in grid.rows]
    else:
        data = grid.to_list()

    return pd.DataFrame(
        data,
        columns=column_labels(grid.n_cols),
        index=pd.RangeIndex(1, grid.n_rows + 1),
        dtype=object,
    )


def to_numeric_frame(grid: Grid) -> pd.DataFrame:
    """Project the evaluated grid to floats, with NaN for non-numeric cells."""
    frame = to_dataframe(grid, evaluated=True)
    return frame.apply(pd.to_numeric, errors="coerce")
