"""
Grid serialization utilities.

The export format is the bare grid: a JSON array of rows, each an array of
cell strings, written compactly and encoded as UTF-8. Formula cells are
exported as their stored text, not their computed values.
"""

import json
from typing import Any

from ..spreadsheet.model import Grid

EXPORT_ENCODING = "utf-8"


def serialize(grid: Grid) -> list:
    """Serialize a grid to a JSON-serializable list of lists.

    Raises:
        TypeError: If grid is not a Grid instance

    Example:
        >>> serialize(Grid.empty(1, 2))
        [['', '']]
    """
    if not isinstance(grid, Grid):
        raise TypeError(f"Expected Grid, got {type(grid)}")
    return grid.to_list()


def to_json(grid: Grid, **kwargs: Any) -> str:
    """Serialize a grid to a JSON string.

    Args:
        grid: The grid to serialize
        **kwargs: Additional arguments to pass to json.dumps (e.g., indent=2).
            Output is compact unless ``separators`` or ``indent`` is given.

    Returns:
        JSON string representation of the grid
    """
    if "indent" not in kwargs:
        kwargs.setdefault("separators", (",", ":"))
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(serialize(grid), **kwargs)


def to_bytes(grid: Grid) -> bytes:
    """Serialize a grid to the UTF-8 bytes of its compact JSON form."""
    return to_json(grid).encode(EXPORT_ENCODING)
