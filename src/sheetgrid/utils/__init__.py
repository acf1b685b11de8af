"""
Utility functions for sheetgrid.

This module provides utilities for working with grids and snapshots:
- visualization: Text table rendering of a snapshot
- serialization: JSON export encoding of a grid
- frames: pandas DataFrame projections of a grid
"""

from .visualization import visualize
from .serialization import (
    serialize,
    to_json,
    to_bytes,
    EXPORT_ENCODING
)
from .frames import to_dataframe, to_numeric_frame

__all__ = [
    'visualize',
    'serialize',
    'to_json',
    'to_bytes',
    'EXPORT_ENCODING',
    'to_dataframe',
    'to_numeric_frame',
]
