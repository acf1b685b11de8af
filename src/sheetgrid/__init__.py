"""
sheetgrid - The model behind a small spreadsheet widget.

This package keeps the state of an editable grid (values, selection, bold
cells and clipboard), evaluates ``=SUM(A1:B2)`` formulas into display values,
and exports the grid as JSON. Drawing the grid and wiring input events are
left to the host; it feeds normalized events in and reads snapshots out.

Usage:
    >>> import sheetgrid
    >>> sheet = sheetgrid.Spreadsheet()
    >>> sheet.edit_cell(0, 0, "4")
    >>> sheet.edit_cell(0, 1, "=SUM(A1:A10)")
    >>> sheet.display_value(0, 1)
    '4'

Key components:
- Spreadsheet: Event-driven model owning all widget state
- Grid: Immutable table of cell values
- evaluate: Formula evaluator producing display values
- FileExporter: Writes the JSON export to disk
"""

from .config import Features, SpreadsheetConfig
from .core import CellView, Spreadsheet
from .exceptions import ExportError, InvalidAddressError
from .export import ExportDocument, Exporter, FileExporter
from .spreadsheet import (
    CellRange,
    Grid,
    address_to_cell,
    cell_to_address,
    col_index_to_letters,
    evaluate,
    event_from_dict,
    letters_to_col_index,
)

# Version
__version__ = "0.1.0"

__all__ = [
    'Spreadsheet',
    'CellView',
    'SpreadsheetConfig',
    'Features',
    'Grid',
    'CellRange',
    'evaluate',
    'event_from_dict',
    'address_to_cell',
    'cell_to_address',
    'col_index_to_letters',
    'letters_to_col_index',
    'ExportDocument',
    'Exporter',
    'FileExporter',
    'ExportError',
    'InvalidAddressError',
]
