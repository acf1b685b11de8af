"""
Spreadsheet model module.

This module provides the grid, address codec, selection/clipboard helpers,
formula evaluator and input events behind the spreadsheet widget.
"""

from sheetgrid.spreadsheet.address import (
    address_to_cell,
    cell_to_address,
    col_index_to_letters,
    column_labels,
    letters_to_col_index,
)
from sheetgrid.spreadsheet.events import (
    AddColumn,
    AddRow,
    BoldToggleRequest,
    CellEdit,
    CopyRequest,
    ExportRequest,
    PasteRequest,
    SelectionEnd,
    SelectionExtend,
    SelectionStart,
    SpreadsheetEvent,
    event_from_dict,
)
from sheetgrid.spreadsheet.formula import EvalKind, Evaluation, evaluate, is_formula
from sheetgrid.spreadsheet.model import (
    CellRange,
    Clipboard,
    Grid,
    Selection,
    copy_range,
    paste,
    toggle_bold,
)

__all__ = [
    "address_to_cell",
    "cell_to_address",
    "col_index_to_letters",
    "column_labels",
    "letters_to_col_index",
    "AddColumn",
    "AddRow",
    "BoldToggleRequest",
    "CellEdit",
    "CopyRequest",
    "ExportRequest",
    "PasteRequest",
    "SelectionEnd",
    "SelectionExtend",
    "SelectionStart",
    "SpreadsheetEvent",
    "event_from_dict",
    "EvalKind",
    "Evaluation",
    "evaluate",
    "is_formula",
    "CellRange",
    "Clipboard",
    "Grid",
    "Selection",
    "copy_range",
    "paste",
    "toggle_bold",
]
