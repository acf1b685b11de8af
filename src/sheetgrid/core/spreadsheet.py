"""
Spreadsheet model driven by widget events.

``Spreadsheet`` owns all widget state (grid, selection, bold set and
clipboard) and applies normalized input events to it. The presentation layer
reads ``snapshot()`` to draw the grid; nothing here knows how it is drawn.

Capabilities are switched with ``Features``: a plain editable grid, a grid
with selection and clipboard, and a full grid with formulas and bold are the
same class with different flags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional

from sheetgrid.config import SpreadsheetConfig
from sheetgrid.exceptions import ExportError
from sheetgrid.export.base import ExportDocument, Exporter
from sheetgrid.spreadsheet.address import cell_to_address, column_labels
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
)
from sheetgrid.spreadsheet.formula import Evaluation, evaluate
from sheetgrid.spreadsheet.model import (
    Cell,
    CellRange,
    Clipboard,
    Grid,
    Selection,
    copy_range,
    paste,
    toggle_bold,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellView:
    """Everything the presentation layer needs to draw one cell.

    Attributes:
        row: Row index (0-indexed)
        col: Column index (0-indexed)
        address: A1 address of the cell
        stored: Text as entered
        display: Text to show (computed for recognized formulas)
        is_bold: Whether the cell is in the bold set
        is_selected: Whether the cell is inside the current selection
    """
    row: int
    col: int
    address: str
    stored: str
    display: str
    is_bold: bool
    is_selected: bool


class Spreadsheet:
    """Spreadsheet widget model.

    Usage::

        sheet = Spreadsheet()
        sheet.edit_cell(0, 0, "1")
        sheet.edit_cell(1, 0, "2")
        sheet.edit_cell(2, 0, "=SUM(A1:A2)")
        sheet.display_value(2, 0)   # "3"

    Attributes:
        config: Settings the sheet was created with
        grid: Current grid; replaced, never mutated, by each change
        selection: Current pointer selection
        bold: Set of (row, col) cells shown in bold
        clipboard: Values captured by the last copy, or None
    """

    def __init__(
        self,
        config: Optional[SpreadsheetConfig] = None,
        exporter: Optional[Exporter] = None,
    ) -> None:
        self.config = config or SpreadsheetConfig()
        self.exporter = exporter
        self.grid = Grid.empty(self.config.rows, self.config.cols)
        self.selection = Selection()
        self.bold: FrozenSet[Cell] = frozenset()
        self.clipboard: Optional[Clipboard] = None

    @property
    def features(self):
        return self.config.features

    # Event dispatch

    def dispatch(self, event: SpreadsheetEvent) -> Any:
        """Apply one input event.

        Returns:
            The exporter's result for ExportRequest, otherwise None

        Raises:
            TypeError: If event is not a known event type
        """
        if isinstance(event, CellEdit):
            self.edit_cell(event.row, event.col, event.value)
        elif isinstance(event, AddRow):
            self.add_row()
        elif isinstance(event, AddColumn):
            self.add_column()
        elif isinstance(event, SelectionStart):
            self.begin_selection(event.row, event.col)
        elif isinstance(event, SelectionExtend):
            self.extend_selection(event.row, event.col)
        elif isinstance(event, SelectionEnd):
            self.end_selection()
        elif isinstance(event, CopyRequest):
            self.copy()
        elif isinstance(event, PasteRequest):
            self.paste()
        elif isinstance(event, BoldToggleRequest):
            self.toggle_bold()
        elif isinstance(event, ExportRequest):
            return self.export()
        else:
            raise TypeError(f"Unknown event: {event!r}")
        return None

    # Grid store

    def edit_cell(self, row: int, col: int, value: str) -> None:
        if not self.grid.in_bounds(row, col):
            logger.debug("Ignoring edit outside grid at (%d, %d)", row, col)
            return
        logger.debug("Edit %s = %r", cell_to_address(row, col), value)
        self.grid = self.grid.edit_cell(row, col, value)

    def add_row(self) -> None:
        self.grid = self.grid.add_row()
        logger.debug("Added row; grid is now %dx%d", *self.grid.shape)

    def add_column(self) -> None:
        self.grid = self.grid.add_column()
        logger.debug("Added column; grid is now %dx%d", *self.grid.shape)

    # Selection

    def begin_selection(self, row: int, col: int) -> None:
        if not self._enabled("selection"):
            return
        if not self.grid.in_bounds(row, col):
            logger.debug("Ignoring selection start outside grid at (%d, %d)", row, col)
            return
        self.selection.begin(row, col)

    def extend_selection(self, row: int, col: int) -> None:
        if not self._enabled("selection"):
            return
        if not self.grid.in_bounds(row, col):
            return
        self.selection.extend(row, col)

    def end_selection(self) -> None:
        if not self._enabled("selection"):
            return
        self.selection.finish()
        if self.selection.range is not None:
            logger.debug("Selected %s", self.selection.range.to_a1())

    @property
    def selected_range(self) -> Optional[CellRange]:
        return self.selection.range

    # Clipboard

    def copy(self) -> None:
        """Capture the selected values; no-op without a selection."""
        if not self._enabled("clipboard"):
            return
        current = self.selection.range
        if current is None:
            logger.debug("Copy ignored: nothing selected")
            return
        self.clipboard = copy_range(self.grid, current)
        logger.debug("Copied %s (%dx%d)", current.to_a1(), self.clipboard.height, self.clipboard.width)

    def paste(self) -> None:
        """Paste the clipboard at the top-left of the selection.

        Cells that would land outside the grid are dropped.
        """
        if not self._enabled("clipboard"):
            return
        current = self.selection.range
        if current is None or self.clipboard is None or self.clipboard.is_empty():
            logger.debug("Paste ignored: no selection or empty clipboard")
            return
        self.grid = paste(self.grid, self.clipboard, current.top_left)
        logger.debug("Pasted at %s", cell_to_address(*current.top_left))

    # Styling

    def toggle_bold(self) -> None:
        if not self._enabled("bold"):
            return
        current = self.selection.range
        if current is None:
            logger.debug("Bold toggle ignored: nothing selected")
            return
        self.bold = toggle_bold(self.bold, current)

    def is_bold(self, row: int, col: int) -> bool:
        return (row, col) in self.bold

    # Reading

    def evaluate(self, row: int, col: int) -> Evaluation:
        """Evaluate the cell at (row, col) against the current grid.

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        value = self.grid.get(row, col)
        if not self.features.formulas:
            return Evaluation.literal(value)
        return evaluate(value, self.grid)

    def display_value(self, row: int, col: int) -> str:
        return self.evaluate(row, col).display

    def cell(self, row: int, col: int) -> CellView:
        """Build the view of one cell.

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        return CellView(
            row=row,
            col=col,
            address=cell_to_address(row, col),
            stored=self.grid.get(row, col),
            display=self.display_value(row, col),
            is_bold=self.is_bold(row, col),
            is_selected=self.selection.contains(row, col),
        )

    def snapshot(self) -> List[List[CellView]]:
        """Return a view of every cell, row-major."""
        return [
            [self.cell(row, col) for col in range(self.grid.n_cols)]
            for row in range(self.grid.n_rows)
        ]

    def column_labels(self) -> List[str]:
        return column_labels(self.grid.n_cols)

    # Export

    def export_document(self) -> ExportDocument:
        return ExportDocument.from_grid(
            self.grid,
            filename=self.config.export_filename,
            content_type=self.config.export_content_type,
        )

    def export(self) -> Any:
        """Serialize the grid and hand it to the configured exporter.

        Returns:
            Whatever the exporter's ``save`` returns

        Raises:
            ExportError: If no exporter is configured or the exporter fails
        """
        if self.exporter is None:
            raise ExportError("No exporter configured for this spreadsheet")
        document = self.export_document()
        try:
            result = self.exporter.save(document)
        except OSError as e:
            raise ExportError(f"Failed to export {document.filename}: {e}") from e
        logger.info(
            "Exported %dx%d grid as %s (%d bytes)",
            self.grid.n_rows,
            self.grid.n_cols,
            document.filename,
            len(document.payload),
        )
        return result

    def _enabled(self, feature: str) -> bool:
        features = self.features
        if feature in ("clipboard", "bold"):
            enabled = features.selection and getattr(features, feature)
        else:
            enabled = getattr(features, feature)
        if not enabled:
            logger.debug("Ignoring %s request: feature disabled", feature)
        return enabled

    def __repr__(self) -> str:
        return f"Spreadsheet(grid={self.grid!r}, selection={self.selection!r})"
