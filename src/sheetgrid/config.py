"""
Spreadsheet configuration.

``SpreadsheetConfig`` carries the initial grid size, the enabled widget
capabilities and the export document settings. All fields have defaults
matching the stock widget: a 10x10 grid with every feature on, exported as
``spreadsheet.json``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_EXPORT_FILENAME = "spreadsheet.json"
DEFAULT_EXPORT_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Features:
    """Optional widget capabilities.

    A disabled capability's events are ignored by the spreadsheet model.

    Attributes:
        selection: Pointer range selection (required by clipboard and bold)
        clipboard: Copy/paste of the selected range
        formulas: Computed display values for ``=SUM(...)`` cells
        bold: Bold toggling on the selected range
    """
    selection: bool = True
    clipboard: bool = True
    formulas: bool = True
    bold: bool = True

    @classmethod
    def minimal(cls) -> "Features":
        """Plain editable grid: no selection, clipboard, formulas or bold."""
        return cls(selection=False, clipboard=False, formulas=False, bold=False)

    def to_dict(self) -> Dict[str, bool]:
        return {
            "selection": self.selection,
            "clipboard": self.clipboard,
            "formulas": self.formulas,
            "bold": self.bold,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Features":
        defaults = cls()
        return cls(
            selection=bool(data.get("selection", defaults.selection)),
            clipboard=bool(data.get("clipboard", defaults.clipboard)),
            formulas=bool(data.get("formulas", defaults.formulas)),
            bold=bool(data.get("bold", defaults.bold)),
        )


@dataclass(frozen=True)
class SpreadsheetConfig:
    """Settings for a Spreadsheet instance.

    Attributes:
        rows: Initial number of rows (positive)
        cols: Initial number of columns (positive)
        features: Enabled capabilities
        export_filename: Suggested filename handed to the exporter
        export_content_type: MIME type of the export payload
    """
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    features: Features = field(default_factory=Features)
    export_filename: str = DEFAULT_EXPORT_FILENAME
    export_content_type: str = DEFAULT_EXPORT_CONTENT_TYPE

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Grid dimensions must be positive integers")
        if not self.export_filename or not isinstance(self.export_filename, str):
            raise ValueError("Export filename must be a non-empty string")
        if not self.export_content_type:
            raise ValueError("Export content type must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "features": self.features.to_dict(),
            "export_filename": self.export_filename,
            "export_content_type": self.export_content_type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpreadsheetConfig":
        """Create from dictionary representation; missing keys take defaults."""
        return cls(
            rows=int(data.get("rows", DEFAULT_ROWS)),
            cols=int(data.get("cols", DEFAULT_COLS)),
            features=Features.from_dict(data.get("features", {})),
            export_filename=data.get("export_filename", DEFAULT_EXPORT_FILENAME),
            export_content_type=data.get("export_content_type", DEFAULT_EXPORT_CONTENT_TYPE),
        )
