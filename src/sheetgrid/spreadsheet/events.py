"""
Spreadsheet input event classes.

This module defines the normalized events the presentation layer delivers to
the spreadsheet model:
- CellEdit: A cell's text was changed
- AddRow / AddColumn: The grid should grow by one row or column
- SelectionStart / SelectionExtend / SelectionEnd: Pointer down, over, up
- CopyRequest / PasteRequest: The copy or paste gesture was made
- BoldToggleRequest: Bold should be toggled on the selection
- ExportRequest: The grid should be exported

Each event round-trips through a plain dictionary so that a host can pass
events across a JSON boundary (e.g. from a browser front end).
"""

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass
class CellEdit:
    """Replace the text of one cell.

    Attributes:
        row: Target row (0-indexed)
        col: Target column (0-indexed)
        value: New cell text
    """
    row: int
    col: int
    value: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "CellEdit",
            "row": self.row,
            "col": self.col,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CellEdit":
        """Create from dictionary representation."""
        return cls(
            row=data["row"],
            col=data["col"],
            value=data["value"],
        )


@dataclass
class AddRow:
    """Append an empty row at the bottom of the grid."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "AddRow"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddRow":
        return cls()


@dataclass
class AddColumn:
    """Append an empty column on the right of the grid."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "AddColumn"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddColumn":
        return cls()


@dataclass
class SelectionStart:
    """Pointer pressed on a cell; starts a new selection there.

    Attributes:
        row: Cell row (0-indexed)
        col: Cell column (0-indexed)
    """
    row: int
    col: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"type": "SelectionStart", "row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectionStart":
        """Create from dictionary representation."""
        return cls(row=data["row"], col=data["col"])


@dataclass
class SelectionExtend:
    """Pointer moved over a cell while pressed.

    Attributes:
        row: Cell row (0-indexed)
        col: Cell column (0-indexed)
    """
    row: int
    col: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"type": "SelectionExtend", "row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectionExtend":
        """Create from dictionary representation."""
        return cls(row=data["row"], col=data["col"])


@dataclass
class SelectionEnd:
    """Pointer released; the selection is finalized."""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "SelectionEnd"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SelectionEnd":
        return cls()


@dataclass
class CopyRequest:
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "CopyRequest"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CopyRequest":
        return cls()


@dataclass
class PasteRequest:
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "PasteRequest"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasteRequest":
        return cls()


@dataclass
class BoldToggleRequest:
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "BoldToggleRequest"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoldToggleRequest":
        return cls()


@dataclass
class ExportRequest:
    def to_dict(self) -> Dict[str, Any]:
        return {"type": "ExportRequest"}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportRequest":
        return cls()


# Type alias for all event types
SpreadsheetEvent = Union[
    CellEdit,
    AddRow,
    AddColumn,
    SelectionStart,
    SelectionExtend,
    SelectionEnd,
    CopyRequest,
    PasteRequest,
    BoldToggleRequest,
    ExportRequest,
]

_EVENT_TYPES = {
    cls.__name__: cls
    for cls in (
        CellEdit,
        AddRow,
        AddColumn,
        SelectionStart,
        SelectionExtend,
        SelectionEnd,
        CopyRequest,
        PasteRequest,
        BoldToggleRequest,
        ExportRequest,
    )
}


def event_from_dict(data: Dict[str, Any]) -> SpreadsheetEvent:
    """Deserialize an event from dictionary representation.

    Args:
        data: Dictionary with 'type' key indicating event type

    Returns:
        The corresponding event object

    Raises:
        ValueError: If the event type is unknown or a required field is missing
    """
    event_type = data.get("type")
    event_cls = _EVENT_TYPES.get(event_type)
    if event_cls is None:
        raise ValueError(f"Unknown event type: {event_type}")
    try:
        return event_cls.from_dict(data)
    except KeyError as e:
        raise ValueError(f"Missing required field in {event_type} event: {e}") from e
