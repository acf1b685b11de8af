"""
Unit tests for spreadsheet input events.

Tests verify:
1. Every event converts to a dict with a 'type' key
2. event_from_dict rebuilds the original event
3. Unknown types and missing fields raise clear errors
"""

import json

import pytest

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
    event_from_dict,
)

ALL_EVENTS = [
    CellEdit(row=2, col=1, value="=SUM(A1:A2)"),
    AddRow(),
    AddColumn(),
    SelectionStart(row=0, col=0),
    SelectionExtend(row=3, col=4),
    SelectionEnd(),
    CopyRequest(),
    PasteRequest(),
    BoldToggleRequest(),
    ExportRequest(),
]


class TestEventSerialization:
    """Tests for event dict conversion."""

    @pytest.mark.parametrize("event", ALL_EVENTS, ids=lambda e: type(e).__name__)
    def test_type_key(self, event):
        data = event.to_dict()
        assert data["type"] == type(event).__name__

    @pytest.mark.parametrize("event", ALL_EVENTS, ids=lambda e: type(e).__name__)
    def test_rebuild_through_json(self, event):
        """Events survive a trip through JSON text."""
        data = json.loads(json.dumps(event.to_dict()))
        assert event_from_dict(data) == event

    def test_cell_edit_fields(self):
        assert CellEdit(row=1, col=2, value="x").to_dict() == {
            "type": "CellEdit",
            "row": 1,
            "col": 2,
            "value": "x",
        }

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown event type: Undo"):
            event_from_dict({"type": "Undo"})

    def test_missing_type(self):
        with pytest.raises(ValueError, match="Unknown event type"):
            event_from_dict({"row": 1})

    def test_missing_field(self):
        with pytest.raises(ValueError, match="Missing required field"):
            event_from_dict({"type": "SelectionStart", "row": 1})
