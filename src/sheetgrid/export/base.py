"""
Export interface for handing a grid to a download/save backend.

The Exporter protocol defines the contract every backend must satisfy:
accept a finished export document and persist or deliver it. The model
builds the document; the backend only moves bytes.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from sheetgrid.config import DEFAULT_EXPORT_CONTENT_TYPE, DEFAULT_EXPORT_FILENAME
from sheetgrid.spreadsheet.model import Grid
from sheetgrid.utils.serialization import to_bytes


@dataclass(frozen=True)
class ExportDocument:
    """A serialized grid ready for download.

    Attributes:
        filename: Suggested filename (e.g. "spreadsheet.json")
        content_type: MIME type of the payload
        payload: UTF-8 encoded JSON array of rows
    """
    filename: str
    content_type: str
    payload: bytes

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        filename: str = DEFAULT_EXPORT_FILENAME,
        content_type: str = DEFAULT_EXPORT_CONTENT_TYPE,
    ) -> "ExportDocument":
        return cls(filename=filename, content_type=content_type, payload=to_bytes(grid))


class Exporter(Protocol):
    """Protocol for export backends."""

    def save(self, document: ExportDocument) -> Any:
        """Persist or deliver an export document.

        Args:
            document: The document built from the current grid

        Returns:
            Backend-specific handle. FileExporter returns the written path.
        """
        ...
