"""
In-memory exporter for offline testing.

Records every export document instead of writing it anywhere, so tests can
inspect exactly what the spreadsheet handed to its download backend.
"""

import json
from typing import Any, List

from sheetgrid.export.base import ExportDocument


class MemoryExporter:
    """Recording exporter: keeps documents, writes nothing.

    Usage::

        exporter = MemoryExporter()
        sheet = Spreadsheet(exporter=exporter)
        sheet.export()

        assert exporter.last.filename == "spreadsheet.json"
        assert exporter.last_grid() == [["", ...], ...]
    """

    def __init__(self, result: Any = "saved") -> None:
        self.documents: List[ExportDocument] = []
        self.result = result

    def save(self, document: ExportDocument) -> Any:
        self.documents.append(document)
        return self.result

    @property
    def last(self) -> ExportDocument:
        assert self.documents, "nothing was exported"
        return self.documents[-1]

    def last_grid(self) -> List[List[str]]:
        """Decode the payload of the last exported document."""
        return json.loads(self.last.payload.decode("utf-8"))


class FailingExporter:
    """Exporter whose backend always fails with an OSError."""

    def save(self, document: ExportDocument) -> Any:
        raise OSError("disk full")
