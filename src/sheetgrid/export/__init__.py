"""
Export module for sheetgrid.

This module provides the export document type and backends that deliver it.
``FileExporter`` writes the document to a local directory; hosts that serve
a browser download implement the ``Exporter`` protocol themselves.
"""

from sheetgrid.export.base import ExportDocument, Exporter
from sheetgrid.export.file_exporter import FileExporter

__all__ = [
    "ExportDocument",
    "Exporter",
    "FileExporter",
]
