"""
Filesystem export backend.

Writes export documents into a target directory under their suggested
filename, replacing any previous export with the same name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from sheetgrid.exceptions import ExportError
from sheetgrid.export.base import ExportDocument

logger = logging.getLogger(__name__)


class FileExporter:
    """Exporter that saves documents as files.

    Usage::

        exporter = FileExporter("downloads")
        sheet = Spreadsheet(exporter=exporter)
        path = sheet.export()
    """

    def __init__(self, directory: Union[str, Path] = ".") -> None:
        self.directory = Path(directory)

    def save(self, document: ExportDocument) -> Path:
        """Write ``document.payload`` to ``directory / document.filename``.

        Raises:
            ExportError: If the filename escapes the directory or the write fails
        """
        name = Path(document.filename).name
        if not name or name != document.filename:
            raise ExportError(f"Export filename must be a plain file name: {document.filename!r}")

        path = self.directory / name
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_bytes(document.payload)
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

        logger.debug("Wrote %d bytes to %s", len(document.payload), path)
        return path
