"""Shared pytest configuration and fixtures for sheetgrid tests."""

import pytest

from sheetgrid import Spreadsheet, SpreadsheetConfig
from sheetgrid.spreadsheet.model import Grid
from tests.helpers.memory_exporter import MemoryExporter


@pytest.fixture
def grid() -> Grid:
    """Default 10x10 empty grid."""
    return Grid.empty(10, 10)


@pytest.fixture
def numbers_grid() -> Grid:
    """Small grid with A1=1, A2=2, B1=3, B2=4 and some text in C."""
    return Grid.from_rows([
        ["1", "3", "label", ""],
        ["2", "4", "", ""],
        ["", "", "x", ""],
    ])


@pytest.fixture
def exporter() -> MemoryExporter:
    return MemoryExporter()


@pytest.fixture
def sheet(exporter) -> Spreadsheet:
    return Spreadsheet(exporter=exporter)


@pytest.fixture
def small_sheet(exporter) -> Spreadsheet:
    """3x3 sheet filled with A1..C3 addresses as values."""
    sheet = Spreadsheet(SpreadsheetConfig(rows=3, cols=3), exporter=exporter)
    for row in range(3):
        for col in range(3):
            sheet.edit_cell(row, col, f"{'ABC'[col]}{row + 1}")
    return sheet
