"""Core spreadsheet model."""

from .spreadsheet import CellView, Spreadsheet

__all__ = ['CellView', 'Spreadsheet']
