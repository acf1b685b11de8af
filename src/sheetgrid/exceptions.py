"""
Exception classes for sheetgrid.

These exceptions are used throughout the sheetgrid package to signal the few
error conditions the spreadsheet model can surface to its host.
"""


class InvalidAddressError(ValueError):
    """Raised when a string is not a valid A1-style cell address.

    Only the address codec raises this. Callers that parse user-entered
    text (such as the formula evaluator) catch it and fall back to showing
    the literal text. Examples:
        - Lowercase or mixed letters ("a1")
        - Missing row number ("B") or column letters ("12")
        - Row number zero ("A0"), since rows are 1-based in A1 notation
    """
    pass


class ExportError(Exception):
    """Raised when the grid cannot be handed to the export collaborator.

    This error wraps the exception raised by the exporter (usually an
    ``OSError`` from the filesystem) and provides context about which
    document failed. It is also raised when an export is requested on a
    spreadsheet that has no exporter configured.
    """
    pass
