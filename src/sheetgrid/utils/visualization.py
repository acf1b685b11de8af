"""
Grid visualization utilities.

Provides a plain-text table rendering of a spreadsheet snapshot, laid out
like the widget: column letters across the top, 1-based row numbers down
the left. Bold cells are wrapped in ``*`` and selected cells in ``[ ]``.
"""

from typing import TYPE_CHECKING, List, Sequence

from ..spreadsheet.address import column_labels

if TYPE_CHECKING:
    from ..core.spreadsheet import CellView


def visualize(snapshot: Sequence[Sequence["CellView"]], max_width: int = 12) -> str:
    """Render a snapshot as a text table of display values.

    Args:
        snapshot: Rows of CellView, as returned by Spreadsheet.snapshot()
        max_width: Longest cell text shown before truncating with "..."

    Returns:
        Multi-line string, one line per grid row plus a header line

    Example:
        >>> sheet = Spreadsheet(SpreadsheetConfig(rows=2, cols=2))
        >>> sheet.edit_cell(0, 0, "1")
        >>> print(visualize(sheet.snapshot()))
           | A | B
        1  | 1 |
        2  |   |
    """
    if not snapshot:
        return ""

    n_cols = len(snapshot[0])
    body = [[_format_cell(view, max_width) for view in row] for row in snapshot]
    header = column_labels(n_cols)

    widths = [
        max([len(header[col])] + [len(row[col]) for row in body])
        for col in range(n_cols)
    ]
    gutter = len(str(len(body))) + 1

    lines: List[str] = []
    lines.append(_join(" " * gutter, header, widths))
    for index, row in enumerate(body):
        lines.append(_join(str(index + 1).ljust(gutter), row, widths))
    return "\n".join(line.rstrip() for line in lines)


def _join(label: str, cells: Sequence[str], widths: Sequence[int]) -> str:
    return " | ".join([label] + [cell.ljust(width) for cell, width in zip(cells, widths)])


def _format_cell(view: "CellView", max_width: int) -> str:
    text = view.display
    if len(text) > max_width:
        text = text[:max(max_width - 3, 0)] + "..."
    if view.is_bold and text:
        text = f"*{text}*"
    if view.is_selected:
        text = f"[{text}]"
    return text
