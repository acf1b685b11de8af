"""
A1 address codec.

Converts between 0-indexed (row, col) pairs used internally and the
1-indexed A1 notation shown to users (e.g. row 2, col 1 -> "B3").

Column letters use bijective base-26: the digits A-Z stand for 1-26, so
there is no zero digit and "AA" directly follows "Z".
"""

import re
from typing import List, Tuple

from sheetgrid.exceptions import InvalidAddressError

_ADDRESS_RE = re.compile(r"([A-Z]+)([0-9]+)")
_LETTERS_RE = re.compile(r"[A-Z]+")


def col_index_to_letters(index: int) -> str:
    """Convert a 0-indexed column number to its A1 column letters.

    Args:
        index: Column number (0 = A, 25 = Z, 26 = AA, 701 = ZZ)

    Returns:
        Column letter(s)

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    letters = ""
    while index >= 0:
        letters = chr(ord("A") + index % 26) + letters
        index = index // 26 - 1
    return letters


def letters_to_col_index(letters: str) -> int:
    """Convert A1 column letters to a 0-indexed column number.

    Args:
        letters: Uppercase column letter(s) (A, Z, AA, ...)

    Returns:
        Column number (A = 0, Z = 25, AA = 26, ...)

    Raises:
        InvalidAddressError: If letters is not a run of A-Z
    """
    if not isinstance(letters, str) or not _LETTERS_RE.fullmatch(letters):
        raise InvalidAddressError(f"Invalid column letters: {letters!r}")

    acc = 0
    for char in letters:
        acc = acc * 26 + (ord(char) - ord("A") + 1)
    return acc - 1


def address_to_cell(address: str) -> Tuple[int, int]:
    """Parse an A1 address into 0-indexed (row, col).

    Args:
        address: Address such as "B3"

    Returns:
        Tuple of (row, col), e.g. "B3" -> (2, 1)

    Raises:
        InvalidAddressError: If address does not match [A-Z]+[0-9]+ or
            names row 0
    """
    if not isinstance(address, str):
        raise InvalidAddressError(f"Invalid cell address: {address!r}")

    match = _ADDRESS_RE.fullmatch(address)
    if not match:
        raise InvalidAddressError(f"Invalid cell address: {address!r}")

    letters, digits = match.groups()
    try:
        row = int(digits) - 1
    except ValueError as e:
        raise InvalidAddressError(f"Row number too long: {address[:20]!r}...") from e
    if row < 0:
        raise InvalidAddressError(f"Row numbers start at 1: {address!r}")

    return row, letters_to_col_index(letters)


def cell_to_address(row: int, col: int) -> str:
    """Format 0-indexed (row, col) as an A1 address.

    Raises:
        ValueError: If row or col is negative
    """
    if row < 0:
        raise ValueError(f"Row index must be non-negative, got {row}")
    return f"{col_index_to_letters(col)}{row + 1}"


def column_labels(count: int) -> List[str]:
    """Header labels for the first ``count`` columns (A, B, C, ...)."""
    return [col_index_to_letters(i) for i in range(count)]
