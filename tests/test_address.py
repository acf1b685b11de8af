"""
Unit tests for the A1 address codec.

Tests cover:
- Column index <-> letters in bijective base-26
- Address string <-> (row, col)
- Rejection of malformed addresses
"""

import sys

import pytest

from sheetgrid.exceptions import InvalidAddressError
from sheetgrid.spreadsheet.address import (
    address_to_cell,
    cell_to_address,
    col_index_to_letters,
    column_labels,
    letters_to_col_index,
)


class TestColumnLetters:
    """Test Suite for column index/letter conversion."""

    @pytest.mark.parametrize("index,letters", [
        (0, "A"),
        (1, "B"),
        (25, "Z"),
        (26, "AA"),
        (27, "AB"),
        (51, "AZ"),
        (52, "BA"),
        (701, "ZZ"),
        (702, "AAA"),
        (16383, "XFD"),
    ])
    def test_known_values(self, index, letters):
        """Test known column labels in both directions."""
        assert col_index_to_letters(index) == letters
        assert letters_to_col_index(letters) == index

    def test_round_trip_first_columns(self):
        """Every index up to four letters decodes back to itself."""
        for index in range(0, 20000, 7):
            assert letters_to_col_index(col_index_to_letters(index)) == index

    def test_no_zero_digit(self):
        """No label contains a zero-like gap: Z is followed directly by AA."""
        labels = column_labels(28)
        assert labels[24:28] == ["Y", "Z", "AA", "AB"]

    def test_negative_index_rejected(self):
        """Test that negative column indexes raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            col_index_to_letters(-1)

    @pytest.mark.parametrize("letters", ["", "a", "A1", "Ä", "A B"])
    def test_invalid_letters(self, letters):
        """Test that non A-Z input raises InvalidAddressError."""
        with pytest.raises(InvalidAddressError):
            letters_to_col_index(letters)

    def test_column_labels(self):
        assert column_labels(3) == ["A", "B", "C"]
        assert column_labels(0) == []


class TestAddresses:
    """Test Suite for address parsing and formatting."""

    def test_cell_to_address(self):
        """Row 2, col 1 is B3."""
        assert cell_to_address(2, 1) == "B3"
        assert cell_to_address(0, 0) == "A1"
        assert cell_to_address(99, 26) == "AA100"

    def test_address_to_cell(self):
        assert address_to_cell("B3") == (2, 1)
        assert address_to_cell("A1") == (0, 0)
        assert address_to_cell("ZZ10") == (9, 701)

    def test_round_trip(self):
        """address_to_cell inverts cell_to_address."""
        for row in (0, 1, 9, 10, 999):
            for col in (0, 25, 26, 701, 702):
                assert address_to_cell(cell_to_address(row, col)) == (row, col)

    @pytest.mark.parametrize("address", [
        "",
        "A",
        "12",
        "1A",
        "a1",
        "A1B",
        " A1",
        "A1 ",
        "A-1",
        "A1:B2",
    ])
    def test_malformed_addresses(self, address):
        """Test that strings outside [A-Z]+[0-9]+ raise InvalidAddressError."""
        with pytest.raises(InvalidAddressError, match="Invalid cell address"):
            address_to_cell(address)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"), reason="no integer string length limit"
    )
    def test_overlong_row_number_rejected(self):
        """A row number Python refuses to convert is an invalid address."""
        with pytest.raises(InvalidAddressError, match="too long"):
            address_to_cell("A" + "9" * 5000)

    def test_row_zero_rejected(self):
        """A1 rows start at 1, so A0 is not an address."""
        with pytest.raises(InvalidAddressError, match="start at 1"):
            address_to_cell("A0")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidAddressError):
            address_to_cell(None)  # type: ignore

    def test_invalid_address_is_value_error(self):
        """Callers catching ValueError also catch InvalidAddressError."""
        with pytest.raises(ValueError):
            address_to_cell("nope")

    def test_negative_row_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            cell_to_address(-1, 0)
