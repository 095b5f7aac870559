"""Tests for format codes."""

import pytest
from vague_dates.date_type import (
    DateType,
    VagueDateType,
    end_code,
    from_code,
    is_unknown_code,
    is_valid_format_code,
    side_code,
    start_code,
    to_code,
)


ALL_CODES = ["D", "DD", "D-", "-D", "O", "OO", "O-", "-O",
             "Y", "YY", "Y-", "-Y", "P", "PP", "P-", "-P", "U"]


class TestVagueDateType:
    """Test cases for the format code enumeration."""

    def test_enumeration_covers_all_codes(self):
        """Test that there is one member per combined code."""
        assert sorted(to_code(member) for member in VagueDateType) == sorted(ALL_CODES)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_code_round_trip(self, code):
        """Test that from_code and to_code are inverse."""
        assert to_code(from_code(code)) == code

    def test_named_members(self):
        """Test a sample of member names."""
        assert from_code("OO") is VagueDateType.START_AND_END_MONTH_AND_YEAR
        assert from_code("-Y") is VagueDateType.END_YEAR_RANGE
        assert from_code("P-") is VagueDateType.START_SEASON_RANGE

    @pytest.mark.parametrize("code", [None, "", "DY", "X", "--"])
    def test_unrecognised_codes_map_to_unknown(self, code):
        """Test that empty, mixed and invalid codes map to UNKNOWN."""
        assert from_code(code) is VagueDateType.UNKNOWN


class TestCodeHelpers:
    """Test cases for splitting codes into sides."""

    @pytest.mark.parametrize("code,start,end", [
        ("O", "O", "O"),
        ("DY", "D", "Y"),
        ("Y-", "Y", "-"),
        ("-P", "-", "P"),
        ("", "", ""),
        (None, "", ""),
    ])
    def test_start_and_end_code(self, code, start, end):
        """Test reading each side of a code."""
        assert start_code(code) == start
        assert end_code(code) == end
        assert side_code(code, DateType.START) == start
        assert side_code(code, DateType.END) == end

    @pytest.mark.parametrize("code,expected", [
        (None, True),
        ("", True),
        ("U", True),
        ("Y", False),
        ("-Y", False),
    ])
    def test_is_unknown_code(self, code, expected):
        """Test which codes carry no date."""
        assert is_unknown_code(code) is expected

    @pytest.mark.parametrize("code,expected", [
        ("", True),
        ("U", True),
        ("D", True),
        ("DY", True),
        ("O-", True),
        ("-P", True),
        ("--", False),
        ("-", False),
        ("UU", False),
        ("X", False),
        ("DDD", False),
        (None, False),
    ])
    def test_is_valid_format_code(self, code, expected):
        """Test the format code alphabet."""
        assert is_valid_format_code(code) is expected
