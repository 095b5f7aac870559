"""Tests for the individual portion parser strategies."""

from datetime import date

import pytest
from vague_dates.portion_parsing.abbreviated_month_parser import AbbreviatedMonthPortionParser
from vague_dates.portion_parsing.full_date_parser import FullDatePortionParser
from vague_dates.portion_parsing.month_name_parser import MonthNamePortionParser
from vague_dates.portion_parsing.numeric_parser import NumericPortionParser
from vague_dates.portion_parsing.season_parser import SeasonPortionParser
from vague_dates.portion_parsing.unknown_parser import UnknownPortionParser
from vague_dates.vocabulary import DEFAULT_VOCABULARY, VocabularyTable


class TestUnknownPortionParser:
    """Test cases for the unknown-date literal."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = UnknownPortionParser()

    @pytest.mark.parametrize("text", ["Unknown", "unknown", "UNKNOWN", "U", "unk"])
    def test_prefixes_of_literal(self, text):
        """Test that any prefix of the literal is unknown."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "U"
        assert result.normalised_text == "Unknown"
        assert result.year is None

    @pytest.mark.parametrize("text", ["Unknowns", "nk", "1990", "March"])
    def test_rejects_other_text(self, text):
        """Test that other text is not unknown."""
        assert self.parser.parse(text, None, DEFAULT_VOCABULARY) is None


class TestNumericPortionParser:
    """Test cases for bare numbers and month/year pairs."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = NumericPortionParser()

    def test_year_without_context(self):
        """Test parsing 1990 → year 1990."""
        result = self.parser.parse("1990", None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "Y"
        assert result.normalised_text == "1990"
        assert result.year == 1990

    def test_small_number_without_context_is_year(self):
        """Test parsing 7 without a context year → year 7."""
        result = self.parser.parse("7", None, DEFAULT_VOCABULARY)
        assert result.code == "Y"
        assert result.normalised_text == "7"
        assert result.year == 7

    def test_small_number_with_context_is_month(self):
        """Test parsing 7 with context year 1990 → July 1990."""
        result = self.parser.parse("7", 1990, DEFAULT_VOCABULARY)
        assert result.code == "O"
        assert result.normalised_text == "July 1990"
        assert result.year == 1990

    def test_number_above_twelve_with_context_is_year(self):
        """Test parsing 13 with context year 1990 → year 13."""
        result = self.parser.parse("13", 1990, DEFAULT_VOCABULARY)
        assert result.code == "Y"
        assert result.normalised_text == "13"
        assert result.year == 13

    def test_zero_with_context_fails(self):
        """Test that month 0 is rejected."""
        assert self.parser.parse("0", 1990, DEFAULT_VOCABULARY) is None

    def test_zero_without_context_fails(self):
        """Test that year 0 is rejected."""
        assert self.parser.parse("0", None, DEFAULT_VOCABULARY) is None

    def test_year_out_of_calendar_range_fails(self):
        """Test that year 10000 is rejected."""
        assert self.parser.parse("10000", None, DEFAULT_VOCABULARY) is None

    def test_unknown_era_year_fails(self):
        """Test that year 9999 is rejected as a year and in a month/year pair."""
        assert self.parser.parse("9999", None, DEFAULT_VOCABULARY) is None
        assert self.parser.parse("3/9999", None, DEFAULT_VOCABULARY) is None
        assert self.parser.parse("9998", None, DEFAULT_VOCABULARY).year == 9998

    @pytest.mark.parametrize("text,expected", [
        ("3/1990", "March 1990"),
        ("3 1990", "March 1990"),
        ("12/2001", "December 2001"),
    ])
    def test_month_and_year(self, text, expected):
        """Test parsing month number and year pairs."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "O"
        assert result.normalised_text == expected

    @pytest.mark.parametrize("text", ["13/1990", "0/1990", "3/x", "1/3/1990", "March"])
    def test_rejects_non_numeric_forms(self, text):
        """Test that other shapes are left to later parsers."""
        assert self.parser.parse(text, None, DEFAULT_VOCABULARY) is None


class TestMonthNamePortionParser:
    """Test cases for full month names."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = MonthNamePortionParser()

    @pytest.mark.parametrize("text", ["March 1990", "march 1990", "MARCH 1990", "March/1990"])
    def test_month_and_year(self, text):
        """Test parsing March 1990 in several spellings."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "O"
        assert result.normalised_text == "March 1990"
        assert result.year == 1990

    def test_month_takes_context_year(self):
        """Test parsing January with context year 1990 → January 1990."""
        result = self.parser.parse("January", 1990, DEFAULT_VOCABULARY)
        assert result.normalised_text == "January 1990"
        assert result.year == 1990

    def test_month_defaults_to_current_year(self):
        """Test that a lone month without context uses this year."""
        this_year = date.today().year
        result = self.parser.parse("June", None, DEFAULT_VOCABULARY)
        assert result.normalised_text == f"June {this_year}"
        assert result.year == this_year

    @pytest.mark.parametrize("text", ["Mar 1990", "March nineteen", "March 1990 AD", "Marc"])
    def test_rejects(self, text):
        """Test that abbreviations and malformed years are rejected."""
        assert self.parser.parse(text, None, DEFAULT_VOCABULARY) is None


class TestAbbreviatedMonthPortionParser:
    """Test cases for abbreviated month names."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = AbbreviatedMonthPortionParser()

    @pytest.mark.parametrize("text,expected", [
        ("Mar 1990", "March 1990"),
        ("sep 2001", "September 2001"),
        ("DEC 1999", "December 1999"),
    ])
    def test_normalises_to_full_name(self, text, expected):
        """Test that abbreviations are written out in full."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "O"
        assert result.normalised_text == expected

    def test_full_name_is_not_an_abbreviation(self):
        """Test that March is not matched as an abbreviation."""
        assert self.parser.parse("March 1990", None, DEFAULT_VOCABULARY) is None


class TestSeasonPortionParser:
    """Test cases for season names."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = SeasonPortionParser()

    @pytest.mark.parametrize("text,expected", [
        ("Spring 1990", "Spring 1990"),
        ("summer 1990", "Summer 1990"),
        ("AUTUMN 1990", "Autumn 1990"),
        ("Winter 1989", "Winter 1989"),
    ])
    def test_season_and_year(self, text, expected):
        """Test parsing each season with a year."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "P"
        assert result.normalised_text == expected

    def test_season_takes_context_year(self):
        """Test parsing Spring with context year 1990 → Spring 1990."""
        result = self.parser.parse("Spring", 1990, DEFAULT_VOCABULARY)
        assert result.normalised_text == "Spring 1990"
        assert result.year == 1990

    def test_ambiguous_names_do_not_match(self):
        """Test that a name listed twice matches neither entry."""
        vocabulary = VocabularyTable(season_names=("Spring", "Spring", "Autumn", "Winter"))
        assert self.parser.parse("Spring 1990", None, vocabulary) is None
        assert self.parser.parse("Autumn 1990", None, vocabulary).normalised_text == "Autumn 1990"

    def test_fall_is_not_a_season(self):
        """Test that names outside the vocabulary are rejected."""
        assert self.parser.parse("Fall 1990", None, DEFAULT_VOCABULARY) is None


class TestFullDatePortionParser:
    """Test cases for exact calendar dates."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = FullDatePortionParser()

    @pytest.mark.parametrize("text", ["1/3/1990", "01/03/1990", "1 March 1990", "March 1 1990"])
    def test_day_first_dates(self, text):
        """Test parsing 1 March 1990 in several spellings."""
        result = self.parser.parse(text, None, DEFAULT_VOCABULARY)
        assert result is not None
        assert result.code == "D"
        assert result.normalised_text == "01/03/1990"
        assert result.year == 1990

    def test_month_first_vocabulary(self):
        """Test that day_first=False reads 3/1/1990 as 1 March 1990."""
        vocabulary = VocabularyTable(day_first=False, short_date_format="%m/%d/%Y")
        result = self.parser.parse("3/1/1990", None, vocabulary)
        assert result is not None
        assert result.normalised_text == "03/01/1990"

    def test_vocabulary_month_names(self):
        """Test parsing 1 März 1990 with German month names → 01/03/1990."""
        vocabulary = VocabularyTable(
            month_names=(
                "Januar", "Februar", "März", "April", "Mai", "Juni",
                "Juli", "August", "September", "Oktober", "November", "Dezember",
            ),
            abbreviated_month_names=(
                "Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
                "Jul", "Aug", "Sep", "Okt", "Nov", "Dez",
            ),
        )
        assert self.parser.parse("1 März 1990", None, vocabulary).normalised_text == "01/03/1990"
        assert self.parser.parse("24 Dez 1990", None, vocabulary).normalised_text == "24/12/1990"
        assert self.parser.parse("1 March 1990", None, vocabulary) is None

    def test_rejects_unknown_era_year(self):
        """Test that dates in year 9999 are rejected."""
        assert self.parser.parse("1/3/9999", None, DEFAULT_VOCABULARY) is None
        assert self.parser.parse("31/12/9998", None, DEFAULT_VOCABULARY).year == 9998

    @pytest.mark.parametrize("text", ["March 1990", "1 March", "banana", "31/2/1990", "1/3/1990 10:30"])
    def test_rejects_incomplete_or_invalid_dates(self, text):
        """Test that partial dates, nonsense and times are rejected."""
        assert self.parser.parse(text, None, DEFAULT_VOCABULARY) is None
