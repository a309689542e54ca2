from __future__ import annotations

import pytest

from ferry_gtfs.text.cleaning import (
    clean_bounds,
    clean_label,
    clean_numbers,
    clean_street_types,
    remove_word,
    to_lower,
)


class TestCleanStreetTypes:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("main st", "main street"),
            ("Main St.", "Main Street"),
            ("MAIN ST", "MAIN STREET"),
            ("Lonsdale Ave", "Lonsdale Avenue"),
            ("Marine Dr & 3rd", "Marine Drive & 3rd"),
            ("Waterfront Stn", "Waterfront Station"),
        ],
    )
    def test_expands_abbreviations(self, raw, expected):
        assert clean_street_types(raw) == expected

    def test_dot_glued_to_next_word_becomes_space(self):
        assert clean_street_types("st.paul hospital") == "street paul hospital"
        assert clean_street_types("St.Paul Hospital") == "Street Paul Hospital"
        assert clean_street_types("Main St., Vancouver") == "Main Street, Vancouver"

    def test_leaves_ordinals_and_full_words_alone(self):
        assert clean_street_types("1st Street") == "1st Street"
        assert clean_street_types("Stanley Park") == "Stanley Park"

    def test_empty(self):
        assert clean_street_types("") == ""


class TestCleanNumbers:
    def test_ordinal_words(self):
        assert clean_numbers("first ave") == "1st ave"
        assert clean_numbers("Third Street") == "3rd Street"

    def test_ordinal_suffix_casing(self):
        assert clean_numbers("2ND AVENUE") == "2nd AVENUE"

    def test_leading_zeros(self):
        assert clean_numbers("bay 007") == "bay 7"
        assert clean_numbers("bay 0") == "bay 0"

    def test_decimals_untouched(self):
        assert clean_numbers("km 1.05") == "km 1.05"


class TestCleanLabel:
    def test_whitespace_and_capitalisation(self):
        assert clean_label("  lonsdale   quay  ") == "Lonsdale Quay"

    def test_punctuation_and_dangling_separators(self):
        assert clean_label("lonsdale quay , ") == "Lonsdale Quay"
        assert clean_label("- waterfront ( north )") == "Waterfront (North)"

    def test_keeps_inner_casing(self):
        assert clean_label("UBC exchange") == "UBC Exchange"
        assert clean_label("1st street") == "1st Street"

    def test_empty(self):
        assert clean_label("") == ""
        assert clean_label("   ") == ""


def test_remove_word_only_standalone():
    assert remove_word("SeaBus to Lonsdale", "seabus") == "  to Lonsdale"
    assert clean_label(remove_word("SeaBus to Lonsdale", "seabus")) == "To Lonsdale"
    assert remove_word("seabusy", "seabus") == "seabusy"
    assert remove_word("", "seabus") == ""


def test_clean_bounds():
    assert clean_label(clean_bounds("Lonsdale Quay Northbound")) == "Lonsdale Quay"
    assert clean_label(clean_bounds("waterfront south bound")) == "Waterfront"
    assert clean_label(clean_bounds("Lonsdale Quay North  Bound")) == "Lonsdale Quay"
    assert clean_label(clean_bounds("waterfront south \t bound")) == "Waterfront"
    assert clean_bounds("Northbridge") == "Northbridge"


def test_to_lower_ignores_locale():
    assert to_lower("WATERFRONT STATION") == "waterfront station"
    assert to_lower("TITLE") == "title"
