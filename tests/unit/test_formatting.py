"""
Unit Tests for Formatting Helpers

Tests byte sizes, phone numbers, coordinates, transliteration, word casing
and UUID dashes.
"""

import pytest

from data_toolkit.formatting import (
    bytes_to_human,
    format_phone,
    latitude_to_degrees,
    longitude_to_degrees,
    normalize,
    to_title_case_words,
    uuid_add_dashes,
    uuid_strip_dashes,
    TRANSLITERATION_TABLE,
)
from data_toolkit.exceptions import InvalidArgumentError


class TestBytesToHuman:
    """Test cases for bytes_to_human."""

    @pytest.mark.parametrize(
        "num,expected",
        [
            (0, "0.0B"),
            (1023, "1023.0B"),
            (1024, "1.0KiB"),
            (1536, "1.5KiB"),
            (1048576, "1.0MiB"),
            (1073741824, "1.0GiB"),
            (1024**4, "1.0TiB"),
            (1024**7, "1.0ZiB"),
            (1024**8, "1.0YiB"),
            (1024**9, "1024.0YiB"),
        ],
    )
    def test_units(self, num, expected):
        assert bytes_to_human(num) == expected

    def test_negative(self):
        assert bytes_to_human(-2048) == "-2.0KiB"


class TestFormatPhone:
    """Test cases for format_phone."""

    @pytest.mark.parametrize("value", ["15551234444", "5551234444", "+15551234444"])
    def test_valid(self, value):
        assert format_phone(value) == "+1 (555) 123-4444"

    @pytest.mark.parametrize(
        "value",
        [
            "abc",
            "555123444",
            "255512344445",
            "",
            "555-123-4444",
            "\u0665\u0665\u0665\u0661\u0662\u0663\u0664\u0664\u0664\u0664",  # Arabic-Indic digits
            "5551234444\n",
        ],
    )
    def test_invalid_unchanged(self, value):
        assert format_phone(value) == value

    def test_non_string_unchanged(self):
        assert format_phone(None) is None
        assert format_phone(5551234444) == 5551234444


class TestCoordinates:
    """Test cases for latitude_to_degrees and longitude_to_degrees."""

    def test_latitude_north(self):
        assert latitude_to_degrees(45.5042) == "N 45° 30' 15.12\""

    def test_latitude_south(self):
        assert latitude_to_degrees(-33.8688) == "S 33° 52' 7.68\""

    def test_longitude(self):
        assert longitude_to_degrees(-73.5674) == "W 73° 34' 2.64\""
        assert longitude_to_degrees(151.2093) == "E 151° 12' 33.48\""

    def test_zero_uses_first_label(self):
        assert latitude_to_degrees(0) == "N 0° 0' 0.00\""

    def test_seconds_carry(self):
        """Test seconds rounding up to 60 carry into minutes and degrees."""
        assert latitude_to_degrees(10.9999999) == "N 11° 0' 0.00\""

    def test_custom_labels(self):
        assert latitude_to_degrees(-1.5, ("North", "South")) == "South 1° 30' 0.00\""
        assert longitude_to_degrees(2.25, ["+", "-"]) == "+ 2° 15' 0.00\""

    @pytest.mark.parametrize("labels", [("N",), ("N", "S", "X"), "NS", ("N", 5)])
    def test_invalid_labels(self, labels):
        with pytest.raises(InvalidArgumentError):
            latitude_to_degrees(1.0, labels)

    def test_precision_from_config(self, monkeypatch):
        monkeypatch.setenv("GEO_SECONDS_PRECISION", "0")
        assert latitude_to_degrees(45.5042) == "N 45° 30' 15\""


class TestNormalize:
    """Test cases for normalize."""

    def test_accents(self):
        assert normalize("Crème Brûlée") == "Creme Brulee"
        assert normalize("Ångström") == "Angstrom"

    def test_ligatures(self):
        assert normalize("ﬃ ﬂ Æ œ ß") == "ffi fl AE oe ss"

    def test_cyrillic(self):
        assert normalize("Москва") == "Moskva"
        assert normalize("Щука") == "SCHuka"

    def test_unmatched_pass_through(self):
        assert normalize("plain text 123 ✓") == "plain text 123 ✓"
        assert normalize("") == ""

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            TRANSLITERATION_TABLE["x"] = "y"


class TestTitleCase:
    """Test cases for to_title_case_words."""

    def test_words(self):
        assert to_title_case_words("hELLO wORLD") == "Hello World"

    def test_spacing_kept(self):
        assert to_title_case_words("a  b") == "A  B"
        assert to_title_case_words(" lead") == " Lead"

    def test_empty(self):
        assert to_title_case_words("") == ""


class TestUUID:
    """Test cases for uuid_add_dashes and uuid_strip_dashes."""

    DASHED = "123e4567-e89b-12d3-a456-426614174000"
    PLAIN = "123e4567e89b12d3a456426614174000"

    def test_strip(self):
        assert uuid_strip_dashes(self.DASHED) == self.PLAIN

    def test_add(self):
        assert uuid_add_dashes(self.PLAIN) == self.DASHED

    def test_round_trip(self):
        assert uuid_add_dashes(uuid_strip_dashes(self.DASHED)) == self.DASHED
