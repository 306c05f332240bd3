"""Tests for tolerant numeric parsing."""

import pytest

from pointsdesk.utils import parse_numeric, round_half_up


class TestParseNumeric:
    """parse_numeric never fails and always yields a finite number."""

    @pytest.mark.parametrize("value, expected", [
        ("42", 42.0),
        ("550.75", 550.75),
        ("  12.5 ", 12.5),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("12abc", 12.0),
    ])
    def test_numeric_text(self, value, expected) -> None:
        """Leading numeric text is parsed."""
        assert parse_numeric(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "abc", "-", ".", "e5", None, "Infinity", "NaN", "1e999"])
    def test_non_numeric_is_zero(self, value) -> None:
        """Empty, non-numeric and non-finite input becomes 0."""
        assert parse_numeric(value) == 0.0

    def test_numbers_pass_through(self) -> None:
        """Already-numeric values are kept when finite."""
        assert parse_numeric(7) == 7.0
        assert parse_numeric(2.25) == 2.25
        assert parse_numeric(float("inf")) == 0.0
        assert parse_numeric(float("nan")) == 0.0

    def test_bool_is_not_a_number(self) -> None:
        assert parse_numeric(True) == 0.0


class TestRoundHalfUp:
    """Rounding matches nearest-integer, halves up."""

    @pytest.mark.parametrize("value, expected", [
        (0.4, 0), (0.5, 1), (2.5, 3), (10.49, 10), (-0.5, 0), (-1.6, -2),
    ])
    def test_rounding(self, value, expected) -> None:
        assert round_half_up(value) == expected
