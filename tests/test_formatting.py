"""
Unit tests for amount formatting and parsing.

Tests fixed-point rounding, the half-away-from-zero tie rule and parsing.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from currency_converter.core.formatting import (
    DECIMAL_PLACE_OPTIONS,
    format_amount,
    format_clock,
    format_timestamp,
    parse_amount,
    round_amount,
)


class TestFormatAmount:
    """Test fixed-point formatting."""

    def test_two_places(self):
        """Verify standard two decimal formatting."""
        assert format_amount(85.0, 2, "EUR") == "85.00 EUR"

    def test_zero_places(self):
        """Verify whole-number formatting has no decimal point."""
        assert format_amount(110.0, 0, "JPY") == "110 JPY"

    def test_four_and_six_places(self):
        """Verify higher precision pads with zeros."""
        assert format_amount(1.5, 4, "USD") == "1.5000 USD"
        assert format_amount(1.5, 6, "USD") == "1.500000 USD"

    def test_no_grouping_separators(self):
        """Verify large amounts are not grouped."""
        assert format_amount(1234567.891, 2, "HKD") == "1234567.89 HKD"

    def test_ties_round_away_from_zero(self):
        """Verify ties round up rather than to even."""
        assert format_amount(0.5, 0, "USD") == "1 USD"
        assert format_amount(2.5, 0, "USD") == "3 USD"
        assert format_amount(0.005, 2, "USD") == "0.01 USD"
        assert format_amount(2.675, 2, "USD") == "2.68 USD"

    def test_rounds_down_below_tie(self):
        """Verify values below the tie round down."""
        assert format_amount(2.674, 2, "USD") == "2.67 USD"

    def test_rounding_carries_into_integer_part(self):
        """Verify rounding can carry over the decimal point."""
        assert format_amount(99.995, 2, "GBP") == "100.00 GBP"

    def test_tiny_amount_not_in_scientific_notation(self):
        """Verify small values stay in fixed-point form."""
        assert format_amount(0.0000005, 6, "USD") == "0.000001 USD"
        assert format_amount(0.0, 6, "USD") == "0.000000 USD"

    def test_very_large_amount(self):
        """Verify values beyond default decimal precision still format."""
        assert format_amount(1e25, 6, "JPY") == "10000000000000000000000000.000000 JPY"

    @pytest.mark.parametrize("places", [1, 3, 5, -1, 8])
    def test_unsupported_places_rejected(self, places):
        """Verify only 0, 2, 4 and 6 places are accepted."""
        with pytest.raises(ValueError, match="decimal places must be one of"):
            format_amount(1.0, places, "USD")


class TestNonFiniteAmounts:
    """Test formatting of amounts with no fixed-point form."""

    def test_infinity_renders_token(self):
        """Verify infinity formats instead of raising."""
        assert format_amount(float("inf"), 2, "JPY") == "Infinity JPY"
        assert format_amount(float("-inf"), 0, "JPY") == "-Infinity JPY"

    def test_nan_renders_token(self):
        assert format_amount(float("nan"), 4, "EUR") == "NaN EUR"

    def test_non_finite_still_checks_places(self):
        with pytest.raises(ValueError, match="decimal places must be one of"):
            format_amount(float("inf"), 3, "USD")

    def test_non_finite_tokens_parse_to_zero(self):
        assert parse_amount(format_amount(float("inf"), 2, "JPY")) == 0.0

    def test_round_amount_rejects_non_finite(self):
        with pytest.raises(ValueError, match="non-finite"):
            round_amount(float("inf"), 2)

    def test_huge_finite_amount_formats(self):
        """Verify the largest floats still format in fixed point."""
        text = format_amount(1.7e308, 2, "JPY")
        assert text.endswith(".00 JPY")
        assert parse_amount(text) == 1.7e308


class TestParseAmount:
    """Test parsing formatted amounts."""

    def test_parse_formatted_string(self):
        """Verify the leading token is parsed."""
        assert parse_amount("85.00 EUR") == 85.0
        assert parse_amount("110 JPY") == 110.0

    def test_parse_plain_number(self):
        """Verify text without a code parses too."""
        assert parse_amount("  12.5") == 12.5

    def test_unparseable_returns_zero(self):
        """Verify garbage parses to 0.0 instead of raising."""
        assert parse_amount("") == 0.0
        assert parse_amount("   ") == 0.0
        assert parse_amount("abc EUR") == 0.0
        assert parse_amount("1,000.00 USD") == 0.0

    def test_non_finite_returns_zero(self):
        """Verify nan and infinity are treated as unparseable."""
        assert parse_amount("nan EUR") == 0.0
        assert parse_amount("inf EUR") == 0.0

    @pytest.mark.parametrize("places", DECIMAL_PLACE_OPTIONS)
    def test_parse_recovers_rounded_value(self, places):
        """Verify parse(format(x)) equals x rounded to the displayed precision."""
        for value in [0.0, 1.23456789, 85.0, 123.456, 99.995, 12941.176470588235]:
            expected = float(round_amount(value, places))
            assert parse_amount(format_amount(value, places, "EUR")) == expected


class TestRoundAmount:
    """Test the rounding helper."""

    def test_returns_decimal_with_requested_exponent(self):
        """Verify the rounded value carries exactly the requested digits."""
        assert round_amount(1.0, 4) == Decimal("1.0000")
        assert round_amount(1.0, 4).as_tuple().exponent == -4


class TestClockFormatting:
    """Test clock and timestamp formatting."""

    def test_format_clock(self):
        """Verify the long clock format."""
        moment = datetime(2026, 10, 17, 14, 3, 9)
        assert format_clock(moment) == "Saturday, October 17, 2026 - 14:03:09"

    def test_format_timestamp(self):
        """Verify the short history timestamp format."""
        moment = datetime(2026, 1, 5, 9, 0, 1)
        assert format_timestamp(moment) == "Jan 05, 09:00:01"
