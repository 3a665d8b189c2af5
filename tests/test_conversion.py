"""
Unit tests for currency conversion.

Tests identity, reference arithmetic and round trips.
"""

import itertools

import pytest

from currency_converter.core.conversion import convert
from currency_converter.core.currencies import CURRENCY_TABLE

USD = CURRENCY_TABLE.lookup("USD")
EUR = CURRENCY_TABLE.lookup("EUR")
JPY = CURRENCY_TABLE.lookup("JPY")
GBP = CURRENCY_TABLE.lookup("GBP")

AMOUNTS = [0.0, 0.01, 1.0, 7.77, 100.0, 123456.789]


class TestConvert:
    """Test conversion arithmetic."""

    def test_usd_to_eur(self):
        """Verify 100 USD converts to 85 EUR."""
        assert convert(100, USD, EUR) == 85.0

    def test_usd_to_jpy(self):
        """Verify 1 USD converts to 110 JPY."""
        assert convert(1, USD, JPY) == 110.0

    def test_cross_rate_goes_through_reference(self):
        """Verify non-reference pairs convert via USD."""
        # 100 EUR -> 117.647... USD -> 85.88... GBP
        assert convert(100, EUR, GBP) == pytest.approx(100 / 0.85 * 0.73)

    @pytest.mark.parametrize("currency", list(CURRENCY_TABLE), ids=lambda c: c.code)
    def test_same_currency_is_exact_identity(self, currency):
        """Verify converting to the same currency returns the amount unchanged."""
        for amount in AMOUNTS + [0.1, 1 / 3]:
            assert convert(amount, currency, currency) == amount

    def test_matches_reference_formula(self):
        """Verify every pair follows amount / from.rate * to.rate."""
        for a, b in itertools.permutations(CURRENCY_TABLE, 2):
            for amount in AMOUNTS:
                assert convert(amount, a, b) == pytest.approx(amount / a.rate * b.rate)

    def test_round_trip(self):
        """Verify converting there and back recovers the amount."""
        for a, b in itertools.product(CURRENCY_TABLE, repeat=2):
            for amount in AMOUNTS:
                assert convert(convert(amount, a, b), b, a) == pytest.approx(amount)

    def test_zero_amount(self):
        """Verify zero stays zero."""
        assert convert(0.0, USD, JPY) == 0.0
