"""
Currency definitions and the static rate table.

All rates are expressed against a single reference currency.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


REFERENCE_CODE = "USD"


@dataclass(frozen=True)
class Currency:
    """A supported currency and its rate against the reference currency."""
    code: str
    name: str
    rate: float  # Units of this currency per 1 unit of the reference currency
    flag: str = ""

    def __post_init__(self):
        """Validate code and rate."""
        if not self.code or not self.code.strip():
            raise ValueError("currency code cannot be empty")
        if self.rate <= 0:
            raise ValueError(f"rate for {self.code} must be > 0")


@dataclass(frozen=True)
class CurrencyTable:
    """Fixed table of supported currencies."""
    currencies: Tuple[Currency, ...]
    reference_code: str = REFERENCE_CODE

    def __post_init__(self):
        """Validate uniqueness and the reference currency entry."""
        codes = [currency.code for currency in self.currencies]
        duplicates = {code for code in codes if codes.count(code) > 1}
        if duplicates:
            raise ValueError(f"Duplicate currency codes: {sorted(duplicates)}")

        reference = self.lookup(self.reference_code)
        if reference is None:
            raise ValueError(f"Reference currency {self.reference_code} missing from table")
        if reference.rate != 1.0:
            raise ValueError(f"Reference currency {self.reference_code} must have rate 1.0")

    def lookup(self, code: str) -> Optional[Currency]:
        """Find a currency by code.

        Args:
            code: Currency code, case-insensitive

        Returns:
            The Currency, or None if the code is not supported
        """
        normalized = code.strip().upper()
        for currency in self.currencies:
            if currency.code == normalized:
                return currency
        return None

    @property
    def reference(self) -> Currency:
        """The currency every rate is expressed against."""
        return self.lookup(self.reference_code)

    def codes(self) -> Tuple[str, ...]:
        return tuple(currency.code for currency in self.currencies)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self.currencies)

    def __len__(self) -> int:
        return len(self.currencies)


# Fixed rate table - no remote fetching, no runtime registration
CURRENCY_TABLE = CurrencyTable((
    Currency("USD", "US Dollar", 1.0, "\U0001F1FA\U0001F1F8"),
    Currency("EUR", "Euro", 0.85, "\U0001F1EA\U0001F1FA"),
    Currency("JPY", "Japanese Yen", 110.0, "\U0001F1EF\U0001F1F5"),
    Currency("HKD", "Hong Kong Dollar", 7.8, "\U0001F1ED\U0001F1F0"),
    Currency("GBP", "British Pound", 0.73, "\U0001F1EC\U0001F1E7"),
    Currency("CAD", "Canadian Dollar", 1.25, "\U0001F1E8\U0001F1E6"),
))
