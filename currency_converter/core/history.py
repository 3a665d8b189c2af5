"""
Conversion history.

Keeps the most recent confirmed conversions, newest first.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .currencies import Currency

MAX_HISTORY_ENTRIES = 5


@dataclass(frozen=True)
class ConversionRecord:
    """Immutable record of a confirmed conversion.

    Created once when the user saves a conversion and never modified.
    """
    from_amount: float
    from_currency: Currency
    to_amount: float
    to_currency: Currency
    timestamp: str


class HistoryLedger:
    """Bounded, newest-first list of conversion records.

    Records can only be added; the oldest ones fall off once the ledger
    holds MAX_HISTORY_ENTRIES.
    """

    def __init__(self):
        self._entries: List[ConversionRecord] = []

    def record(self, entry: ConversionRecord) -> None:
        """Prepend an entry and drop anything beyond the cap."""
        self._entries = ([entry] + self._entries)[:MAX_HISTORY_ENTRIES]

    def entries(self) -> Tuple[ConversionRecord, ...]:
        """Current records, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
