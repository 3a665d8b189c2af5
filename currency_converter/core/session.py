"""
Converter session state.

Holds the state of the converter screen and updates it in response to
discrete UI events. Each event replaces the state with a new value
computed from the old one; the history ledger is only touched by save().
"""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Optional, Tuple

from .conversion import convert
from .currencies import CURRENCY_TABLE, Currency, CurrencyTable
from .formatting import (
    format_amount,
    format_timestamp,
    parse_amount,
    validate_decimal_places,
)
from .history import ConversionRecord, HistoryLedger

logger = logging.getLogger(__name__)

DEFAULT_BASE_CODE = "USD"
DEFAULT_TARGET_CODE = "EUR"
DEFAULT_DECIMAL_PLACES = 2


@dataclass(frozen=True)
class ConverterState:
    """Snapshot of everything the converter screen shows."""
    base: Currency
    target: Currency
    now: datetime
    amount_input: str = ""
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    dark_theme: bool = False

    @property
    def amount(self) -> float:
        """Amount typed by the user, 0.0 when empty."""
        return parse_amount(self.amount_input)


def is_valid_amount_input(text: str) -> bool:
    """Accept empty input or a finite, non-negative number."""
    if text == "":
        return True
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value) and value >= 0


class ConverterSession:
    """Event-driven converter state plus the conversion history.

    All methods are meant to be called from a single UI thread.
    """

    def __init__(
        self,
        table: CurrencyTable = CURRENCY_TABLE,
        base_code: str = DEFAULT_BASE_CODE,
        target_code: str = DEFAULT_TARGET_CODE,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        dark_theme: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the session.

        Args:
            table: Supported currencies
            base_code: Initial currency to convert from
            target_code: Initial currency to convert to
            decimal_places: Initial display precision
            dark_theme: Whether to start in dark mode
            clock: Source of the current time

        Raises:
            ValueError: If a code is unknown or decimal_places unsupported
        """
        self.table = table
        self._clock = clock
        self._ledger = HistoryLedger()
        self._state = ConverterState(
            base=self._require_currency(base_code),
            target=self._require_currency(target_code),
            now=clock(),
            decimal_places=validate_decimal_places(decimal_places),
            dark_theme=dark_theme,
        )

    @property
    def state(self) -> ConverterState:
        return self._state

    @property
    def history(self) -> Tuple[ConversionRecord, ...]:
        return self._ledger.entries()

    @property
    def amount(self) -> float:
        return self._state.amount

    def _require_currency(self, code: str) -> Currency:
        currency = self.table.lookup(code)
        if currency is None:
            raise ValueError(f"Unsupported currency: {code}")
        return currency

    def set_amount_input(self, text: str) -> bool:
        """Update the amount text if it passes the input filter.

        Returns:
            True if the input was accepted, False if it was rejected
        """
        if not is_valid_amount_input(text):
            logger.debug("Rejected amount input %r", text)
            return False
        if not self._converts_finitely(parse_amount(text)):
            logger.debug("Rejected amount input %r: conversion overflows", text)
            return False
        self._state = replace(self._state, amount_input=text)
        return True

    def _converts_finitely(self, amount: float) -> bool:
        """Check the amount stays finite for every pair in the table."""
        return all(
            math.isfinite(convert(amount, source, target))
            for source in self.table
            for target in self.table
        )

    def select_base(self, code: str) -> Currency:
        currency = self._require_currency(code)
        self._state = replace(self._state, base=currency)
        return currency

    def select_target(self, code: str) -> Currency:
        currency = self._require_currency(code)
        self._state = replace(self._state, target=currency)
        return currency

    def swap(self) -> None:
        """Exchange the base and target currencies."""
        self._state = replace(self._state, base=self._state.target, target=self._state.base)

    def set_decimal_places(self, decimal_places: int) -> None:
        self._state = replace(self._state, decimal_places=validate_decimal_places(decimal_places))

    def toggle_theme(self) -> None:
        self._state = replace(self._state, dark_theme=not self._state.dark_theme)

    def tick(self, now: Optional[datetime] = None) -> datetime:
        """Refresh the clock. Never touches the history."""
        moment = now if now is not None else self._clock()
        self._state = replace(self._state, now=moment)
        return moment

    def preview(self) -> str:
        """Live conversion of the current amount.

        Returns:
            Formatted converted amount, or "" when there is nothing to convert
        """
        state = self._state
        if state.amount <= 0:
            return ""
        converted = convert(state.amount, state.base, state.target)
        return format_amount(converted, state.decimal_places, state.target.code)

    def save(self) -> Optional[ConversionRecord]:
        """Record the current conversion in the history.

        The stored target amount is the rounded value shown in the preview.

        Returns:
            The new record, or None if the amount is not positive
        """
        result = self.preview()
        if not result:
            return None

        moment = self.tick()
        state = self._state
        entry = ConversionRecord(
            from_amount=state.amount,
            from_currency=state.base,
            to_amount=parse_amount(result),
            to_currency=state.target,
            timestamp=format_timestamp(moment),
        )
        self._ledger.record(entry)
        logger.info(
            "Saved conversion %s %s -> %s",
            state.amount_input, state.base.code, result,
        )
        return entry
