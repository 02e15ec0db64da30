"""
Withdrawal calculation engine.

Maps a requested amount to the fewest notes that sum to it exactly.
This module is pure: no I/O, no logging, no shared mutable state. A
NoteCalculator can be shared freely between concurrent requests.

Design Decisions:
- Failures are returned as WithdrawalFailure values, not raised
- Arithmetic runs on integer minor units, so amounts are handled exactly
  at any precision; max_amount bounds the size of a single calculation
- Greedy selection is used only when the denomination set is canonical;
  any other set falls back to a minimal-count search
"""

from decimal import Decimal
from functools import reduce
from math import gcd
from typing import Literal

from .currency import Currency
from .denominations import DenominationSet, as_decimal, to_units
from .models import CalculationOutcome, FailureKind, WithdrawalFailure, WithdrawalResult
from .selection import greedy_units, minimal_units


Strategy = Literal["greedy", "minimal"]

# Bounds the work and memory of a single calculation
DEFAULT_MAX_AMOUNT = Decimal(100000)


class NoteCalculator:
    """
    Computes minimum-count note breakdowns for a fixed denomination set.

    Example:
        calculator = NoteCalculator()

        calculator.calculate(Decimal("80"))
        # WithdrawalResult(notes=(Decimal('50'), Decimal('20'), Decimal('10')))

        calculator.calculate(Decimal("125"))
        # WithdrawalFailure(kind=FailureKind.NOTE_UNAVAILABLE, amount=Decimal('125'), ...)
    """

    def __init__(
        self,
        denominations: DenominationSet | None = None,
        currency: Currency | None = None,
        max_amount: Decimal | int = DEFAULT_MAX_AMOUNT,
    ) -> None:
        self.denominations = denominations or DenominationSet.default()
        self.currency = currency or Currency.default()
        self.max_amount = as_decimal(max_amount)
        if not self.max_amount.is_finite() or self.max_amount <= 0:
            raise ValueError(f"Maximum amount must be positive, got {self.max_amount}")
        self.strategy: Strategy = "greedy" if self.denominations.is_canonical() else "minimal"

    def calculate(self, amount: Decimal | int | None) -> CalculationOutcome:
        """
        Calculate the notes to dispense for an amount.

        Args:
            amount: Requested amount. None is treated as zero.

        Returns:
            WithdrawalResult with notes largest first, or WithdrawalFailure
            tagged INVALID_ARGUMENT (negative, non-finite or above max_amount) or
            NOTE_UNAVAILABLE (no exact decomposition exists).

        Raises:
            TypeError: If amount is a float or another inexact type.
        """
        if amount is None:
            return WithdrawalResult()

        requested = as_decimal(amount)

        if not requested.is_finite():
            return WithdrawalFailure(
                kind=FailureKind.INVALID_ARGUMENT,
                amount=requested,
                message=f"Amount must be a finite number. Provided: {requested}",
            )

        if requested == 0:
            return WithdrawalResult()

        if requested < 0:
            return WithdrawalFailure(
                kind=FailureKind.INVALID_ARGUMENT,
                amount=requested,
                message=f"Amount cannot be negative. Provided: {self.currency.format(requested)}",
            )

        if requested > self.max_amount:
            return WithdrawalFailure(
                kind=FailureKind.INVALID_ARGUMENT,
                amount=requested,
                message=(
                    f"Amount exceeds the maximum withdrawal of {self.currency.format(self.max_amount)}. "
                    f"Provided: {self.currency.format(requested)}"
                ),
            )

        notes = self._select_notes(requested)
        if notes is None:
            return WithdrawalFailure(
                kind=FailureKind.NOTE_UNAVAILABLE,
                amount=requested,
                message=(
                    f"Cannot dispense {self.currency.format(requested)}. The amount cannot be "
                    f"formed with available notes ({self.denominations})."
                ),
            )

        return WithdrawalResult(notes=tuple(notes))

    def _select_notes(self, amount: Decimal) -> list[Decimal] | None:
        """Pick notes for a positive amount, or None if it is not representable."""
        places = self.denominations.places
        units = self.denominations.units(places)
        try:
            target = to_units(amount, places)
        except ValueError:
            # Finer than the smallest note can express
            return None

        # Every reachable amount is a multiple of the gcd
        step = reduce(gcd, units)
        if target % step:
            return None

        coins = [unit // step for unit in units]
        if self.strategy == "greedy":
            picked = greedy_units(target // step, coins)
        else:
            picked = minimal_units(target // step, coins)
        if picked is None:
            return None

        note_for = dict(zip(coins, self.denominations))
        return [note_for[coin] for coin in picked]
