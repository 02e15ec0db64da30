"""
Domain models for cash withdrawals.

A calculation either succeeds with a WithdrawalResult or fails with a
WithdrawalFailure. Both are plain values: callers branch on the type
instead of catching exceptions.

Design Decisions:
- Frozen dataclasses, since a result is never mutated after it is produced
- Totals are derived from the notes, never stored alongside them
- Decimal for all monetary values to avoid floating-point errors
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class FailureKind(Enum):
    """Why a withdrawal could not be calculated. Values are the wire tags."""
    INVALID_ARGUMENT = "InvalidArgument"
    NOTE_UNAVAILABLE = "NoteUnavailable"


@dataclass(frozen=True)
class WithdrawalResult:
    """
    Notes to dispense for a successful withdrawal.

    Notes are kept in dispense order, which is descending by construction.
    An empty result is the canonical "nothing to dispense" outcome.
    """
    notes: tuple[Decimal, ...] = ()

    @property
    def total_amount(self) -> Decimal:
        """Sum of all dispensed notes."""
        return sum(self.notes, Decimal(0))

    @property
    def note_count(self) -> int:
        """Number of notes dispensed."""
        return len(self.notes)

    @property
    def breakdown(self) -> list[tuple[Decimal, int]]:
        """
        Count of each denomination, largest first.

        Example:
            >>> WithdrawalResult((Decimal(100), Decimal(100), Decimal(10))).breakdown
            [(Decimal('100'), 2), (Decimal('10'), 1)]
        """
        counts: dict[Decimal, int] = {}
        for note in self.notes:
            counts[note] = counts.get(note, 0) + 1
        return sorted(counts.items(), key=lambda item: item[0], reverse=True)


@dataclass(frozen=True)
class WithdrawalFailure:
    """
    A withdrawal that cannot be served.

    Both kinds are expected, caller-recoverable outcomes. `amount` is the
    amount originally requested, not any intermediate remainder.
    """
    kind: FailureKind
    amount: Decimal
    message: str = field(compare=False)


CalculationOutcome = WithdrawalResult | WithdrawalFailure
