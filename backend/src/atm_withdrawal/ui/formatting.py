"""
Input parsing and display helpers for the withdrawal form.
"""

from decimal import Decimal, InvalidOperation

from atm_withdrawal.domain.currency import Currency
from atm_withdrawal.domain.models import WithdrawalResult


class AmountInputError(ValueError):
    """Raised when the form input is not a usable amount."""


def parse_amount(text: str) -> Decimal:
    """
    Parse the amount typed into the form.

    Raises:
        AmountInputError: With a message suitable for display.
    """
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        raise AmountInputError("Please enter an amount")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise AmountInputError("Please enter a valid number")
    if not amount.is_finite():
        raise AmountInputError("Please enter a valid number")
    return amount


def format_notes(notes: list[Decimal], currency: Currency) -> str:
    """Render notes as a sum, e.g. 'R50.00 + R20.00 + R10.00'."""
    if not notes:
        return "No notes"
    return " + ".join(currency.format(note) for note in notes)


def note_breakdown(notes: list[Decimal]) -> list[tuple[Decimal, int]]:
    """Count each note value, largest first."""
    return WithdrawalResult(notes=tuple(notes)).breakdown


def format_denominations(denominations: list[Decimal], currency: Currency) -> str:
    """Render the available notes, e.g. 'R100, R50, R20, R10'."""
    return ", ".join(f"{currency.symbol}{note:f}" for note in denominations)
