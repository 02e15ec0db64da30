"""
Currency labelling for user-facing amounts.

Only the label changes between deployments; the note calculation itself
is currency-agnostic.
"""

from dataclasses import dataclass
from decimal import Decimal

from .denominations import decimal_places


MAX_FIXED_PLACES = 12
MAX_FIXED_DIGITS = 30


@dataclass(frozen=True)
class Currency:
    """Display information for the dispensed currency."""
    symbol: str = "R"
    name: str = "Rands"
    code: str = "ZAR"

    @classmethod
    def default(cls) -> "Currency":
        return cls()

    def format(self, amount: Decimal) -> str:
        """
        Format an amount with the currency symbol.

        At least two decimal places are shown, more when the amount has
        them, so the amount is never rounded. Extreme magnitudes fall back
        to scientific notation to keep messages short.

        Example:
            >>> Currency().format(Decimal("125"))
            'R125.00'
            >>> Currency().format(Decimal("30.001"))
            'R30.001'
        """
        places = max(2, decimal_places(amount))
        if places > MAX_FIXED_PLACES or amount.adjusted() >= MAX_FIXED_DIGITS:
            return f"{self.symbol}{amount}"
        return f"{self.symbol}{amount:.{places}f}"
