"""
Denomination table for the note calculator.

Monetary values stay Decimal throughout. For arithmetic they are scaled to
integer minor units from their exact digits, so no operation depends on
the decimal context precision and no magnitude overflows.
"""

from dataclasses import dataclass
from decimal import Decimal
from functools import reduce
from math import gcd
from typing import Iterator

from .selection import greedy_units, minimal_counts


DEFAULT_DENOMINATIONS = (Decimal(100), Decimal(50), Decimal(20), Decimal(10))


def as_decimal(value: Decimal | int) -> Decimal:
    """Accept exact numeric types only. Floats would carry binary rounding errors."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(f"Expected Decimal or int, got {type(value).__name__}")


def decimal_places(value: Decimal) -> int:
    """Number of digits after the decimal point (0 for integral exponents)."""
    return max(0, -value.as_tuple().exponent)


def to_units(value: Decimal, places: int) -> int:
    """
    Scale a finite Decimal to an integer number of 10**-places units.

    Trailing fractional zeros do not count as decimal places, so
    to_units(Decimal("12.500"), 1) is 125.

    Example:
        >>> to_units(Decimal("12.5"), 2)
        1250
    """
    sign, digits, exponent = value.as_tuple()
    digits = list(digits)
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    shift = exponent + places
    if shift < 0:
        raise ValueError(f"{value} has more than {places} decimal places")
    units = int("".join(map(str, digits)) or "0") * 10 ** shift
    return -units if sign else units


@dataclass(frozen=True)
class DenominationSet:
    """
    Positive, distinct note values, stored largest first.

    The order is load-bearing for greedy selection; callers may pass the
    values in any order.
    """
    values: tuple[Decimal, ...]

    def __post_init__(self) -> None:
        """Validate and sort the values."""
        values = tuple(as_decimal(v) for v in self.values)
        if not values:
            raise ValueError("Denomination set cannot be empty")
        for value in values:
            if not value.is_finite() or value <= 0:
                raise ValueError(f"Denominations must be positive, got {value}")
        if len(set(values)) != len(values):
            raise ValueError(f"Denominations must be distinct, got {', '.join(map(str, values))}")
        object.__setattr__(self, "values", tuple(sorted(values, reverse=True)))

    @classmethod
    def default(cls) -> "DenominationSet":
        return cls(DEFAULT_DENOMINATIONS)

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self.values)

    @property
    def places(self) -> int:
        """Decimal places needed to represent every denomination exactly."""
        return max(decimal_places(value) for value in self.values)

    def units(self, places: int) -> list[int]:
        """Denominations as integer units of 10**-places, largest first."""
        return [to_units(value, places) for value in self.values]

    def is_canonical(self) -> bool:
        """
        Check whether greedy selection always yields the fewest notes.

        The units are reduced by their gcd. Without a unit coin the set
        has gaps that greedy can step into (e.g. 60 from {50, 20}), so it
        is treated as non-canonical. With a unit coin, any amount where
        greedy loses lies below the sum of the two largest coins
        (Kozen & Zaks), so checking that range is sufficient.
        """
        units = self.units(self.places)
        step = reduce(gcd, units)
        coins = [unit // step for unit in units]
        if coins[-1] != 1:
            return False
        if len(coins) <= 2:
            return True

        bound = coins[0] + coins[1]
        counts, _ = minimal_counts(bound, coins)
        for amount in range(1, bound):
            picked = greedy_units(amount, coins)
            if picked is None or len(picked) != counts[amount]:
                return False
        return True
