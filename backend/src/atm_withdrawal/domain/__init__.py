"""
Domain package - Core business logic with no external dependencies.

This package contains the pure Python note calculation engine, the
denomination table and the result/failure types it produces.
"""

from .calculator import NoteCalculator
from .currency import Currency
from .denominations import DenominationSet
from .models import CalculationOutcome, FailureKind, WithdrawalFailure, WithdrawalResult

__all__ = [
    "CalculationOutcome",
    "Currency",
    "DenominationSet",
    "FailureKind",
    "NoteCalculator",
    "WithdrawalFailure",
    "WithdrawalResult",
]
