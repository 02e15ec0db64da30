"""
Withdrawal service.

Thin async facade over the NoteCalculator that owns request logging.
The calculator stays pure; everything observable happens here.
"""

import logging
from decimal import Decimal
from functools import lru_cache

from fastapi.concurrency import run_in_threadpool

from atm_withdrawal.config import get_settings
from atm_withdrawal.domain.calculator import NoteCalculator
from atm_withdrawal.domain.models import CalculationOutcome, WithdrawalFailure

logger = logging.getLogger(__name__)


class WithdrawalService:
    """
    Service for processing withdrawal requests.

    Example:
        service = WithdrawalService(NoteCalculator())
        outcome = await service.withdraw(Decimal("30"))
    """

    def __init__(self, calculator: NoteCalculator) -> None:
        self.calculator = calculator

    @property
    def strategy(self) -> str:
        return self.calculator.strategy

    async def withdraw(self, amount: Decimal | None) -> CalculationOutcome:
        """Calculate the notes for a requested amount and log the outcome."""
        logger.info(f"Processing withdrawal request for amount: {amount}")

        # Bounded by max_amount, but kept off the event loop all the same
        outcome = await run_in_threadpool(self.calculator.calculate, amount)

        if isinstance(outcome, WithdrawalFailure):
            logger.warning(f"Withdrawal rejected ({outcome.kind.value}): {outcome.message}")
        else:
            logger.info(
                f"Withdrawal successful. Dispensed {outcome.note_count} notes "
                f"totaling {outcome.total_amount}"
            )
        return outcome


@lru_cache
def get_withdrawal_service() -> WithdrawalService:
    """
    Get the shared withdrawal service built from settings.

    Used as a FastAPI dependency; tests swap it via dependency_overrides.
    """
    settings = get_settings()
    calculator = NoteCalculator(
        denominations=settings.denomination_set,
        currency=settings.currency,
        max_amount=settings.max_amount,
    )
    if calculator.strategy != "greedy":
        logger.warning(
            f"Denominations ({calculator.denominations}) are not canonical; "
            "using minimal-count search instead of greedy selection"
        )
    return WithdrawalService(calculator)
