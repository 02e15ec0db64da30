"""
Withdrawal endpoints.

Runs the note calculation and maps its failures to HTTP error responses.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from atm_withdrawal.api.schemas import (
    ErrorResponse,
    WithdrawalConfigResponse,
    WithdrawalHealthResponse,
    WithdrawalRequest,
    WithdrawalResponse,
)
from atm_withdrawal.domain.models import FailureKind, WithdrawalFailure
from atm_withdrawal.services.withdrawal import WithdrawalService, get_withdrawal_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/withdrawal", tags=["withdrawal"])


# Both failure kinds are caller errors
FAILURE_STATUS = {
    FailureKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOTE_UNAVAILABLE: status.HTTP_400_BAD_REQUEST,
}


def failure_response(failure: WithdrawalFailure) -> JSONResponse:
    """Render a calculation failure as a JSON error response."""
    status_code = FAILURE_STATUS[failure.kind]
    error = ErrorResponse.from_failure(failure, status_code)
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(mode="json", by_alias=True),
    )


@router.post(
    "",
    response_model=WithdrawalResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse, "description": "Negative amount or amount cannot be formed with available notes"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def withdraw(
    request: WithdrawalRequest,
    service: Annotated[WithdrawalService, Depends(get_withdrawal_service)],
):
    """
    Calculate the notes to dispense for a withdrawal.

    Returns the fewest notes that sum exactly to the requested amount,
    largest first. A null or zero amount dispenses nothing.
    """
    outcome = await service.withdraw(request.amount)

    if isinstance(outcome, WithdrawalFailure):
        return failure_response(outcome)

    return WithdrawalResponse.from_result(outcome)


@router.get("/health", response_model=WithdrawalHealthResponse)
async def withdrawal_health() -> WithdrawalHealthResponse:
    """Liveness probe for the withdrawal API."""
    return WithdrawalHealthResponse()


@router.get("/config", response_model=WithdrawalConfigResponse)
async def withdrawal_config(
    service: Annotated[WithdrawalService, Depends(get_withdrawal_service)],
) -> WithdrawalConfigResponse:
    """Currency label and available notes, for clients to display."""
    calculator = service.calculator
    return WithdrawalConfigResponse(
        currency_symbol=calculator.currency.symbol,
        currency_name=calculator.currency.name,
        currency_code=calculator.currency.code,
        denominations=list(calculator.denominations),
        strategy=calculator.strategy,
        max_amount=calculator.max_amount,
    )
