"""
Pydantic schemas for API request/response validation.

These schemas define the contract between clients and the backend.
Field names are camelCase on the wire. Monetary values are Decimal and
serialize as JSON strings to avoid floating point issues.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from atm_withdrawal.domain.models import WithdrawalFailure, WithdrawalResult


class ApiModel(BaseModel):
    """Base model using camelCase aliases while accepting snake_case too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================

class WithdrawalRequest(ApiModel):
    """Request to withdraw cash."""
    amount: Decimal | None = Field(
        default=None,
        description="Amount to withdraw. Null or 0 dispenses nothing.",
        examples=["30.00"],
    )


# =============================================================================
# Response Schemas
# =============================================================================

class WithdrawalResponse(ApiModel):
    """Notes dispensed for a successful withdrawal."""
    notes: list[Decimal] = []
    total_amount: Decimal = Decimal(0)
    note_count: int = 0

    @classmethod
    def from_result(cls, result: WithdrawalResult) -> "WithdrawalResponse":
        return cls(
            notes=list(result.notes),
            total_amount=result.total_amount,
            note_count=result.note_count,
        )


class ErrorResponse(ApiModel):
    """Standard error response."""
    message: str
    error_type: str
    status_code: int

    @classmethod
    def from_failure(cls, failure: WithdrawalFailure, status_code: int) -> "ErrorResponse":
        return cls(
            message=failure.message,
            error_type=failure.kind.value,
            status_code=status_code,
        )


class WithdrawalHealthResponse(ApiModel):
    """Liveness probe for the withdrawal API."""
    status: str = "healthy"
    service: str = "ATM Withdrawal API"


class WithdrawalConfigResponse(ApiModel):
    """Currency and note configuration for clients."""
    currency_symbol: str
    currency_name: str
    currency_code: str
    denominations: list[Decimal]
    strategy: str
    max_amount: Decimal


class HealthResponse(ApiModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    denominations: list[Decimal]
