"""
HTTP client for the withdrawal API.

Used by the form UI and usable from scripts. Error responses from the
server are raised as WithdrawalApiError carrying the ErrorResponse body.
"""

import logging
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from atm_withdrawal.api.schemas import ErrorResponse, WithdrawalConfigResponse, WithdrawalResponse

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = ErrorResponse(
    message="An unexpected error occurred. Please try again.",
    error_type="UnknownError",
    status_code=500,
)


class WithdrawalApiError(Exception):
    """Raised when the API rejects a request or cannot be reached."""

    def __init__(self, error: ErrorResponse) -> None:
        super().__init__(error.message)
        self.error = error


class WithdrawalApiClient:
    """
    Client for ATM withdrawal operations.

    Example:
        with WithdrawalApiClient("http://localhost:8000/api") as api:
            response = api.withdraw(Decimal("80"))
            print(response.notes)  # [Decimal('50'), Decimal('20'), Decimal('10')]
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> "WithdrawalApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def withdraw(self, amount: Decimal | None) -> WithdrawalResponse:
        """
        Request a withdrawal.

        The amount is sent as a string so no float conversion happens
        on the way to the server.

        Raises:
            WithdrawalApiError: With the server's error body, or UnknownError
                if the server could not be reached or replied unexpectedly.
        """
        payload = {"amount": None if amount is None else str(amount)}
        try:
            response = self._client.post("/withdrawal", json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Withdrawal request failed: {e}")
            raise WithdrawalApiError(UNKNOWN_ERROR) from e

        if response.is_success:
            return WithdrawalResponse.model_validate(response.json())

        raise WithdrawalApiError(self._parse_error(response))

    def health_check(self) -> dict[str, Any]:
        """Return the API health payload, or raise if it is unavailable."""
        try:
            response = self._client.get("/withdrawal/health")
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise WithdrawalApiError(
                UNKNOWN_ERROR.model_copy(update={"message": "API is not available"})
            ) from e
        return response.json()

    def get_config(self) -> WithdrawalConfigResponse:
        """Fetch the currency label and available notes."""
        try:
            response = self._client.get("/withdrawal/config")
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise WithdrawalApiError(UNKNOWN_ERROR) from e
        return WithdrawalConfigResponse.model_validate(response.json())

    @staticmethod
    def _parse_error(response: httpx.Response) -> ErrorResponse:
        try:
            return ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.error(f"Unexpected error response ({response.status_code}): {response.text[:200]}")
            return UNKNOWN_ERROR
