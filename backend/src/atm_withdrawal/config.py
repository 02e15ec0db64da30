"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from atm_withdrawal.domain.calculator import DEFAULT_MAX_AMOUNT
from atm_withdrawal.domain.currency import Currency
from atm_withdrawal.domain.denominations import DEFAULT_DENOMINATIONS, DenominationSet


class Settings(BaseSettings):
    """
    Application settings with validation.

    All settings are loaded from environment variables with the same name.
    Use .env file for local development. List values are JSON, e.g.
    DENOMINATIONS='[200, 100, 50, 20, 10]'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Notes
    denominations: list[Decimal] = Field(
        default=list(DEFAULT_DENOMINATIONS),
        description="Note values available for dispensing (any order)",
    )

    max_amount: Decimal = Field(
        default=DEFAULT_MAX_AMOUNT,
        gt=0,
        description="Largest amount a single withdrawal may request",
    )

    # Currency label
    currency_symbol: str = Field(default="R", description="Currency symbol, e.g. R, $")
    currency_name: str = Field(default="Rands", description="Currency name, e.g. Rands")
    currency_code: str = Field(default="ZAR", description="ISO currency code")

    # Server
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:5173",
            "http://localhost:3000",
            "http://localhost:8501",
        ],
        description="Origins allowed to call the API from a browser",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with API docs",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    # Clients
    api_base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL the form client uses to reach the API",
    )

    @field_validator("denominations")
    @classmethod
    def validate_denominations(cls, value: list[Decimal]) -> list[Decimal]:
        """Reject empty, non-positive or duplicate note values at startup."""
        return list(DenominationSet(tuple(value)).values)

    @property
    def denomination_set(self) -> DenominationSet:
        """Configured notes as a validated, descending set."""
        return DenominationSet(tuple(self.denominations))

    @property
    def currency(self) -> Currency:
        """Configured currency label."""
        return Currency(
            symbol=self.currency_symbol,
            name=self.currency_name,
            code=self.currency_code,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once at startup and cached for subsequent calls.
    This ensures consistent configuration across the application lifecycle.
    """
    return Settings()
