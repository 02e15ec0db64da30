"""
Shared pytest fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from atm_withdrawal.config import get_settings
from atm_withdrawal.domain.calculator import NoteCalculator
from atm_withdrawal.main import app
from atm_withdrawal.services.withdrawal import WithdrawalService, get_withdrawal_service


@pytest.fixture
def calculator() -> NoteCalculator:
    """Calculator with the default {100, 50, 20, 10} notes."""
    return NoteCalculator()


@pytest.fixture
def client():
    """API test client using the default calculator."""
    app.dependency_overrides[get_withdrawal_service] = lambda: WithdrawalService(NoteCalculator())
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Keep environment changes in one test from leaking into another."""
    get_settings.cache_clear()
    get_withdrawal_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_withdrawal_service.cache_clear()
