"""Pytest configuration and fixtures for onboarding.

Collaborators are AsyncMock fakes so tests can assert call counts; the
clock is fixed so age rules are deterministic.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from onboarding.application.services.credit_limit_policy import CreditLimitPolicy
from onboarding.application.services.user_input_validator import UserInputValidator
from onboarding.application.use_cases.add_user import AddUserUseCase
from onboarding.core.config import get_settings
from onboarding.domain.entities.client import ClientEntity
from onboarding.infrastructure.clock import FixedClock

TODAY = date(2026, 10, 19)
ADULT_DOB = date(1990, 1, 1)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Drop cached Settings so env overrides in one test do not leak into others."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def client_directory() -> AsyncMock:
    """Client directory resolving every id to a normal client (override return_value per test)."""
    directory = AsyncMock()
    directory.resolve = AsyncMock(return_value=ClientEntity(id=1, name="NormalClient"))
    return directory


@pytest.fixture
def credit_scoring() -> AsyncMock:
    scoring = AsyncMock()
    scoring.score_credit = AsyncMock(return_value=1000)
    return scoring


@pytest.fixture
def user_store() -> AsyncMock:
    store = AsyncMock()
    store.save = AsyncMock(return_value=None)
    return store


@pytest.fixture
def add_user(client_directory, credit_scoring, user_store, clock) -> AddUserUseCase:
    """AddUserUseCase with mocked collaborators and default policy (age 21, threshold 500, x2)."""
    return AddUserUseCase(
        client_directory=client_directory,
        user_store=user_store,
        validator=UserInputValidator(clock, minimum_age=21),
        credit_policy=CreditLimitPolicy(credit_scoring),
    )
