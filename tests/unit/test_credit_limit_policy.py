"""Unit tests for CreditLimitPolicy (tier rules, multiplier, threshold)."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from onboarding.application.services.credit_limit_policy import (
    CreditAssessment,
    CreditLimitPolicy,
)
from onboarding.domain.entities.client import ClientEntity
from onboarding.domain.exceptions import InsufficientCreditException

DOB = date(1990, 1, 1)


@pytest.fixture
def scoring() -> AsyncMock:
    svc = AsyncMock()
    svc.score_credit = AsyncMock(return_value=600)
    return svc


@pytest.mark.asyncio
async def test_very_important_client_skips_scoring(scoring) -> None:
    policy = CreditLimitPolicy(scoring)

    result = await policy.assess("Jane", "Doe", DOB, ClientEntity(id=1, name="VeryImportantClient"))

    assert result == CreditAssessment(has_credit_limit=False, credit_limit=0)
    scoring.score_credit.assert_not_awaited()


@pytest.mark.asyncio
async def test_important_client_uses_configured_multiplier(scoring) -> None:
    policy = CreditLimitPolicy(scoring, important_client_multiplier=3)

    result = await policy.assess("Jake", "Doe", DOB, ClientEntity(id=2, name="ImportantClient"))

    assert result == CreditAssessment(has_credit_limit=True, credit_limit=1800)
    scoring.score_credit.assert_awaited_once_with("Jake", "Doe", DOB)


@pytest.mark.asyncio
async def test_normal_client_uses_raw_limit(scoring) -> None:
    policy = CreditLimitPolicy(scoring)

    result = await policy.assess("John", "Doe", DOB, ClientEntity(id=3, name="Acme"))

    assert result == CreditAssessment(has_credit_limit=True, credit_limit=600)


def test_ensure_sufficient_raises_below_threshold(scoring) -> None:
    policy = CreditLimitPolicy(scoring, threshold=1000)

    with pytest.raises(InsufficientCreditException) as exc_info:
        policy.ensure_sufficient(CreditAssessment(has_credit_limit=True, credit_limit=999))

    assert exc_info.value.details == {"credit_limit": 999, "threshold": 1000}


def test_ensure_sufficient_ignores_assessments_without_limit(scoring) -> None:
    policy = CreditLimitPolicy(scoring)

    policy.ensure_sufficient(CreditAssessment(has_credit_limit=False))
    policy.ensure_sufficient(CreditAssessment(has_credit_limit=True, credit_limit=500))
