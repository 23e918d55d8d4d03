"""Credit scoring adapters (static, HTTP) and their factory."""

from onboarding.infrastructure.external.credit_scoring.factory import CreditScoringFactory
from onboarding.infrastructure.external.credit_scoring.http_service import (
    HttpCreditScoringService,
)
from onboarding.infrastructure.external.credit_scoring.static_service import (
    StaticCreditScoringService,
)

__all__ = [
    "CreditScoringFactory",
    "HttpCreditScoringService",
    "StaticCreditScoringService",
]
