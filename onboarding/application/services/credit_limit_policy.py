"""Client-tier credit-limit policy: scoring, tier multiplier, and threshold check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from onboarding.application.interfaces.services import ICreditScoringService
from onboarding.domain.entities.client import ClientEntity
from onboarding.domain.enums import ClientTier
from onboarding.domain.exceptions import InsufficientCreditException
from onboarding.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CreditAssessment:
    """Outcome of the credit policy for one applicant."""

    has_credit_limit: bool
    credit_limit: int = 0


class CreditLimitPolicy:
    """Computes the credit limit for a client tier and enforces the minimum threshold.

    - VeryImportantClient: no credit limit; the scoring service is not called.
    - ImportantClient: scored limit multiplied by important_client_multiplier.
    - Any other client: raw scored limit.
    """

    def __init__(
        self,
        credit_scoring: ICreditScoringService,
        *,
        threshold: int = 500,
        important_client_multiplier: int = 2,
    ) -> None:
        self._credit_scoring = credit_scoring
        self.threshold = threshold
        self.important_client_multiplier = important_client_multiplier

    async def assess(
        self,
        first_name: str,
        surname: str,
        date_of_birth: date,
        client: ClientEntity,
    ) -> CreditAssessment:
        """Return the tier-adjusted credit assessment (at most one scoring call)."""
        tier = client.tier
        if tier is ClientTier.VERY_IMPORTANT:
            return CreditAssessment(has_credit_limit=False)

        credit_limit = await self._credit_scoring.score_credit(
            first_name, surname, date_of_birth
        )
        if tier is ClientTier.IMPORTANT:
            credit_limit *= self.important_client_multiplier
        logger.debug("Credit limit %s computed for client %s (%s)", credit_limit, client.id, tier.value)
        return CreditAssessment(has_credit_limit=True, credit_limit=credit_limit)

    def ensure_sufficient(self, assessment: CreditAssessment) -> None:
        """Raise InsufficientCreditException if a limit-bearing assessment is below threshold."""
        if assessment.has_credit_limit and assessment.credit_limit < self.threshold:
            raise InsufficientCreditException(assessment.credit_limit, self.threshold)
