"""Application services: input validation and credit-limit policy."""

from onboarding.application.services.credit_limit_policy import (
    CreditAssessment,
    CreditLimitPolicy,
)
from onboarding.application.services.user_input_validator import (
    UserInputValidator,
    is_email_well_formed,
)

__all__ = [
    "CreditAssessment",
    "CreditLimitPolicy",
    "UserInputValidator",
    "is_email_well_formed",
]
