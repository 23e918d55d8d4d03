"""Composition root: wires AddUserUseCase from settings and collaborator adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from onboarding.application.services.credit_limit_policy import CreditLimitPolicy
from onboarding.application.services.user_input_validator import UserInputValidator
from onboarding.application.use_cases.add_user import AddUserUseCase
from onboarding.core.config import Settings, get_settings
from onboarding.infrastructure.clock import SystemClock
from onboarding.infrastructure.external.credit_scoring.factory import CreditScoringFactory

if TYPE_CHECKING:
    from onboarding.application.interfaces.repositories import IClientDirectory, IUserStore
    from onboarding.application.interfaces.services import IClock, ICreditScoringService


def build_add_user_use_case(
    client_directory: IClientDirectory,
    user_store: IUserStore,
    *,
    settings: Settings | None = None,
    credit_scoring: ICreditScoringService | None = None,
    clock: IClock | None = None,
) -> AddUserUseCase:
    """Build the onboarding use case.

    Policy numbers come from settings. When credit_scoring or clock are not
    given, they are created from settings (CreditScoringFactory, SystemClock).
    """
    s = settings or get_settings()
    scoring = credit_scoring or CreditScoringFactory.create_credit_scoring_service(s)
    validator = UserInputValidator(
        clock or SystemClock(s.timezone),
        minimum_age=s.minimum_age,
    )
    policy = CreditLimitPolicy(
        scoring,
        threshold=s.credit_limit_threshold,
        important_client_multiplier=s.important_client_multiplier,
    )
    return AddUserUseCase(
        client_directory=client_directory,
        user_store=user_store,
        validator=validator,
        credit_policy=policy,
    )
