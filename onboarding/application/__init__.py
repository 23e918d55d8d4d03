"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (directory, store, scoring, clock).
"""

from onboarding.application.interfaces import (
    IClientDirectory,
    IClock,
    ICreditScoringService,
    IUserStore,
)
from onboarding.application.services import CreditLimitPolicy, UserInputValidator
from onboarding.application.use_cases import AddUserUseCase

__all__ = [
    "AddUserUseCase",
    "CreditLimitPolicy",
    "IClientDirectory",
    "IClock",
    "ICreditScoringService",
    "IUserStore",
    "UserInputValidator",
]
