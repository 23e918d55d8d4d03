"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from onboarding.domain.entities import ClientEntity, UserEntity
from onboarding.domain.enums import ClientStatus, ClientTier
from onboarding.domain.exceptions import (
    ClientNotFoundException,
    CreditScoringUnavailableException,
    InsufficientCreditException,
    InvalidInputException,
    OnboardingException,
    PersistenceFailureException,
)

__all__ = [
    # Entities
    "ClientEntity",
    "UserEntity",
    # Enums
    "ClientStatus",
    "ClientTier",
    # Exceptions
    "ClientNotFoundException",
    "CreditScoringUnavailableException",
    "InsufficientCreditException",
    "InvalidInputException",
    "OnboardingException",
    "PersistenceFailureException",
]
