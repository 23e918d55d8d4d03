"""Domain entities.

Pure domain models; no persistence concerns.
"""

from onboarding.domain.entities.client import ClientEntity
from onboarding.domain.entities.user import UserEntity

__all__ = [
    "ClientEntity",
    "UserEntity",
]
