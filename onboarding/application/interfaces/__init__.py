"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from onboarding.infrastructure.
"""

from onboarding.application.interfaces.repositories import (
    IClientDirectory,
    IUserStore,
)
from onboarding.application.interfaces.services import (
    IClock,
    ICreditScoringService,
)

__all__ = [
    "IClientDirectory",
    "IClock",
    "ICreditScoringService",
    "IUserStore",
]
