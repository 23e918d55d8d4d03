"""In-memory user store (IUserStore) for local runs and tests.

Append-only; identical users saved twice are recorded twice.
"""

from __future__ import annotations

from onboarding.domain.entities.user import UserEntity
from onboarding.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class InMemoryUserStore:
    """List-backed store; safe for concurrent coroutines on one event loop."""

    def __init__(self) -> None:
        self._users: list[UserEntity] = []

    async def save(self, user: UserEntity) -> None:
        self._users.append(user)
        logger.debug("Stored user #%d for client %s", len(self._users), user.client.id)

    @property
    def users(self) -> list[UserEntity]:
        """Return a copy of all saved users, oldest first."""
        return list(self._users)

    def __len__(self) -> int:
        return len(self._users)
