"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from onboarding.domain.entities.client import ClientEntity
    from onboarding.domain.entities.user import UserEntity


# Client directory interface
class IClientDirectory(Protocol):
    """Protocol for resolving client records by id (read-only)."""

    async def resolve(self, client_id: int) -> ClientEntity | None:
        """Return the client with this id, or None when it does not exist."""


# User store interface
class IUserStore(Protocol):
    """Protocol for durably recording finalized users."""

    async def save(self, user: UserEntity) -> None:
        """Record the user. Raises on storage failure."""
