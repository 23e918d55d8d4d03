"""In-memory adapters for the client directory and user store."""

from onboarding.infrastructure.memory.client_directory import InMemoryClientDirectory
from onboarding.infrastructure.memory.user_store import InMemoryUserStore

__all__ = [
    "InMemoryClientDirectory",
    "InMemoryUserStore",
]
