"""Service interfaces (ports) for the application layer.

Protocols define contracts for external services and ambient capabilities (DIP).
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


# Credit scoring service interface
class ICreditScoringService(Protocol):
    """Protocol for the external credit scoring service."""

    async def score_credit(
        self,
        first_name: str,
        surname: str,
        date_of_birth: date,
    ) -> int:
        """Return the credit limit granted to the person identified by these fields."""


# Clock interface
class IClock(Protocol):
    """Protocol for reading the current calendar date (injectable for tests)."""

    def today(self) -> date:
        """Return today's date."""
