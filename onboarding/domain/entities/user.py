"""User domain entity.

Represents an onboarded user, independent of persistence.
"""

from dataclasses import dataclass
from datetime import date

from onboarding.domain.entities.client import ClientEntity
from onboarding.domain.exceptions import InvalidInputException


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a finalized user.

    Credit fields are computed before construction; once built the entity
    is immutable. Structural invariants are checked on construction.
    """

    first_name: str
    surname: str
    email_address: str
    date_of_birth: date
    client: ClientEntity
    has_credit_limit: bool = False
    credit_limit: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate structural invariants. Raises InvalidInputException if invalid."""
        if not self.first_name or not self.first_name.strip():
            raise InvalidInputException("User first name is required", field="first_name")
        if not self.surname or not self.surname.strip():
            raise InvalidInputException("User surname is required", field="surname")
        if self.client is None:
            raise InvalidInputException("User client is required", field="client")
