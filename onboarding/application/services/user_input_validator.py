"""Validates raw user-creation input against eligibility rules (name, email, minimum age)."""

from __future__ import annotations

from datetime import date

from onboarding.application.interfaces.services import IClock
from onboarding.domain.exceptions import InvalidInputException
from onboarding.shared.utils.datetime import elapsed_years

_MSG_NAME_REQUIRED = "user firstname / surname is required "
_MSG_EMAIL_INVALID = "user email is invalid "
_MSG_TOO_YOUNG = "user should be older than %d years"


class UserInputValidator:
    """Checks eligibility rules in a fixed order; the first violation wins."""

    def __init__(self, clock: IClock, minimum_age: int = 21) -> None:
        self._clock = clock
        self.minimum_age = minimum_age

    def validate(
        self,
        first_name: str | None,
        surname: str | None,
        email: str | None,
        date_of_birth: date,
    ) -> None:
        """Raise InvalidInputException for the first rule the input breaks.

        Rules, in order: first name and surname are non-blank; email contains
        both '@' and '.'; elapsed age is at least minimum_age.
        """
        if _is_blank(first_name) or _is_blank(surname):
            field = "first_name" if _is_blank(first_name) else "surname"
            raise InvalidInputException(_MSG_NAME_REQUIRED, field=field)
        if not is_email_well_formed(email):
            raise InvalidInputException(_MSG_EMAIL_INVALID, field="email")
        if elapsed_years(date_of_birth, self._clock.today()) < self.minimum_age:
            raise InvalidInputException(
                _MSG_TOO_YOUNG % self.minimum_age, field="date_of_birth"
            )


def is_email_well_formed(email: str | None) -> bool:
    """Return True when email contains at least one '@' and one '.'.

    Deliberately permissive: no local-part or domain structure checks.
    """
    if not email:
        return False
    return "@" in email and "." in email


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
