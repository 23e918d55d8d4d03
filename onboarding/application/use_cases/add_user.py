"""Add user use case: validate input, resolve client, apply credit policy, persist."""

from __future__ import annotations

from datetime import date

from onboarding.application.interfaces.repositories import IClientDirectory, IUserStore
from onboarding.application.services.credit_limit_policy import CreditLimitPolicy
from onboarding.application.services.user_input_validator import UserInputValidator
from onboarding.domain.entities.user import UserEntity
from onboarding.domain.exceptions import (
    ClientNotFoundException,
    InsufficientCreditException,
    InvalidInputException,
    OnboardingException,
    PersistenceFailureException,
)
from onboarding.shared.telemetry.logging import get_logger
from onboarding.shared.telemetry.tracing import add_span_attributes, traced

logger = get_logger(__name__)


class AddUserUseCase:
    """Onboards a new user for a client (single-pass pipeline, early exit on each rule).

    Per successful call: one client lookup, at most one credit scoring call,
    and exactly one store write. Failed calls write nothing.
    """

    def __init__(
        self,
        client_directory: IClientDirectory,
        user_store: IUserStore,
        validator: UserInputValidator,
        credit_policy: CreditLimitPolicy,
    ) -> None:
        self._client_directory = client_directory
        self._user_store = user_store
        self._validator = validator
        self._credit_policy = credit_policy

    @traced("onboarding.add_user")
    async def execute(
        self,
        first_name: str,
        surname: str,
        email: str,
        date_of_birth: date,
        client_id: int,
    ) -> UserEntity:
        """Validate and onboard a user.

        Args:
            first_name: Applicant first name (non-blank).
            surname: Applicant surname (non-blank).
            email: Email address (must contain '@' and '.').
            date_of_birth: Applicant date of birth (minimum age applies).
            client_id: Id of the client the user belongs to.

        Returns:
            The persisted, immutable user.

        Raises:
            InvalidInputException: Name, email, or age rule violated.
            ClientNotFoundException: client_id does not resolve.
            InsufficientCreditException: Limit-bearing tier below threshold.
            PersistenceFailureException: The user store failed to save.
        """
        add_span_attributes(client_id=client_id)
        try:
            self._validator.validate(first_name, surname, email, date_of_birth)
        except InvalidInputException as e:
            logger.warning("Onboarding rejected: invalid %s", e.details.get("field"))
            raise

        client = await self._client_directory.resolve(client_id)
        if client is None:
            logger.warning("Onboarding rejected: client %s not found", client_id)
            raise ClientNotFoundException(client_id)
        add_span_attributes(tier=client.tier.value)

        assessment = await self._credit_policy.assess(
            first_name, surname, date_of_birth, client
        )
        try:
            self._credit_policy.ensure_sufficient(assessment)
        except InsufficientCreditException:
            logger.warning(
                "Onboarding rejected: credit limit %s below threshold for client %s",
                assessment.credit_limit,
                client_id,
            )
            raise

        user = UserEntity(
            first_name=first_name,
            surname=surname,
            email_address=email,
            date_of_birth=date_of_birth,
            client=client,
            has_credit_limit=assessment.has_credit_limit,
            credit_limit=assessment.credit_limit,
        )
        await self._save(user)
        logger.info(
            "User onboarded for client %s (tier=%s, has_credit_limit=%s)",
            client.id,
            client.tier.value,
            user.has_credit_limit,
        )
        return user

    async def _save(self, user: UserEntity) -> None:
        """Hand the user to the store; any store error becomes PersistenceFailureException."""
        try:
            await self._user_store.save(user)
        except OnboardingException:
            raise
        except Exception as e:
            logger.error("User store failed for client %s: %s", user.client.id, e)
            raise PersistenceFailureException(str(e)) from e
