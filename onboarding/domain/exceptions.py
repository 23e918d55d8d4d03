"""Domain exceptions for the onboarding service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Callers can
branch on the exception type or on error_code; the message is fixed per
rule so it can be matched exactly.
"""

from typing import Any


class OnboardingException(Exception):
    """Base exception for all onboarding errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, client_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputException(OnboardingException):
    """Raised when user input fails an eligibility rule (name, email, age)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional input field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "INVALID_INPUT", details)


class ClientNotFoundException(OnboardingException):
    """Raised when a client id does not resolve to a known client."""

    def __init__(self, client_id: int) -> None:
        super().__init__(
            "Client with this Id does not exist.",
            "NOT_FOUND",
            {"client_id": client_id},
        )


class InsufficientCreditException(OnboardingException):
    """Raised when a credit-limit-bearing client tier scores below the threshold."""

    def __init__(self, credit_limit: int, threshold: int) -> None:
        """Initialize with the computed limit and the threshold it missed.

        Args:
            credit_limit: Credit limit after tier adjustment.
            threshold: Minimum credit limit required.
        """
        super().__init__(
            "insufficient credit limit",
            "INSUFFICIENT_CREDIT",
            {"credit_limit": credit_limit, "threshold": threshold},
        )


class PersistenceFailureException(OnboardingException):
    """Raised when the user store fails to record a finalized user."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "user could not be persisted",
            "PERSISTENCE_FAILURE",
            {"reason": reason},
        )


class CreditScoringUnavailableException(OnboardingException):
    """Raised by credit scoring adapters when the scoring backend cannot answer."""

    def __init__(self, message: str = "Credit scoring service unavailable") -> None:
        super().__init__(message, "CREDIT_SCORING_UNAVAILABLE")
