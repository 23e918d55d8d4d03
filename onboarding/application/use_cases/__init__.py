"""Application use cases: one entry point per workflow."""

from onboarding.application.use_cases.add_user import AddUserUseCase

__all__ = [
    "AddUserUseCase",
]
