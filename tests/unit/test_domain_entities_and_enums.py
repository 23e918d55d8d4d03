"""Tests for domain entities (ClientEntity, UserEntity) and enums (ClientTier, ClientStatus)."""

import dataclasses
from datetime import date

import pytest

from onboarding.domain.entities.client import ClientEntity
from onboarding.domain.entities.user import UserEntity
from onboarding.domain.enums import ClientStatus, ClientTier
from onboarding.domain.exceptions import InvalidInputException


class TestClientTier:
    """Tier is derived by exact match on the client name."""

    def test_exact_names(self) -> None:
        assert ClientTier.from_client_name("VeryImportantClient") is ClientTier.VERY_IMPORTANT
        assert ClientTier.from_client_name("ImportantClient") is ClientTier.IMPORTANT

    @pytest.mark.parametrize(
        "name",
        ["NormalClient", "importantclient", "ImportantClient ", "VeryImportant", "", None],
    )
    def test_anything_else_is_normal(self, name) -> None:
        assert ClientTier.from_client_name(name) is ClientTier.NORMAL


class TestClientStatus:
    def test_values(self) -> None:
        assert ClientStatus.values() == ["none", "active", "inactive"]


class TestClientEntity:
    def test_tier_property(self) -> None:
        assert ClientEntity(id=1, name="ImportantClient").tier is ClientTier.IMPORTANT
        assert ClientEntity(id=2, name="Acme").tier is ClientTier.NORMAL

    def test_default_status(self) -> None:
        assert ClientEntity(id=1, name="Acme").status is ClientStatus.NONE

    def test_frozen(self) -> None:
        client = ClientEntity(id=1, name="Acme")
        with pytest.raises(dataclasses.FrozenInstanceError):
            client.name = "Other"  # type: ignore[misc]


class TestUserEntity:
    def _user(self, **overrides) -> UserEntity:
        fields = {
            "first_name": "John",
            "surname": "Doe",
            "email_address": "john.doe@example.com",
            "date_of_birth": date(1990, 1, 1),
            "client": ClientEntity(id=1, name="Acme"),
        }
        fields.update(overrides)
        return UserEntity(**fields)

    def test_defaults(self) -> None:
        user = self._user()
        assert user.has_credit_limit is False
        assert user.credit_limit == 0

    def test_blank_first_name_rejected(self) -> None:
        with pytest.raises(InvalidInputException) as exc_info:
            self._user(first_name="  ")
        assert exc_info.value.details == {"field": "first_name"}

    def test_blank_surname_rejected(self) -> None:
        with pytest.raises(InvalidInputException) as exc_info:
            self._user(surname="")
        assert exc_info.value.details == {"field": "surname"}

    def test_missing_client_rejected(self) -> None:
        with pytest.raises(InvalidInputException) as exc_info:
            self._user(client=None)
        assert exc_info.value.details == {"field": "client"}

    def test_frozen(self) -> None:
        user = self._user(has_credit_limit=True, credit_limit=800)
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.has_credit_limit = False  # type: ignore[misc]
