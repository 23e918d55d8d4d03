"""Domain enumerations for the onboarding service.

Enums represent fixed sets of domain values (client status, client tier).
"""

from enum import Enum


class ClientStatus(str, Enum):
    """Client account status. Carried on the client record; not used by onboarding rules."""

    NONE = "none"
    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class ClientTier(str, Enum):
    """Client tier controlling the credit-limit policy.

    The tier is derived from the client name by exact match, so the enum
    values are the literal names the client directory stores.
    """

    VERY_IMPORTANT = "VeryImportantClient"
    IMPORTANT = "ImportantClient"
    NORMAL = "NormalClient"

    @classmethod
    def from_client_name(cls, name: str | None) -> "ClientTier":
        """Map a client name to its tier.

        Only the exact names "VeryImportantClient" and "ImportantClient" are
        special; any other value (including None) is a normal client.

        Args:
            name: Client name as stored by the client directory.

        Returns:
            Matching ClientTier.
        """
        if name == cls.VERY_IMPORTANT.value:
            return cls.VERY_IMPORTANT
        if name == cls.IMPORTANT.value:
            return cls.IMPORTANT
        return cls.NORMAL
