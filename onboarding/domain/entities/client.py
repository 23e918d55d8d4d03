"""Client domain entity.

Client records are owned by the client directory; onboarding only reads them.
"""

from dataclasses import dataclass

from onboarding.domain.enums import ClientStatus, ClientTier


@dataclass(frozen=True)
class ClientEntity:
    """Read-only client record resolved from the client directory."""

    id: int
    name: str | None
    status: ClientStatus = ClientStatus.NONE

    @property
    def tier(self) -> ClientTier:
        """Return the credit-policy tier derived from the client name."""
        return ClientTier.from_client_name(self.name)
