"""In-memory client directory (IClientDirectory) for local runs and tests."""

from __future__ import annotations

from collections.abc import Iterable

from onboarding.domain.entities.client import ClientEntity


class InMemoryClientDirectory:
    """Dict-backed client lookup keyed by client id."""

    def __init__(self, clients: Iterable[ClientEntity] = ()) -> None:
        self._clients: dict[int, ClientEntity] = {c.id: c for c in clients}

    def add(self, client: ClientEntity) -> None:
        """Register or replace a client record."""
        self._clients[client.id] = client

    async def resolve(self, client_id: int) -> ClientEntity | None:
        return self._clients.get(client_id)
