"""Service lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, shared HTTP client for
credit scoring); no business logic here.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

import httpx

from onboarding.core.config import Settings, get_settings
from onboarding.core.container import build_add_user_use_case
from onboarding.infrastructure.external.credit_scoring.factory import CreditScoringFactory
from onboarding.shared.telemetry.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from onboarding.application.interfaces.repositories import IClientDirectory, IUserStore
    from onboarding.application.use_cases.add_user import AddUserUseCase

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(
    client_directory: IClientDirectory,
    user_store: IUserStore,
    settings: Settings | None = None,
) -> AsyncIterator[AddUserUseCase]:
    """Configure logging, open shared resources, and yield a ready AddUserUseCase.

    With the http credit scoring backend one httpx.AsyncClient is shared by
    all calls and closed on exit.
    """
    s = settings or get_settings()

    # ---- Startup ----
    setup_logging()
    http_client: httpx.AsyncClient | None = None
    if s.credit_scoring_backend.lower() == "http":
        http_client = httpx.AsyncClient(timeout=s.credit_scoring_timeout_seconds)
    credit_scoring = CreditScoringFactory.create_credit_scoring_service(s, http_client)
    use_case = build_add_user_use_case(
        client_directory,
        user_store,
        settings=s,
        credit_scoring=credit_scoring,
    )
    logger.info(
        "%s %s started (credit scoring backend: %s)",
        s.app_name,
        s.app_version,
        s.credit_scoring_backend,
    )
    try:
        yield use_case
    finally:
        # ---- Shutdown ----
        if http_client is not None:
            await http_client.aclose()
        logger.info("%s stopped", s.app_name)
