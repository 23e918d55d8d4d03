"""Credit scoring factory: creates static or HTTP backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from onboarding.application.interfaces.services import ICreditScoringService

if TYPE_CHECKING:
    from onboarding.core.config import Settings


class CreditScoringFactory:
    """Factory for credit scoring service instances based on configuration."""

    @staticmethod
    def create_credit_scoring_service(
        settings: "Settings | None" = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> ICreditScoringService:
        """Create credit scoring service from settings.

        Args:
            settings: Application settings; if None, uses get_settings().
            http_client: Optional shared client for the http backend.

        Returns:
            StaticCreditScoringService or HttpCreditScoringService.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from onboarding.core.config import get_settings

        s = settings or get_settings()
        backend = s.credit_scoring_backend.lower()

        if backend == "static":
            from onboarding.infrastructure.external.credit_scoring.static_service import (
                StaticCreditScoringService,
            )

            return StaticCreditScoringService(s.credit_scoring_static_limit)
        if backend == "http":
            from onboarding.infrastructure.external.credit_scoring.http_service import (
                HttpCreditScoringService,
            )

            if not s.credit_scoring_base_url:
                raise ValueError("CREDIT_SCORING_BASE_URL required for http backend")
            return HttpCreditScoringService(
                s.credit_scoring_base_url,
                timeout_seconds=s.credit_scoring_timeout_seconds,
                client=http_client,
            )
        raise ValueError(
            f"Unknown credit scoring backend: {backend}. Supported: 'static', 'http'"
        )
