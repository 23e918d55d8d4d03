"""Remote credit scoring client (ICreditScoringService) over HTTP.

All HTTP calls use httpx.AsyncClient so they do not block the event loop.
Expects GET {base_url}/credit-limit?firstName=..&surname=..&dateOfBirth=YYYY-MM-DD
to answer with JSON {"creditLimit": <int>}.
"""

from __future__ import annotations

from datetime import date

import httpx

from onboarding.domain.exceptions import CreditScoringUnavailableException
from onboarding.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_CREDIT_LIMIT_PATH = "/credit-limit"


class HttpCreditScoringService:
    """Credit scoring backed by a remote HTTP service.

    Pass an httpx.AsyncClient to share a connection pool (and to inject a
    transport in tests); otherwise a short-lived client is opened per call.
    timeout_seconds applies per request in both cases.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def score_credit(
        self,
        first_name: str,
        surname: str,
        date_of_birth: date,
    ) -> int:
        """Return the credit limit reported by the remote service.

        Raises:
            CreditScoringUnavailableException: Transport error, non-2xx status,
                or a response body without an integer creditLimit.
        """
        params = {
            "firstName": first_name,
            "surname": surname,
            "dateOfBirth": date_of_birth.isoformat(),
        }
        url = f"{self.base_url}{_CREDIT_LIMIT_PATH}"
        try:
            if self._client is not None:
                resp = await self._client.get(
                    url, params=params, timeout=self.timeout_seconds
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    resp = await client.get(url, params=params)
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Credit scoring returned HTTP %s", e.response.status_code)
            raise CreditScoringUnavailableException(
                f"Credit scoring service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Credit scoring request failed: %s", e)
            raise CreditScoringUnavailableException() from e
        except ValueError as e:
            raise CreditScoringUnavailableException(
                "Credit scoring service returned malformed JSON"
            ) from e
        return _parse_credit_limit(body)


def _parse_credit_limit(body: object) -> int:
    """Extract creditLimit from the response body. bool is rejected even though it is an int."""
    value = body.get("creditLimit") if isinstance(body, dict) else None
    if not isinstance(value, int) or isinstance(value, bool):
        raise CreditScoringUnavailableException(
            "Credit scoring response has no integer creditLimit"
        )
    return value
