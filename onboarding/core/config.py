"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Environment variables use the ONBOARDING_ prefix
(e.g. ONBOARDING_MINIMUM_AGE=21).
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CREDIT_SCORING_BACKENDS = ("static", "http")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_policy_and_backend rejects
    inconsistent combinations at load time.
    """

    # App
    app_name: str = "onboarding"
    app_version: str = "1.0.0"
    debug: bool = False

    # Eligibility policy
    minimum_age: int = 21
    credit_limit_threshold: int = 500
    important_client_multiplier: int = 2
    # IANA zone used to decide "today" for age checks.
    timezone: str = "UTC"

    # Credit scoring: "static" (fixed limit, local/dev) or "http" (remote service)
    credit_scoring_backend: str = "static"
    credit_scoring_static_limit: int = 0
    credit_scoring_base_url: str | None = None
    credit_scoring_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="ONBOARDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_policy_and_backend(self) -> "Settings":
        """Validate policy numbers and credit scoring backend.

        - minimum_age and credit_limit_threshold must not be negative.
        - important_client_multiplier must be at least 1.
        - timezone must be "UTC" or a known IANA zone name.
        - http backend requires credit_scoring_base_url.
        """
        if self.minimum_age < 0:
            raise ValueError(f"minimum_age must not be negative, got: {self.minimum_age}")
        if self.credit_limit_threshold < 0:
            raise ValueError(
                f"credit_limit_threshold must not be negative, got: {self.credit_limit_threshold}"
            )
        if self.important_client_multiplier < 1:
            raise ValueError(
                f"important_client_multiplier must be >= 1, got: {self.important_client_multiplier}"
            )
        if self.timezone.upper() != "UTC":
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"timezone must be an IANA zone name, got: {self.timezone!r}") from e
        backend = self.credit_scoring_backend.lower()
        if backend not in _CREDIT_SCORING_BACKENDS:
            raise ValueError(
                f"credit_scoring_backend must be 'static' or 'http', got: {self.credit_scoring_backend!r}"
            )
        if backend == "http" and not self.credit_scoring_base_url:
            raise ValueError(
                "ONBOARDING_CREDIT_SCORING_BASE_URL is required when credit_scoring_backend is 'http'."
            )
        if self.credit_scoring_timeout_seconds <= 0:
            raise ValueError("credit_scoring_timeout_seconds must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
