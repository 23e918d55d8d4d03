"""Shared utilities: datetime helpers."""

from onboarding.shared.utils.datetime import elapsed_years, today_in, utc_now

__all__ = [
    "elapsed_years",
    "today_in",
    "utc_now",
]
