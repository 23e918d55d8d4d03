"""
UTC datetime utilities and calendar-age helpers.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def today_in(timezone_name: str = "UTC") -> date:
    """
    Return the current calendar date in the given IANA timezone.

    Args:
        timezone_name: IANA zone name (e.g. "UTC", "Europe/Warsaw")

    Returns:
        Today's date as observed in that zone
    """
    if timezone_name.upper() == "UTC":
        return utc_now().date()
    return utc_now().astimezone(ZoneInfo(timezone_name)).date()


def elapsed_years(born: date, on: date) -> int:
    """
    Return the number of full years elapsed between born and on.

    The calendar-year difference is decremented when the birthday
    (month/day) has not yet occurred in the year of `on`. A 29 February
    birthday counts as reached on 1 March in non-leap years.

    Args:
        born: Date of birth
        on: Reference date

    Returns:
        Whole years completed (negative if born is in the future)
    """
    years = on.year - born.year
    if (on.month, on.day) < (born.month, born.day):
        years -= 1
    return years
