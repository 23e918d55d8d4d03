"""Clock implementations (IClock)."""

from datetime import date

from onboarding.shared.utils.datetime import today_in


class SystemClock:
    """Reads today's date from the system clock in a configured timezone."""

    def __init__(self, timezone_name: str = "UTC") -> None:
        self.timezone_name = timezone_name

    def today(self) -> date:
        return today_in(self.timezone_name)


class FixedClock:
    """Always returns the same date (deterministic runs, replays, tests)."""

    def __init__(self, fixed: date) -> None:
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
