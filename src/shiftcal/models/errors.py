"""Exceptions raised by the shift calendar."""


class ShiftCalendarError(ValueError):
    """Base class for shift calendar errors."""


class UnknownTeamError(ShiftCalendarError):
    """Queried team is not present in the active shift table."""

    def __init__(self, team):
        self.team = team
        super().__init__(f"Unknown team: {team!r}")


class InvalidDateError(ShiftCalendarError):
    """Value cannot be normalized to a calendar date."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class MalformedConfigError(ShiftCalendarError):
    """Shift cycle configuration violates its invariants."""
