# shiftcal/models - Data models for the shift calendar
from .config import ShiftCycleConfig, default_cycle_config
from .dates import YearMonth, is_valid_date, to_date
from .errors import InvalidDateError, MalformedConfigError, ShiftCalendarError, UnknownTeamError
from .rules import DETAILED_SHIFT_COLORS, RULES, SHIFT_COLORS, SHIFT_STYLES
from .shift import TEAM_ORDER, ShiftAssignment, ShiftLabel, TeamId

__all__ = [
    "ShiftLabel", "TeamId", "TEAM_ORDER", "ShiftAssignment",
    "ShiftCycleConfig", "default_cycle_config",
    "YearMonth", "to_date", "is_valid_date",
    "SHIFT_STYLES", "SHIFT_COLORS", "DETAILED_SHIFT_COLORS", "RULES",
    "ShiftCalendarError", "UnknownTeamError", "InvalidDateError", "MalformedConfigError",
]
