"""Shift rotation calendar: rotation calculator and calendar selection state."""
from shiftcal.calendar.controller import CalendarSelectionState, CalendarStateController
from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.models import (
    InvalidDateError,
    MalformedConfigError,
    ShiftAssignment,
    ShiftCalendarError,
    ShiftCycleConfig,
    ShiftLabel,
    TeamId,
    UnknownTeamError,
    YearMonth,
    default_cycle_config,
)

__version__ = "1.0.0"

__all__ = [
    "ShiftCalculator",
    "CalendarStateController",
    "CalendarSelectionState",
    "ShiftCycleConfig",
    "default_cycle_config",
    "ShiftAssignment",
    "ShiftLabel",
    "TeamId",
    "YearMonth",
    "ShiftCalendarError",
    "UnknownTeamError",
    "InvalidDateError",
    "MalformedConfigError",
]
