"""
Shift Calculator
================
Pure mapping from (date, team) to the team's shift under a rotation config.

The active configuration is an immutable ShiftCycleConfig. ``update_config``
swaps in a new object, so a config obtained earlier keeps its old values.
"""
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from shiftcal.models.config import ShiftCycleConfig, default_cycle_config
from shiftcal.models.dates import days_between, is_valid_date, to_date
from shiftcal.models.errors import UnknownTeamError
from shiftcal.models.rules import DETAILED_SHIFT_COLORS, SHIFT_COLORS
from shiftcal.models.shift import ShiftAssignment, ShiftLabel, TeamId
from shiftcal.utils.logging_setup import TRACE, get_logger, log_function_call

logger = get_logger("shiftcal.engine")


class ShiftCalculator:
    """Computes rotation shifts for the configured teams."""

    def __init__(self, config: Optional[ShiftCycleConfig] = None):
        self._config = config if config is not None else default_cycle_config()

    @property
    def config(self) -> ShiftCycleConfig:
        return self._config

    @staticmethod
    def _resolve_team(team, config: ShiftCycleConfig) -> TeamId:
        team_id = TeamId.from_string(team)
        if team_id not in config.shift_table:
            raise UnknownTeamError(team)
        return team_id

    def day_offset(self, day) -> int:
        """Whole days between ``day`` and the base date (negative before it)."""
        return days_between(to_date(day), self._config.base_date)

    def cycle_index(self, day) -> int:
        """Position of ``day`` in the rotation, in ``[0, cycle_length)``."""
        return self._index(to_date(day), self._config)

    @staticmethod
    def _index(day: date, config: ShiftCycleConfig) -> int:
        n = config.cycle_length
        d = days_between(day, config.base_date)
        # Non-negative for days before base_date as well
        return ((d % n) + n) % n

    def calculate_shift(self, day, team) -> ShiftLabel:
        """
        Shift of ``team`` on ``day``.

        Raises:
            UnknownTeamError: team is not in the active shift table
            InvalidDateError: day cannot be normalized to a date
        """
        config = self._config
        team_id = self._resolve_team(team, config)
        index = self._index(to_date(day), config)
        shift = config.shift_table[team_id][index]
        logger.log(TRACE, "%s %s: cycle index %d -> %s", day, team_id.value, index, shift.value)
        return shift

    def get_all_teams_shifts(self, day) -> List[ShiftAssignment]:
        """One assignment per team on ``day``, in canonical team order."""
        config = self._config
        index = self._index(to_date(day), config)
        return [
            ShiftAssignment(team=team, shift=seq[index])
            for team, seq in config.shift_table.items()
        ]

    def shifts_between(self, start, end, team) -> List[Tuple[date, ShiftLabel]]:
        """``(date, shift)`` for ``team`` on every day from start to end inclusive."""
        first, last = to_date(start), to_date(end)
        config = self._config
        team_id = self._resolve_team(team, config)
        sequence = config.shift_table[team_id]
        return [
            (day, sequence[self._index(day, config)])
            for day in _date_range(first, last)
        ]

    def all_teams_between(self, start, end) -> List[Tuple[date, List[ShiftAssignment]]]:
        """Every team's assignment on every day from start to end inclusive."""
        first, last = to_date(start), to_date(end)
        return [(day, self.get_all_teams_shifts(day)) for day in _date_range(first, last)]

    def get_shift_colors(self) -> Dict[ShiftLabel, str]:
        """Named color per shift label (badges)."""
        return dict(SHIFT_COLORS)

    def get_detailed_shift_colors(self) -> Dict[ShiftLabel, str]:
        """Hex color per shift label (cards, exports)."""
        return dict(DETAILED_SHIFT_COLORS)

    def is_valid_date(self, value) -> bool:
        return is_valid_date(value)

    @log_function_call
    def update_config(self, partial=None, **changes) -> ShiftCycleConfig:
        """
        Replace the configuration with a shallow merge of the current one and
        the given fields. Accepts a mapping, a complete ShiftCycleConfig, or
        keyword arguments.

        Raises:
            MalformedConfigError: the merged configuration is invalid
        """
        if isinstance(partial, ShiftCycleConfig):
            new_config = partial.merged(**changes) if changes else partial
        else:
            new_config = self._config.merged(partial, **changes)
        self._config = new_config
        logger.info(
            f"Cycle config replaced: base_date={new_config.base_date}, "
            f"cycle_length={new_config.cycle_length}"
        )
        return new_config


def _date_range(first: date, last: date) -> List[date]:
    return [first + timedelta(days=i) for i in range((last - first).days + 1)]
