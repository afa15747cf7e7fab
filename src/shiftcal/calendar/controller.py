"""
Calendar State Controller
=========================
Owns the calendar selection (date, team, visible month) and derives what a
calendar view displays. Every mutation replaces the whole
CalendarSelectionState, then notifies subscribers with ``(old, new)``.
Views either subscribe or re-query ``state`` and the derived helpers.
"""
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.models.dates import YearMonth, to_date
from shiftcal.models.errors import UnknownTeamError
from shiftcal.models.rules import RULES
from shiftcal.models.shift import ShiftAssignment, ShiftLabel, TeamId
from shiftcal.utils.logging_setup import get_logger

logger = get_logger("shiftcal.calendar")


@dataclass(frozen=True)
class CalendarSelectionState:
    """What the calendar currently shows."""
    selected_date: date
    selected_team: TeamId
    visible_month: YearMonth


Listener = Callable[[CalendarSelectionState, CalendarSelectionState], None]


class CalendarStateController:
    """Single source of truth for the calendar selection."""

    def __init__(
        self,
        calculator: Optional[ShiftCalculator] = None,
        initial_team=None,
        clock: Callable[[], date] = date.today,
    ):
        self.calculator = calculator if calculator is not None else ShiftCalculator()
        self._clock = clock
        self._listeners: List[Listener] = []
        today = to_date(clock())
        team = self._check_team(initial_team if initial_team is not None else RULES.default_team)
        self._state = CalendarSelectionState(
            selected_date=today,
            selected_team=team,
            visible_month=YearMonth.of(today),
        )

    @property
    def state(self) -> CalendarSelectionState:
        return self._state

    # --- Subscriptions ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener(old, new)``; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: CalendarSelectionState) -> CalendarSelectionState:
        old_state = self._state
        if new_state == old_state:
            return old_state
        self._state = new_state
        logger.debug(
            f"Selection: {new_state.selected_date} {new_state.selected_team.value} "
            f"month={new_state.visible_month}"
        )
        for listener in list(self._listeners):
            listener(old_state, new_state)
        return new_state

    def _check_team(self, team) -> TeamId:
        team_id = TeamId.from_string(team)
        if team_id not in self.calculator.config.shift_table:
            raise UnknownTeamError(team)
        return team_id

    # --- Selection changes ---

    def select_date(self, day) -> CalendarSelectionState:
        """Select ``day``; the visible month follows when the day is outside it."""
        selected = to_date(day)
        month = self._state.visible_month
        if not month.contains(selected):
            month = YearMonth.of(selected)
        return self._commit(replace(self._state, selected_date=selected, visible_month=month))

    def pick_date(self, day) -> CalendarSelectionState:
        """Date-picker confirmation; a cleared picker (``None``) changes nothing."""
        if day is None:
            return self._state
        return self.select_date(day)

    def select_team(self, team) -> CalendarSelectionState:
        return self._commit(replace(self._state, selected_team=self._check_team(team)))

    def navigate_month(self, delta: Optional[int] = None, target=None) -> CalendarSelectionState:
        """
        Show another month without touching the selected date.

        Args:
            delta: Months relative to the visible month (e.g. -1, +1)
            target: Explicit month as YearMonth, date or ``"YYYY-MM"``
        """
        if (delta is None) == (target is None):
            raise ValueError("navigate_month needs exactly one of delta or target")
        if target is not None:
            month = YearMonth.coerce(target)
        else:
            month = self._state.visible_month.shifted(delta)
        return self._commit(replace(self._state, visible_month=month))

    def next_month(self) -> CalendarSelectionState:
        return self.navigate_month(1)

    def previous_month(self) -> CalendarSelectionState:
        return self.navigate_month(-1)

    def today(self) -> date:
        """Current date according to the controller clock."""
        return to_date(self._clock())

    def go_to_today(self) -> CalendarSelectionState:
        today = self.today()
        return self._commit(replace(
            self._state, selected_date=today, visible_month=YearMonth.of(today)
        ))

    # --- Derived views ---

    def list_visible_dates(self) -> List[date]:
        """Every date of the visible month, ascending."""
        return self._state.visible_month.dates()

    def get_shift_for_date(self, day, team=None) -> ShiftAssignment:
        team_id = self._state.selected_team if team is None else TeamId.from_string(team)
        return ShiftAssignment(team=team_id, shift=self.calculator.calculate_shift(day, team_id))

    def current_shift(self) -> ShiftAssignment:
        """Selected team's shift on the selected date."""
        return self.get_shift_for_date(self._state.selected_date)

    def all_teams_shifts(self) -> List[ShiftAssignment]:
        """Every team's shift on the selected date."""
        return self.calculator.get_all_teams_shifts(self._state.selected_date)

    def month_rows(self) -> List[Tuple[date, List[ShiftAssignment]]]:
        """Each visible date with every team's shift (team overview list)."""
        month = self._state.visible_month
        return self.calculator.all_teams_between(month.first_day, month.last_day)

    def shift_colors(self) -> Dict[ShiftLabel, str]:
        return self.calculator.get_shift_colors()

    def detailed_shift_colors(self) -> Dict[ShiftLabel, str]:
        return self.calculator.get_detailed_shift_colors()
