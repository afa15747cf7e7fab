# shiftcal/calendar - Calendar selection state
from .controller import CalendarSelectionState, CalendarStateController

__all__ = ["CalendarSelectionState", "CalendarStateController"]
