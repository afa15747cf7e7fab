"""
Month Grid
==========
HTML month calendar: one cell per day, each carrying the selected team's
shift badge. Weeks start on Monday; days of neighbouring months are dimmed.
"""
import calendar
from datetime import date
from html import escape
from typing import Optional

from shiftcal.calendar.controller import CalendarStateController
from shiftcal.models.rules import SHIFT_STYLES

WEEKDAY_HEADERS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def month_grid_html(controller: CalendarStateController, today: Optional[date] = None) -> str:
    state = controller.state
    month = state.visible_month
    today = today or controller.today()
    weeks = calendar.Calendar(firstweekday=0).monthdatescalendar(month.year, month.month)

    html = ['<table class="shift-calendar">', "<tr>"]
    html += [f"<th>{d}</th>" for d in WEEKDAY_HEADERS]
    html.append("</tr>")

    for week in weeks:
        html.append("<tr>")
        for day in week:
            classes = []
            if not month.contains(day):
                classes.append("outside")
            if day == state.selected_date:
                classes.append("selected")
            if day == today:
                classes.append("today")
            shift = controller.get_shift_for_date(day).shift
            badge = escape(SHIFT_STYLES[shift].display_name)
            html.append(
                f'<td class="{" ".join(classes)}" title="{day.isoformat()}">'
                f'<div class="day-number">{day.day}</div>'
                f'<span class="shift-badge shift-{shift.value}">{badge}</span>'
                "</td>"
            )
        html.append("</tr>")

    html.append("</table>")
    return "".join(html)
