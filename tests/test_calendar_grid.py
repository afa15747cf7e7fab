"""Tests for the HTML month grid and generated CSS."""
from datetime import date

from app.components.calendar_grid import month_grid_html
from app.components.styling import shift_css
from shiftcal.calendar.controller import CalendarStateController
from shiftcal.models.shift import ShiftLabel


class TestMonthGrid:

    def test_july_has_five_full_weeks(self, controller):
        html = month_grid_html(controller, today=date(2025, 7, 15))
        assert html.count("<td") == 35
        assert html.count("<th>") == 7
        # Monday-start grid begins with the last day of June
        assert html.index('title="2025-06-30"') < html.index('title="2025-07-01"')
        assert '<td class="outside" title="2025-06-30">' in html

    def test_selected_and_today(self, controller):
        html = month_grid_html(controller, today=date(2025, 7, 15))
        assert '<td class="selected today" title="2025-07-15">' in html

        controller.select_date("2025-07-20")
        html = month_grid_html(controller, today=date(2025, 7, 15))
        assert '<td class="selected" title="2025-07-20">' in html
        assert '<td class="today" title="2025-07-15">' in html

    def test_badges_follow_selected_team(self, controller):
        html = month_grid_html(controller, today=date(2025, 7, 15))
        cell = html.split('title="2025-07-15">')[1].split("</td>")[0]
        assert '<span class="shift-badge shift-rest">Rest</span>' in cell

        controller.select_team("Team4")
        html = month_grid_html(controller, today=date(2025, 7, 15))
        cell = html.split('title="2025-07-15">')[1].split("</td>")[0]
        assert '<span class="shift-badge shift-night">Night</span>' in cell

    def test_follows_navigation(self, controller):
        controller.navigate_month(target="2024-02")
        html = month_grid_html(controller, today=date(2025, 7, 15))
        assert 'title="2024-02-29"' in html
        assert "selected" not in html


class TestShiftCss:

    def test_class_per_label(self):
        css = shift_css()
        for label in ShiftLabel:
            assert f".shift-{label.value} {{" in css
        assert "#722ed1" in css
        assert "#f5f5f5" in css


def test_today_marker_uses_controller_clock(calculator):
    ctrl = CalendarStateController(calculator, clock=lambda: date(2025, 7, 3))
    ctrl.select_date("2025-07-20")
    html = month_grid_html(ctrl)
    assert '<td class="today" title="2025-07-03">' in html
