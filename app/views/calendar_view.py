"""
Calendar View
=============
Header (date picker, month navigation, today, team select), month grid and
the selected day's team cards.
"""
import streamlit as st

from app.components.calendar_grid import month_grid_html
from app.state.session import SessionStateManager
from shiftcal.models.rules import RULES, SHIFT_STYLES
from shiftcal.models.shift import TEAM_ORDER


def _on_pick(state: SessionStateManager):
    state.controller.pick_date(st.session_state.get("picker_date"))


def _on_team(state: SessionStateManager):
    state.controller.select_team(st.session_state["team_select"])


def render_header(state: SessionStateManager):
    controller = state.controller
    selection = controller.state

    # Widgets mirror the controller, never the other way round
    st.session_state["picker_date"] = selection.selected_date
    st.session_state["team_select"] = selection.selected_team

    col_date, col_title, col_nav = st.columns([2, 3, 3])
    with col_date:
        st.date_input("Date", key="picker_date", on_change=_on_pick, args=(state,))
    with col_title:
        month = selection.visible_month
        st.subheader(month.first_day.strftime(RULES.month_format))
    with col_nav:
        c1, c2, c3 = st.columns(3)
        c1.button("◀", on_click=controller.previous_month, width="stretch")
        c2.button("▶", on_click=controller.next_month, width="stretch")
        c3.button("Today", on_click=controller.go_to_today, type="primary", width="stretch")

    st.selectbox(
        "Team",
        options=TEAM_ORDER,
        format_func=lambda t: t.value,
        key="team_select",
        on_change=_on_team,
        args=(state,),
    )


def render_team_cards(state: SessionStateManager):
    controller = state.controller
    st.markdown(f"**Teams on {controller.state.selected_date.strftime(RULES.date_format)}**")
    cols = st.columns(len(TEAM_ORDER))
    for col, assignment in zip(cols, controller.all_teams_shifts()):
        with col:
            st.markdown(
                f'<div class="team-card shift-{assignment.shift.value}">'
                f'<div class="team-name">{assignment.team.value}</div>'
                f'<div class="shift-type">{SHIFT_STYLES[assignment.shift].display_name}</div>'
                "</div>",
                unsafe_allow_html=True,
            )


def render_calendar(state: SessionStateManager):
    render_header(state)
    st.markdown(month_grid_html(state.controller), unsafe_allow_html=True)
    render_team_cards(state)
