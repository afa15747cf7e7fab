import json

import streamlit as st

from app.state.session import SessionStateManager
from shiftcal.io.config_file import parse_config
from shiftcal.models.errors import ShiftCalendarError
from shiftcal.models.shift import TEAM_ORDER
from shiftcal.utils.structured_logging import get_structured_logger

log = get_structured_logger("shiftcal.app")


def render_logo():
    st.markdown("## 🗓️ Shift Calendar")
    st.caption("Four-team rotation")


def render_config_editor(state: SessionStateManager):
    """Rotation settings: base date, cycle length and per-team sequences."""
    config = state.config

    with st.form("cycle_config"):
        base_date = st.date_input("Base date", value=config.base_date)
        cycle_length = st.number_input(
            "Cycle length (days)", min_value=1, max_value=366, value=config.cycle_length, step=1
        )
        st.caption("Shifts per team, comma separated (rest, morning, day, night)")
        table = {}
        for team in TEAM_ORDER:
            table[team.value] = st.text_input(
                team.value, value=", ".join(s.value for s in config.shift_table[team])
            )
        submitted = st.form_submit_button("Apply", type="primary")

    if submitted:
        data = {
            "base_date": base_date.isoformat(),
            "cycle_length": int(cycle_length),
            "shift_table": {
                team: [s.strip() for s in raw.split(",") if s.strip()]
                for team, raw in table.items()
            },
        }
        try:
            state.apply_config(parse_config(data))
            log.info("config_applied", base_date=data["base_date"], cycle_length=data["cycle_length"])
        except ShiftCalendarError as e:
            state.config_error = str(e)
            log.warning("config_rejected", error=str(e))

    if state.config_error:
        st.error(f"❌ {state.config_error}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Reset", width="stretch"):
            state.reset_config()
    with col2:
        st.download_button(
            "Config JSON",
            json.dumps(state.config.to_dict(), ensure_ascii=False, indent=2),
            "shift_config.json",
            "application/json",
            width="stretch",
        )


def render_sidebar(state: SessionStateManager):
    with st.sidebar:
        render_logo()
        st.divider()
        st.header("Rotation")
        render_config_editor(state)
