"""
Shift Calendar — Streamlit Web UI
=================================
Four-team rotation calendar backed by the shiftcal calculator.
"""
import os
import sys

import streamlit as st

# Add src and project root to python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))

from app.components.sidebar import render_sidebar
from app.components.styling import apply_styling
from app.state.session import SessionStateManager
from app.views.calendar_view import render_calendar
from app.views.export import render_downloads
from app.views.overview import render_overview
from shiftcal.models.errors import ShiftCalendarError
from shiftcal.utils.logging_setup import setup_logging
from shiftcal.utils.structured_logging import configure_structlog


@st.cache_resource
def _init_logging():
    setup_logging(level="INFO", log_file="logs/shiftcal.log")
    configure_structlog()


def main():
    st.set_page_config(page_title="Shift Calendar", page_icon="🗓️", layout="wide")
    _init_logging()

    SessionStateManager.init_state()
    state = SessionStateManager()
    apply_styling()

    st.title("🗓️ Shift Calendar")

    render_sidebar(state)

    tabs = st.tabs(["📅 Calendar", "📋 Month overview", "📥 Downloads"])
    try:
        with tabs[0]:
            render_calendar(state)
        with tabs[1]:
            render_overview(state)
        with tabs[2]:
            render_downloads(state)
    except ShiftCalendarError as e:
        st.error(f"❌ {e}")


if __name__ == "__main__":
    main()
