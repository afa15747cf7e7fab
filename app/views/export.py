"""
Export View
===========
Handles file downloads (CSV, Excel) of the visible month.
"""
import io

import streamlit as st

from app.state.session import SessionStateManager
from shiftcal.io.month_export import export_month_to_csv, export_month_to_excel


def render_downloads(state: SessionStateManager):
    """Render the download section."""
    controller = state.controller
    month = controller.state.visible_month

    st.subheader("📥 Downloads")
    st.caption(f"Month {month}, selected team {controller.state.selected_team.value} highlighted in Excel")

    col1, col2 = st.columns(2)

    with col1:
        csv_buffer = io.StringIO()
        export_month_to_csv(state.calculator, month, csv_buffer)
        st.download_button(
            "📥 Download CSV",
            csv_buffer.getvalue(),
            f"shifts_{month}.csv",
            "text/csv"
        )

    with col2:
        xlsx_buffer = io.BytesIO()
        export_month_to_excel(
            state.calculator, month, xlsx_buffer, highlight_team=controller.state.selected_team
        )
        st.download_button(
            "📥 Download Excel",
            xlsx_buffer.getvalue(),
            f"shifts_{month}.xlsx",
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
