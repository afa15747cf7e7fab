"""
Month Overview
==============
All teams side by side for the visible month, plus shift counts per team.
"""
import pandas as pd
import plotly.express as px
import streamlit as st

from app.state.session import SessionStateManager
from shiftcal.io.month_export import month_table, shift_counts
from shiftcal.models.rules import DETAILED_SHIFT_COLORS, RULES
from shiftcal.models.shift import ShiftLabel


def color_shift(val) -> str:
    try:
        label = ShiftLabel(val)
    except ValueError:
        return ""
    return f"background-color: {RULES.card_background(label)}; color: {RULES.card_text_color(label)}; font-weight: bold;"


def render_overview(state: SessionStateManager):
    controller = state.controller
    month = controller.state.visible_month
    selected_team = controller.state.selected_team.value

    st.subheader(f"📋 {month.first_day.strftime(RULES.month_format)}")
    table = month_table(state.calculator, month)
    df = table.copy()
    df["date"] = pd.to_datetime(df["date"]).dt.strftime("%d")
    df = df.set_index("date")

    team_cols = [c for c in df.columns if c != "weekday"]
    styled = df.style.map(color_shift, subset=team_cols)
    styled = styled.set_properties(subset=[selected_team], **{"border": "2px solid #1E90FF"})
    st.dataframe(styled, width="stretch", height=600)

    st.subheader("📈 Shifts per team")
    counts = shift_counts(table)
    long = counts.reset_index(names="team").melt(id_vars="team", var_name="shift", value_name="days")
    fig = px.bar(
        long,
        x="team",
        y="days",
        color="shift",
        color_discrete_map={label.value: color for label, color in DETAILED_SHIFT_COLORS.items()},
    )
    fig.update_layout(margin=dict(l=20, r=20, t=30, b=20), height=320)
    st.plotly_chart(fig, width="stretch")
