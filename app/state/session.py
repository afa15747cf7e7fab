"""
Session State Management
========================
Encapsulates all Streamlit session state interactions.

The session keeps one CalendarStateController; views re-query it on every
rerun instead of holding their own copies of the selection.
"""
from typing import Optional

import streamlit as st

from shiftcal.calendar.controller import CalendarSelectionState, CalendarStateController
from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.models.config import ShiftCycleConfig, default_cycle_config


class SessionStateManager:
    """Manages type-safe access to session state."""

    @staticmethod
    def init_state():
        """Initialize default session state values."""
        defaults = {
            "controller": None,
            "config_error": None,
        }

        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value

        if st.session_state["controller"] is None:
            st.session_state["controller"] = CalendarStateController(ShiftCalculator())

    @property
    def controller(self) -> CalendarStateController:
        return st.session_state.get("controller")

    @property
    def calculator(self) -> ShiftCalculator:
        return self.controller.calculator

    @property
    def selection(self) -> CalendarSelectionState:
        return self.controller.state

    @property
    def config(self) -> ShiftCycleConfig:
        return self.calculator.config

    @property
    def config_error(self) -> Optional[str]:
        return st.session_state.get("config_error")

    @config_error.setter
    def config_error(self, value: Optional[str]):
        st.session_state["config_error"] = value

    def apply_config(self, config: ShiftCycleConfig):
        """Swap in a new cycle config and clear any previous error."""
        self.calculator.update_config(config)
        self.config_error = None

    def reset_config(self):
        """Back to the reference rotation."""
        self.apply_config(default_cycle_config())
