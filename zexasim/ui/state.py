"""Session state management for the Streamlit app.

The whole user input lives in one immutable ``InvestmentPlan`` stored in
session state; widgets replace it, never mutate it.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from zexasim.application.services.planner import DecisionPlanner, InvestmentPlan

T = TypeVar("T")

PLAN_KEY = "plan"


def get_state(key: str, default: T) -> T:
    """Get a value from session state, storing the default if absent."""
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values; existing values are kept."""
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    DEFAULTS = {
        "last_error": None,
    }

    @classmethod
    def initialize(cls, planner: DecisionPlanner) -> None:
        """Initialize defaults and create the first plan."""
        init_state(cls.DEFAULTS)
        if PLAN_KEY not in st.session_state:
            set_state(PLAN_KEY, planner.new_plan())

    @classmethod
    def get_plan(cls) -> InvestmentPlan:
        return st.session_state[PLAN_KEY]

    @classmethod
    def set_plan(cls, plan: InvestmentPlan) -> None:
        """Replace the plan; the next script run recomputes the projection."""
        set_state(PLAN_KEY, plan)

    @classmethod
    def set_error(cls, message: str | None) -> None:
        set_state("last_error", message)

    @classmethod
    def pop_error(cls) -> str | None:
        """Return and clear the pending error message."""
        message = get_state("last_error", None)
        set_state("last_error", None)
        return message
