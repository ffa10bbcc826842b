"""Main page rendering.

Composes the settings panel, decision cards, chart and table.
"""

from __future__ import annotations

import streamlit as st

from zexasim.application.services.planner import DecisionPlanner
from zexasim.application.services.simulation import project_plan, snapshots_to_frame, summarize
from zexasim.core.exceptions import ZexaSimError
from zexasim.core.logging import get_logger
from zexasim.ui.components.charts import render_projection_chart
from zexasim.ui.components.decisions import render_decision_history, render_decision_prompt
from zexasim.ui.components.results import render_kpi_summary, render_projection_table
from zexasim.ui.components.sidebar import render_settings_panel
from zexasim.ui.state import SessionManager

log = get_logger(__name__)


def header_caption(horizon_months: int) -> str:
    return f"レンタル収入・リセール・機種変更を{horizon_months}ヶ月で試算します"


def render_header(horizon_months: int) -> None:
    st.title("ZEXABOX 収益シミュレーター")
    st.caption(header_caption(horizon_months))


def render_main_page(planner: DecisionPlanner) -> None:
    """Render the page; the projection is recomputed on every run."""
    render_header(planner.settings.horizon_months)

    error = SessionManager.pop_error()
    if error:
        st.error(error)

    left, right = st.columns([1, 2], gap="large")

    with left:
        plan = render_settings_panel(planner, SessionManager.get_plan())
        if plan is not SessionManager.get_plan():
            SessionManager.set_plan(plan)
        render_decision_prompt(planner, plan)
        render_decision_history(planner, plan)

    with right:
        st.subheader("収益シミュレーション")
        try:
            snapshots = project_plan(plan, planner)
        except ZexaSimError as e:
            log.warning("projection_rejected", error=str(e))
            st.error(str(e))
            return

        df = snapshots_to_frame(snapshots)
        render_kpi_summary(summarize(snapshots))
        render_projection_chart(df)
        render_projection_table(df)

        if planner.settings.debug_mode:
            with st.expander("Raw snapshots", expanded=False):
                st.json([s.model_dump() for s in snapshots])
