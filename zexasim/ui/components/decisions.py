"""Decision prompt and decision history cards."""

from __future__ import annotations

import streamlit as st

from zexasim.application.services.planner import DecisionPlanner, InvestmentPlan
from zexasim.core.exceptions import InvalidDecisionError
from zexasim.domain.models.decision import DecisionAction
from zexasim.ui.helpers import format_yen
from zexasim.ui.state import SessionManager


def render_decision_prompt(planner: DecisionPlanner, plan: InvestmentPlan) -> None:
    """Resale / upgrade buttons for the decision that is due.

    A click stores the new plan and reruns the script so everything is
    recomputed from the updated history.
    """
    if not planner.decision_due(plan):
        return

    with st.container(border=True):
        st.markdown(f"**{plan.next_decision_month}ヶ月経過: 次のステップを選択**")
        options = planner.decision_options(plan)
        columns = st.columns(len(options))
        for column, option in zip(columns, options):
            with column:
                if option.action is DecisionAction.RESALE:
                    title = "🔄 リセール"
                    caption = f"売却価格: {format_yen(option.amount)}"
                else:
                    title = f"➡️ {option.tier.name}へ機種変更"
                    caption = f"追加投資: {format_yen(option.amount)}"
                clicked = st.button(title, key=f"decide_{option.action.value}", use_container_width=True)
                st.caption(caption)
                if clicked:
                    _record(planner, plan, option.action)


def _record(planner: DecisionPlanner, plan: InvestmentPlan, action: DecisionAction) -> None:
    try:
        SessionManager.set_plan(planner.record_decision(plan, action))
    except InvalidDecisionError as e:
        SessionManager.set_error(str(e))
    st.rerun()


def render_decision_history(planner: DecisionPlanner, plan: InvestmentPlan) -> None:
    """List recorded decisions, with a reset button."""
    if not plan.decisions:
        return

    with st.container(border=True):
        st.markdown("**投資履歴**")
        for decision in plan.decisions:
            when, text = planner.describe_decision(plan, decision)
            st.write(f"{when}: {text}")
        if st.button("履歴をリセット", key="reset_history"):
            SessionManager.set_plan(planner.reset(plan))
            st.rerun()
