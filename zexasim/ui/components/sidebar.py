"""Investment settings panel: start date, starting tier, quantity, tier card."""

from __future__ import annotations

import streamlit as st

from zexasim.application.services.planner import DecisionPlanner, InvestmentPlan
from zexasim.domain.catalog import PRODUCT_TIERS, tier_ids
from zexasim.ui.helpers import format_yen


def render_settings_panel(planner: DecisionPlanner, plan: InvestmentPlan) -> InvestmentPlan:
    """Render input widgets and return the (possibly updated) plan."""
    st.subheader("投資設定")

    start_date = st.date_input("開始日", value=plan.start_date, key="start_date")
    if start_date != plan.start_date:
        plan = planner.with_start_date(plan, start_date)

    ids = tier_ids()
    start_tier = st.selectbox(
        "開始機種",
        ids,
        index=ids.index(plan.start_tier),
        format_func=lambda tid: PRODUCT_TIERS[tid].name,
        help="変更すると投資履歴はリセットされます",
        key="start_tier",
    )
    if start_tier != plan.start_tier:
        plan = planner.with_start_tier(plan, start_tier)

    plan = _render_quantity_stepper(planner, plan)
    _render_tier_card(planner, plan)
    return plan


def _render_quantity_stepper(planner: DecisionPlanner, plan: InvestmentPlan) -> InvestmentPlan:
    """-/+ buttons around the unit count, clamped to the allowed range."""
    st.markdown("**購入台数**")
    minus, count, plus = st.columns([1, 2, 1])
    quantity = plan.quantity
    if minus.button("−", key="qty_minus", use_container_width=True):
        quantity = planner.clamp_quantity(quantity - 1)
    if plus.button("+", key="qty_plus", use_container_width=True):
        quantity = planner.clamp_quantity(quantity + 1)
    count.markdown(f"<div style='text-align:center;font-weight:600'>{quantity}台</div>", unsafe_allow_html=True)

    if quantity != plan.quantity:
        plan = planner.with_quantity(plan, quantity)
    return plan


def _render_tier_card(planner: DecisionPlanner, plan: InvestmentPlan) -> None:
    summary = planner.current_tier_summary(plan)
    with st.container(border=True):
        st.markdown("**現在の機種**")
        st.markdown(f"#### {summary.tier.name}")
        st.caption(summary.tier.description)
        rows = [
            ("購入価格", summary.purchase_price),
            ("月額収入", summary.monthly_rental),
            ("売却価格", summary.resale_value),
        ]
        for label, amount in rows:
            left, right = st.columns(2)
            left.write(f"{label}:")
            right.write(format_yen(amount))
