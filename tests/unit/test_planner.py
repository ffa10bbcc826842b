"""Unit tests for zexasim.application.services.planner."""

from datetime import date

import pytest

from zexasim.application.services.planner import DecisionPlanner
from zexasim.application.services.simulation import project_plan
from zexasim.core.exceptions import InvalidDecisionError, InvalidQuantityError, UnknownTierError
from zexasim.core.settings import AppSettings
from zexasim.domain.models.decision import DecisionAction


class TestNewPlan:
    """Tests for plan creation."""

    def test_defaults(self, planner):
        """Should start from the configured defaults."""
        plan = planner.new_plan()
        assert plan.start_date == date(2024, 4, 1)
        assert plan.start_tier == "TYPE-D"
        assert plan.current_tier == "TYPE-D"
        assert plan.quantity == 1
        assert plan.next_decision_month == 4
        assert plan.decisions == ()

    def test_unknown_tier(self, planner):
        """Unknown start tier is rejected."""
        with pytest.raises(UnknownTierError):
            planner.new_plan(start_tier="TYPE-Z")

    @pytest.mark.parametrize("quantity", [0, 21])
    def test_quantity_bounds(self, planner, quantity):
        """Quantity outside [1, 20] is rejected."""
        with pytest.raises(InvalidQuantityError):
            planner.new_plan(quantity=quantity)


class TestRecordDecision:
    """Tests for record_decision."""

    def test_upgrade_advances_pointer_and_marker(self, planner):
        """Upgrade records the successor and moves the marker by 4."""
        plan = planner.new_plan()
        updated = planner.record_decision(plan, "upgrade")

        decision = updated.decisions[-1]
        assert decision.month == 4
        assert decision.from_tier == "TYPE-D"
        assert decision.action is DecisionAction.UPGRADE
        assert decision.to_tier == "TYPE-V"
        assert updated.current_tier == "TYPE-V"
        assert updated.next_decision_month == 8
        assert updated.start_tier == "TYPE-D"

    def test_source_plan_untouched(self, planner):
        """Recording returns a new plan and leaves the old one as is."""
        plan = planner.new_plan()
        planner.record_decision(plan, DecisionAction.UPGRADE)
        assert plan.decisions == ()
        assert plan.current_tier == "TYPE-D"

    def test_resale_keeps_pointer_and_marker(self, planner):
        """Resale leaves the current tier and marker unchanged."""
        plan = planner.record_decision(planner.new_plan(), DecisionAction.RESALE)
        assert plan.decisions[-1].to_tier is None
        assert plan.current_tier == "TYPE-D"
        assert plan.next_decision_month == 4

    def test_upgrade_past_last_tier(self, planner):
        """Upgrading from the terminal tier raises InvalidDecisionError."""
        plan = planner.new_plan()
        for _ in range(3):
            plan = planner.record_decision(plan, "upgrade")
        assert plan.current_tier == "TYPE-X"
        assert plan.next_decision_month == 16
        with pytest.raises(InvalidDecisionError):
            planner.record_decision(plan, "upgrade")

    def test_unknown_action(self, planner):
        """Unknown action strings are rejected."""
        with pytest.raises(InvalidDecisionError):
            planner.record_decision(planner.new_plan(), "sell")

    def test_custom_interval(self):
        """Marker advances by the configured interval."""
        planner = DecisionPlanner(AppSettings(_env_file=None, decision_interval_months=6))
        plan = planner.record_decision(planner.new_plan(), "upgrade")
        assert plan.next_decision_month == 10

    def test_history_replayed_in_projection(self, planner):
        """Recorded history is replayed by the projection."""
        plan = planner.record_decision(planner.new_plan(), "upgrade")
        snapshots = project_plan(plan, planner)
        assert snapshots[4].investment == 8_460_000
        assert snapshots[4].active_tiers == "ZEXABOX PRO Type-V"


class TestDecisionPrompt:
    """Tests for decision_due and decision_options."""

    def test_due_inside_horizon(self, planner):
        """A fresh plan has a decision due."""
        assert planner.decision_due(planner.new_plan())

    def test_not_due_past_horizon(self):
        """No decision is due once the marker passes the horizon."""
        planner = DecisionPlanner(AppSettings(_env_file=None, horizon_months=6))
        plan = planner.record_decision(planner.new_plan(), "upgrade")
        assert not planner.decision_due(plan)

    def test_options_with_successor(self, planner):
        """Resale and upgrade options carry quantity-scaled amounts."""
        options = planner.decision_options(planner.new_plan(quantity=2))
        assert [o.action for o in options] == [DecisionAction.RESALE, DecisionAction.UPGRADE]
        assert options[0].amount == 7_695_000
        assert options[1].tier.identifier == "TYPE-V"
        assert options[1].amount == 7_920_000

    def test_last_tier_offers_resale_only(self, planner):
        """Terminal tier only offers resale."""
        options = planner.decision_options(planner.new_plan(start_tier="TYPE-X"))
        assert [o.action for o in options] == [DecisionAction.RESALE]


class TestInputEdits:
    """Tests for input edits."""

    def test_with_quantity_keeps_history(self, planner):
        """Changing quantity keeps recorded decisions."""
        plan = planner.record_decision(planner.new_plan(), "upgrade")
        plan = planner.with_quantity(plan, 5)
        assert plan.quantity == 5
        assert len(plan.decisions) == 1

    def test_with_quantity_rejects_out_of_range(self, planner):
        """Out-of-range quantity edit is rejected."""
        with pytest.raises(InvalidQuantityError):
            planner.with_quantity(planner.new_plan(), 21)

    def test_clamp_quantity(self, planner):
        """Stepper values are clamped into the configured range."""
        assert planner.clamp_quantity(0) == 1
        assert planner.clamp_quantity(7) == 7
        assert planner.clamp_quantity(25) == 20

    def test_with_start_date(self, planner):
        """Start date edit is applied."""
        plan = planner.with_start_date(planner.new_plan(), date(2025, 1, 1))
        assert plan.start_date == date(2025, 1, 1)

    def test_with_start_tier_resets_history(self, planner):
        """Changing the start tier starts a new plan."""
        plan = planner.record_decision(planner.new_plan(quantity=3), "upgrade")
        plan = planner.with_start_tier(plan, "TYPE-K")
        assert plan.start_tier == "TYPE-K"
        assert plan.current_tier == "TYPE-K"
        assert plan.decisions == ()
        assert plan.next_decision_month == 4
        assert plan.quantity == 3

    def test_same_start_tier_is_noop(self, planner):
        """Selecting the same start tier returns the same plan."""
        plan = planner.record_decision(planner.new_plan(), "resale")
        assert planner.with_start_tier(plan, "TYPE-D") is plan

    def test_reset(self, planner):
        """Reset clears history but keeps inputs."""
        plan = planner.record_decision(planner.new_plan(quantity=2), "upgrade")
        plan = planner.reset(plan)
        assert plan.decisions == ()
        assert plan.current_tier == "TYPE-D"
        assert plan.quantity == 2


class TestDisplayHelpers:
    """Tests for tier card and history labels."""

    def test_current_tier_summary(self, planner):
        """Tier card amounts scale with quantity."""
        summary = planner.current_tier_summary(planner.new_plan(quantity=2))
        assert summary.purchase_price == 9_000_000
        assert summary.monthly_rental == 1_012_000
        assert summary.resale_value == 7_695_000

    def test_describe_upgrade(self, planner):
        """Upgrade history label uses the 30-day date formula."""
        plan = planner.record_decision(planner.new_plan(), "upgrade")
        when, text = planner.describe_decision(plan, plan.decisions[0])
        assert when == "2024/07"
        assert text == "ZEXABOX PRO Type-DからZEXABOX PRO Type-Vへ機種変更"

    def test_describe_resale(self, planner):
        """Resale history label names the sold tier."""
        plan = planner.record_decision(planner.new_plan(), "resale")
        _, text = planner.describe_decision(plan, plan.decisions[0])
        assert text == "ZEXABOX PRO Type-Dをリセール"

    def test_to_inputs_uses_settings(self):
        """Projection inputs take horizon and month mode from settings."""
        settings = AppSettings(_env_file=None, horizon_months=12, month_mode="calendar")
        planner = DecisionPlanner(settings)
        inputs = planner.to_inputs(planner.new_plan())
        assert inputs.horizon_months == 12
        assert inputs.month_mode == "calendar"

    def test_to_inputs_uses_planner_quantity_bounds(self):
        """Quantity bounds come from the planner's settings, not the cached ones."""
        planner = DecisionPlanner(AppSettings(_env_file=None, max_quantity=30))
        plan = planner.new_plan(quantity=25)

        inputs = planner.to_inputs(plan)
        assert inputs.quantity == 25
        assert inputs.max_quantity == 30

        snapshots = project_plan(plan, planner)
        assert snapshots[0].investment == 25 * 4_500_000
        assert snapshots[2].monthly_revenue == 25 * 506_000

