"""Investment plan and decision recording.

An ``InvestmentPlan`` is the user's whole input state: start inputs, the
tier the next decision applies to, the decision history and the month the
next decision is due. Plans are immutable; every edit returns a new plan
and the caller re-runs the projection on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, Field

from zexasim.core.exceptions import InvalidDecisionError, InvalidQuantityError
from zexasim.core.logging import get_logger
from zexasim.core.settings import AppSettings, get_settings
from zexasim.domain.calculator.dates import approximate_month_date, format_month
from zexasim.domain.catalog import get_tier, successor_of
from zexasim.domain.models.decision import Decision, DecisionAction
from zexasim.domain.models.projection import ProjectionInputs
from zexasim.domain.models.tier import ProductTier

log = get_logger(__name__)


class InvestmentPlan(BaseModel):
    """User-held inputs of the simulator."""

    start_date: date
    start_tier: str = Field(..., description="Tier bought at month 0")
    quantity: int = Field(..., ge=1)
    current_tier: str = Field(..., description="Tier the next decision applies to")
    decisions: tuple[Decision, ...] = Field(default=())
    next_decision_month: int = Field(..., ge=0)

    model_config = {
        "frozen": True,
    }


@dataclass(frozen=True)
class DecisionOption:
    """One choice offered at the decision prompt."""

    action: DecisionAction
    tier: ProductTier
    amount: int  # resale payout or additional investment, in ¥


@dataclass(frozen=True)
class TierSummary:
    """Figures shown on the current-tier card, scaled by quantity."""

    tier: ProductTier
    quantity: int
    purchase_price: int
    monthly_rental: int
    resale_value: int


class DecisionPlanner:
    """Creates and edits plans under the configured cadence and limits."""

    def __init__(self, settings: AppSettings | None = None):
        self.settings = settings or get_settings()

    # --- Plan creation & input edits ---

    def new_plan(
        self,
        start_date: date | None = None,
        start_tier: str | None = None,
        quantity: int | None = None,
    ) -> InvestmentPlan:
        """Fresh plan with an empty history."""
        tier_id = start_tier or self.settings.default_tier
        get_tier(tier_id)
        qty = self.settings.default_quantity if quantity is None else quantity
        self._check_quantity(qty)
        return InvestmentPlan(
            start_date=start_date or self.settings.default_start_date,
            start_tier=tier_id,
            quantity=qty,
            current_tier=tier_id,
            next_decision_month=self.settings.first_decision_month,
        )

    def with_start_date(self, plan: InvestmentPlan, start_date: date) -> InvestmentPlan:
        return plan.model_copy(update={"start_date": start_date})

    def with_quantity(self, plan: InvestmentPlan, quantity: int) -> InvestmentPlan:
        self._check_quantity(quantity)
        return plan.model_copy(update={"quantity": quantity})

    def with_start_tier(self, plan: InvestmentPlan, start_tier: str) -> InvestmentPlan:
        """Switch the starting tier; the history no longer applies and is dropped."""
        if start_tier == plan.start_tier:
            return plan
        return self.new_plan(plan.start_date, start_tier, plan.quantity)

    def reset(self, plan: InvestmentPlan) -> InvestmentPlan:
        """Drop every decision, keeping start date, tier and quantity."""
        return self.new_plan(plan.start_date, plan.start_tier, plan.quantity)

    def clamp_quantity(self, quantity: int) -> int:
        return max(self.settings.min_quantity, min(self.settings.max_quantity, quantity))

    def _check_quantity(self, quantity: int) -> None:
        if not self.settings.min_quantity <= quantity <= self.settings.max_quantity:
            raise InvalidQuantityError(quantity, self.settings.min_quantity, self.settings.max_quantity)

    # --- Decisions ---

    def record_decision(self, plan: InvestmentPlan, action: DecisionAction | str) -> InvestmentPlan:
        """Append a decision at the month it is due.

        An upgrade moves ``current_tier`` to the successor and pushes the
        next decision ``decision_interval_months`` later. A resale leaves
        both untouched.

        Raises:
            InvalidDecisionError: Unknown action, or upgrade from the last tier.
        """
        try:
            action = DecisionAction(action)
        except ValueError:
            raise InvalidDecisionError(f"Unknown decision action '{action}'") from None

        successor = successor_of(plan.current_tier)
        if action is DecisionAction.UPGRADE and successor is None:
            raise InvalidDecisionError(f"{plan.current_tier} has no successor tier to upgrade to")

        decision = Decision(
            month=plan.next_decision_month,
            from_tier=plan.current_tier,
            action=action,
            to_tier=successor.identifier if action is DecisionAction.UPGRADE else None,
        )
        update: dict[str, object] = {"decisions": plan.decisions + (decision,)}
        if action is DecisionAction.UPGRADE:
            update["current_tier"] = successor.identifier
            update["next_decision_month"] = plan.next_decision_month + self.settings.decision_interval_months

        log.info(
            "decision_recorded",
            month=decision.month,
            action=decision.action.value,
            from_tier=decision.from_tier,
            to_tier=decision.to_tier,
            history_size=len(plan.decisions) + 1,
        )
        return plan.model_copy(update=update)

    def decision_due(self, plan: InvestmentPlan) -> bool:
        """A decision prompt is shown while its month is inside the horizon."""
        return plan.next_decision_month <= self.settings.horizon_months

    def decision_options(self, plan: InvestmentPlan) -> list[DecisionOption]:
        """Resale always; upgrade only when the current tier has a successor."""
        current = get_tier(plan.current_tier)
        options = [DecisionOption(DecisionAction.RESALE, current, current.resale_for(plan.quantity))]
        successor = successor_of(plan.current_tier)
        if successor is not None:
            options.append(
                DecisionOption(DecisionAction.UPGRADE, successor, successor.price_for(plan.quantity))
            )
        return options

    # --- Display helpers ---

    def current_tier_summary(self, plan: InvestmentPlan) -> TierSummary:
        tier = get_tier(plan.current_tier)
        return TierSummary(
            tier=tier,
            quantity=plan.quantity,
            purchase_price=tier.price_for(plan.quantity),
            monthly_rental=tier.rental_for(plan.quantity),
            resale_value=tier.resale_for(plan.quantity),
        )

    def describe_decision(self, plan: InvestmentPlan, decision: Decision) -> tuple[str, str]:
        """History entry as (date label, text).

        The date is counted in 30-day units from the start date, so it can
        read one month earlier than the projection row of the same decision.
        """
        when = format_month(approximate_month_date(plan.start_date, decision.month))
        source = get_tier(decision.from_tier).name
        if decision.action is DecisionAction.UPGRADE and decision.to_tier is not None:
            target = get_tier(decision.to_tier).name
            return when, f"{source}から{target}へ機種変更"
        return when, f"{source}をリセール"

    def to_inputs(self, plan: InvestmentPlan) -> ProjectionInputs:
        """Projection inputs for the plan under current settings."""
        return ProjectionInputs(
            start_date=plan.start_date,
            start_tier=plan.start_tier,
            quantity=plan.quantity,
            decisions=plan.decisions,
            horizon_months=self.settings.horizon_months,
            rental_lag_months=self.settings.rental_lag_months,
            month_mode=self.settings.month_mode,
            min_quantity=self.settings.min_quantity,
            max_quantity=self.settings.max_quantity,
        )
