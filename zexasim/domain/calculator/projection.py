"""Month-by-month revenue projection.

Walks months 0..horizon, accruing rental income after a ramp-up lag,
crediting resale payouts at the end of each lot's holding period and
replaying upgrade/resale decisions. Every run starts from scratch.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence

from zexasim.core.exceptions import InvalidDecisionError
from zexasim.domain.calculator.dates import add_months, format_month, months_elapsed
from zexasim.domain.catalog import PRODUCT_TIERS, get_tier
from zexasim.domain.models.decision import Decision, DecisionAction
from zexasim.domain.models.projection import ProjectionInputs, ProjectionSnapshot
from zexasim.domain.models.tier import ProductTier


@dataclass(frozen=True)
class ActiveInvestment:
    """One lot alive inside a projection run."""

    tier: ProductTier
    quantity: int
    purchase_date: date

    def months_since_purchase(self, on: date, mode: str = "fixed_30_day") -> int:
        return months_elapsed(self.purchase_date, on, mode)


@dataclass
class MonthResult:
    """Cash movements of a single month, before snapshotting."""

    rental: int = 0
    resale: int = 0
    purchase: int = 0


def format_profit_rate(revenue: float, investment: float) -> str:
    """Profit rate as a one-decimal percentage string, "0.0" without investment."""
    if investment <= 0:
        return "0.0"
    return f"{(revenue / investment - 1) * 100:.1f}"


class ProjectionEngine:
    """Projection engine over a tier catalog.

    Holds no state between runs: ``project`` rebuilds lots and totals from
    the inputs each time.
    """

    def __init__(self, catalog: Mapping[str, ProductTier] = PRODUCT_TIERS):
        self.catalog = catalog

    def project(self, inputs: ProjectionInputs) -> list[ProjectionSnapshot]:
        """Run the projection.

        Returns:
            One snapshot per month index 0..inputs.horizon_months
        """
        start_tier = get_tier(inputs.start_tier, self.catalog)
        decisions_by_month = self._index_decisions(inputs.decisions)

        lots = [ActiveInvestment(start_tier, inputs.quantity, inputs.start_date)]
        total_investment = start_tier.price_for(inputs.quantity)
        total_revenue = 0
        snapshots: list[ProjectionSnapshot] = []

        for month in range(inputs.month_count):
            month_date = add_months(inputs.start_date, month)

            result = self._accrue(lots, month_date, inputs)
            total_revenue += result.resale

            decision = decisions_by_month.get(month)
            if decision is not None:
                lots, result.purchase = self._apply_decision(decision, month_date, inputs.quantity)
                total_investment += result.purchase

            total_revenue += result.rental

            snapshots.append(ProjectionSnapshot(
                label=format_month(month_date),
                month_index=month,
                month_number=month + 1,
                active_tiers=", ".join(lot.tier.name for lot in lots),
                investment=total_investment,
                revenue=total_revenue,
                balance=total_revenue - total_investment,
                monthly_revenue=result.rental,
                profit_rate=format_profit_rate(total_revenue, total_investment),
            ))

        return snapshots

    def _index_decisions(self, decisions: Sequence[Decision]) -> dict[int, Decision]:
        """Map month -> decision; the first decision recorded for a month wins."""
        by_month: dict[int, Decision] = {}
        for decision in decisions:
            get_tier(decision.from_tier, self.catalog)
            if decision.to_tier is not None:
                get_tier(decision.to_tier, self.catalog)
            by_month.setdefault(decision.month, decision)
        return by_month

    def _accrue(
        self,
        lots: list[ActiveInvestment],
        month_date: date,
        inputs: ProjectionInputs,
    ) -> MonthResult:
        """Rental and resale credited by the active lots this month."""
        result = MonthResult()
        for lot in lots:
            elapsed = lot.months_since_purchase(month_date, inputs.month_mode)
            if elapsed >= inputs.rental_lag_months:
                result.rental += lot.tier.rental_for(lot.quantity)
            # Resale can land in the same month as rental
            if elapsed == lot.tier.rental_months:
                result.resale += lot.tier.resale_for(lot.quantity)
        return result

    def _apply_decision(
        self,
        decision: Decision,
        month_date: date,
        quantity: int,
    ) -> tuple[list[ActiveInvestment], int]:
        """New lot list and purchase cost for a decision."""
        if decision.action is DecisionAction.RESALE:
            return [], 0
        if decision.to_tier is None:
            raise InvalidDecisionError(f"Upgrade at month {decision.month} has no destination tier")
        new_tier = get_tier(decision.to_tier, self.catalog)
        return [ActiveInvestment(new_tier, quantity, month_date)], new_tier.price_for(quantity)


def project_revenue(inputs: ProjectionInputs) -> list[ProjectionSnapshot]:
    """Project revenue with the default catalog."""
    return ProjectionEngine().project(inputs)
