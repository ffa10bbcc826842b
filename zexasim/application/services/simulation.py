"""Projection runs for the UI.

Wraps the projection engine with logging and turns snapshots into the
DataFrame and summary figures the charts and table consume.
"""

from __future__ import annotations

from typing import Any, Sequence

import pandas as pd

from zexasim.application.services.planner import DecisionPlanner, InvestmentPlan
from zexasim.core.exceptions import ProjectionError, ZexaSimError
from zexasim.core.logging import get_logger
from zexasim.domain.calculator.projection import ProjectionEngine
from zexasim.domain.models.projection import ProjectionInputs, ProjectionSnapshot

log = get_logger(__name__)

SNAPSHOT_COLUMNS = [
    "label",
    "month_index",
    "month_number",
    "active_tiers",
    "investment",
    "revenue",
    "balance",
    "monthly_revenue",
    "profit_rate",
]


def run_projection(
    inputs: ProjectionInputs,
    engine: ProjectionEngine | None = None,
) -> list[ProjectionSnapshot]:
    """Run a complete projection.

    Raises:
        ZexaSimError: Domain errors (unknown tier, bad decision) pass through.
        ProjectionError: Any other failure inside the engine.
    """
    engine = engine or ProjectionEngine()
    try:
        snapshots = engine.project(inputs)
    except ZexaSimError:
        raise
    except Exception as e:
        log.error("projection_failed", start_tier=inputs.start_tier, error=str(e))
        raise ProjectionError(f"Projection failed: {e}") from e

    final = snapshots[-1]
    log.info(
        "projection_completed",
        start_tier=inputs.start_tier,
        quantity=inputs.quantity,
        decisions=len(inputs.decisions),
        months=len(snapshots),
        final_balance=final.balance,
    )
    return snapshots


def project_plan(
    plan: InvestmentPlan,
    planner: DecisionPlanner | None = None,
    engine: ProjectionEngine | None = None,
) -> list[ProjectionSnapshot]:
    """Project a plan under the planner's settings."""
    planner = planner or DecisionPlanner()
    return run_projection(planner.to_inputs(plan), engine)


def snapshots_to_frame(snapshots: Sequence[ProjectionSnapshot]) -> pd.DataFrame:
    """One row per month, columns in SNAPSHOT_COLUMNS order."""
    if not snapshots:
        return pd.DataFrame(columns=SNAPSHOT_COLUMNS)
    return pd.DataFrame([s.model_dump() for s in snapshots], columns=SNAPSHOT_COLUMNS)


def break_even_month(snapshots: Sequence[ProjectionSnapshot]) -> ProjectionSnapshot | None:
    """First month whose cumulative balance is no longer negative."""
    return next((s for s in snapshots if s.balance >= 0), None)


def summarize(snapshots: Sequence[ProjectionSnapshot]) -> dict[str, Any]:
    """Headline figures of a projection."""
    if not snapshots:
        return {}

    final = snapshots[-1]
    break_even = break_even_month(snapshots)
    return {
        "final_investment": final.investment,
        "final_revenue": final.revenue,
        "final_balance": final.balance,
        "final_profit_rate": final.profit_rate,
        "total_rental": sum(s.monthly_revenue for s in snapshots),
        "break_even_label": break_even.label if break_even else None,
        "break_even_month": break_even.month_number if break_even else None,
    }
