"""Application services: plan editing and projection runs."""

from .planner import DecisionOption, DecisionPlanner, InvestmentPlan, TierSummary
from .simulation import project_plan, run_projection, snapshots_to_frame, summarize

__all__ = [
    "DecisionOption",
    "DecisionPlanner",
    "InvestmentPlan",
    "TierSummary",
    "project_plan",
    "run_projection",
    "snapshots_to_frame",
    "summarize",
]
