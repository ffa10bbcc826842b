"""Data models for zexasim."""

from .decision import Decision, DecisionAction
from .projection import ProjectionInputs, ProjectionSnapshot
from .tier import ProductTier

__all__ = [
    "Decision",
    "DecisionAction",
    "ProductTier",
    "ProjectionInputs",
    "ProjectionSnapshot",
]
