"""Decision data model.

A decision is a user choice, at a scheduled month, to resell the active
lot or upgrade it to the successor tier.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from zexasim.core.exceptions import InvalidDecisionError


class DecisionAction(str, Enum):
    """What happens to the active lot at the decision month."""

    UPGRADE = "upgrade"
    RESALE = "resale"


class Decision(BaseModel):
    """One entry of the append-only decision history."""

    month: int = Field(..., ge=0, description="Month index the decision applies to")
    from_tier: str = Field(..., description="Tier held when the decision was taken")
    action: DecisionAction
    to_tier: str | None = Field(None, description="Destination tier (upgrade only)")

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def check_destination(self) -> Decision:
        """Upgrades need a destination, resales must not carry one."""
        if self.action is DecisionAction.UPGRADE and not self.to_tier:
            raise InvalidDecisionError(
                f"Upgrade at month {self.month} from {self.from_tier} has no destination tier"
            )
        if self.action is DecisionAction.RESALE and self.to_tier is not None:
            raise InvalidDecisionError(
                f"Resale at month {self.month} cannot target tier {self.to_tier}"
            )
        return self

    @property
    def is_upgrade(self) -> bool:
        return self.action is DecisionAction.UPGRADE
