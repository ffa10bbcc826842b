"""Product tier data model.

A tier is a purchasable ZEXABOX device configuration with fixed
price, rental and resale economics.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class ProductTier(BaseModel):
    """Static economics of one device tier.

    Tiers form a chain through ``next_tier``; the last tier has none.
    """

    # Identity
    identifier: str = Field(..., description="Catalog key, e.g. TYPE-D")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Who the tier is offered to")

    # Economics (yen)
    price: int = Field(..., gt=0, description="Unit purchase price in ¥")
    monthly_rental: int = Field(..., ge=0, description="Monthly rental income per unit in ¥")
    resale_value: int = Field(..., ge=0, description="Resale payout per unit in ¥")

    # Display-only figures
    resale_percentage: float = Field(..., ge=0, description="Resale value as % of price")
    max_profit: float = Field(..., ge=0, description="Maximum profit % advertised")

    # Terms
    rental_months: int = Field(..., gt=0, description="Holding period before resale, in months")
    limit: int = Field(..., gt=0, description="Units available for this tier")
    next_tier: str | None = Field(None, description="Identifier of the successor tier")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def is_terminal(self) -> bool:
        """True for the last tier of the chain."""
        return self.next_tier is None

    def price_for(self, quantity: int) -> int:
        """Purchase price for ``quantity`` units."""
        return self.price * quantity

    def rental_for(self, quantity: int) -> int:
        """Monthly rental income for ``quantity`` units."""
        return self.monthly_rental * quantity

    def resale_for(self, quantity: int) -> int:
        """Resale payout for ``quantity`` units."""
        return self.resale_value * quantity
