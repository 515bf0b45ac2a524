# schemas/quote.py

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field

from pos_app.schemas.promo import PromoResponse


class PriceQuote(BaseModel):
    total: Decimal
    applied: List[str] = Field(default_factory=list)
    standard_total: Decimal
    savings: Decimal


class PricingConfig(BaseModel):
    """Base price and promo rules in effect for one pricing call."""

    base_price: Decimal
    promos: List[PromoResponse] = Field(default_factory=list)
