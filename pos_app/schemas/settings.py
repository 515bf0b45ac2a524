from decimal import Decimal
from pydantic import BaseModel, Field


class BasePriceUpdate(BaseModel):
    base_price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        decimal_places=2,
        description="Standard unit price used for new quotes",
    )


class BasePriceResponse(BaseModel):
    base_price: Decimal
