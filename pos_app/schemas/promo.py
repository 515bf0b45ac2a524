from decimal import Decimal
from pydantic import BaseModel, Field


class PromoCreate(BaseModel):
    quantity: int = Field(..., ge=1, description="Exact bundle size the promo applies to")

    price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        decimal_places=2,
        description="Fixed total price for the bundle",
    )


class PromoUpdate(BaseModel):
    quantity: int | None = Field(None, ge=1)
    price: Decimal | None = Field(None, ge=0, lt=100_000_000, decimal_places=2)


class PromoResponse(BaseModel):
    id: int
    quantity: int
    price: Decimal

    class Config:
        from_attributes = True
