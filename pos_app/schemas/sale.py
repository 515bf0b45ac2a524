# schemas/sale.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List
from decimal import Decimal

from pos_app.models.sales import PaymentMethod

MAX_SALE_QUANTITY = 10_000


class SaleCreate(BaseModel):
    quantity: int = Field(..., gt=0, le=MAX_SALE_QUANTITY, description="Pieces purchased")
    payment_method: PaymentMethod
    customer_name: str | None = Field(None, max_length=120)
    request_id: str | None = Field(
        None,
        max_length=64,
        description="Client-generated key; resubmitting it returns the original sale",
    )


class SaleResponse(BaseModel):
    id: int
    customer_name: str
    quantity: int
    total_price: Decimal
    payment_method: PaymentMethod
    applied_promos: List[str]
    created_at: datetime

    class Config:
        from_attributes = True
