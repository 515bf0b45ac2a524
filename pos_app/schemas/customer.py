from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120, description="Customer's display name")
    email: EmailStr | None = Field(None, description="Optional contact email")
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)
    total_purchases: int = Field(0, ge=0, description="Number of purchases made so far")


class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=32)
    address: str | None = Field(None, max_length=255)
    total_purchases: int | None = Field(None, ge=0)


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: EmailStr | None
    phone: str | None
    address: str | None
    total_purchases: int
    created_at: datetime

    class Config:
        from_attributes = True
