# models/sales.py

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Index,
    Integer,
    Numeric,
    String,
)

from pos_app.database import Base


class PaymentMethod(str, enum.Enum):
    CASH = "CASH"
    QR = "QR"


def _utcnow():
    return datetime.now(timezone.utc)


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_name = Column(String, nullable=False, default="Guest Customer")

    quantity = Column(Integer, nullable=False)

    # Frozen quote: never recomputed after the sale is recorded
    total_price = Column(Numeric(10, 2), nullable=False)
    applied_promos = Column(JSON, nullable=False, default=list)

    payment_method = Column(
        Enum(PaymentMethod, name="payment_method"),
        nullable=False,
        index=True,
    )

    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True,
    )

    request_id = Column(String, nullable=True, unique=True)

    __table_args__ = (
        Index("ix_sales_payment_created", "payment_method", "created_at"),
        CheckConstraint("quantity > 0", name="ck_sale_quantity_positive"),
        CheckConstraint("total_price >= 0", name="ck_sale_total_non_negative"),
    )
