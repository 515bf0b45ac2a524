# pos_app/models/customers.py

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from pos_app.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(String(255), nullable=True)
    total_purchases = Column(Integer, nullable=False, default=0)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("total_purchases >= 0", name="ck_customer_purchases_non_negative"),
    )
