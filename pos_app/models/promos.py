# pos_app/models/promos.py

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric
from sqlalchemy.sql import func

from pos_app.database import Base


class PromoRule(Base):
    __tablename__ = "promo_rules"

    # Ascending id is the matching order used by the pricing engine
    id = Column(Integer, primary_key=True, index=True)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_promo_quantity_positive"),
        CheckConstraint("price >= 0", name="ck_promo_price_non_negative"),
    )
