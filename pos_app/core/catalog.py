# =========================================================
# PRICING CATALOG HELPER
# Reads and writes the base price and promo rules that feed
# the pricing engine
# =========================================================

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from pos_app.core.config import settings
from pos_app.models.app_settings import AppSetting
from pos_app.models.promos import PromoRule
from pos_app.schemas.promo import PromoResponse
from pos_app.schemas.quote import PricingConfig

logger = logging.getLogger(__name__)

BASE_PRICE_KEY = "base_price"

DEFAULT_PROMOS = [
    (2, Decimal("5.00")),
    (4, Decimal("10.00")),
]


def get_base_price(db: Session) -> Decimal:
    setting = db.get(AppSetting, BASE_PRICE_KEY)

    if setting is None:
        return settings.DEFAULT_BASE_PRICE

    return Decimal(setting.value)


def set_base_price(db: Session, base_price: Decimal) -> Decimal:
    setting = db.get(AppSetting, BASE_PRICE_KEY)

    if setting is None:
        setting = AppSetting(key=BASE_PRICE_KEY, value=str(base_price))
        db.add(setting)
    else:
        setting.value = str(base_price)

    db.commit()
    logger.info(f"Base price set to {base_price}")

    return Decimal(setting.value)


def list_promos(db: Session):
    return db.query(PromoRule).order_by(PromoRule.id.asc()).all()


def reset_default_promos(db: Session):
    db.query(PromoRule).delete()
    db.add_all(
        PromoRule(quantity=quantity, price=price)
        for quantity, price in DEFAULT_PROMOS
    )
    db.commit()
    logger.info("Promo rules reset to defaults")

    return list_promos(db)


def get_pricing_config(db: Session) -> PricingConfig:
    return PricingConfig(
        base_price=get_base_price(db),
        promos=[PromoResponse.model_validate(promo) for promo in list_promos(db)],
    )
