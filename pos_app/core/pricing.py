# =========================================================
# BUNDLE PRICING ENGINE
#
# A promo applies only when the requested quantity equals
# the promo quantity exactly. Promos are never combined,
# repeated or split: 3 pcs with 2pcs + 1pcs rules is charged
# at base price, and so is 8 pcs with a 4pcs rule.
#
# The first matching promo in caller order wins.
# =========================================================

from decimal import Decimal
from typing import Sequence

from pos_app.schemas.quote import PriceQuote


ZERO = Decimal("0")


def format_promo_label(quantity: int) -> str:
    return f"{quantity}pcs Promo"


def quote(quantity: int, base_price: Decimal, promos: Sequence) -> PriceQuote:
    """
    Price ``quantity`` pieces at ``base_price`` against ``promos``.

    ``promos`` is any ordered sequence of objects exposing ``quantity`` and
    ``price``. Inputs are not validated. A promo priced above the standard
    total yields negative savings, which are returned as is.
    """
    if quantity <= 0:
        return PriceQuote(total=ZERO, applied=[], standard_total=ZERO, savings=ZERO)

    standard_total = quantity * Decimal(base_price)

    matched = next((promo for promo in promos if promo.quantity == quantity), None)

    if matched is not None:
        promo_price = Decimal(matched.price)
        return PriceQuote(
            total=promo_price,
            applied=[format_promo_label(matched.quantity)],
            standard_total=standard_total,
            savings=standard_total - promo_price,
        )

    return PriceQuote(
        total=standard_total,
        applied=[],
        standard_total=standard_total,
        savings=ZERO,
    )
