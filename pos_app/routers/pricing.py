# pos_app/routers/pricing.py

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.core.catalog import get_pricing_config
from pos_app.core.pricing import quote
from pos_app.schemas.quote import PriceQuote, PricingConfig

router = APIRouter(
    prefix="/pricing",
    tags=["Pricing"],
)


@router.get("/config", response_model=PricingConfig)
def pricing_config(db: Session = Depends(get_db)):
    return get_pricing_config(db)


@router.get("/quote", response_model=PriceQuote)
def price_quote(
    quantity: int = Query(..., description="Pieces requested; zero or less yields an empty quote"),
    db: Session = Depends(get_db),
):
    config = get_pricing_config(db)

    return quote(quantity, config.base_price, config.promos)
