# pos_app/routers/settings.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.core.catalog import get_base_price, set_base_price
from pos_app.schemas.settings import BasePriceResponse, BasePriceUpdate

router = APIRouter(
    prefix="/settings",
    tags=["Settings"],
)


@router.get("/base-price", response_model=BasePriceResponse)
def read_base_price(db: Session = Depends(get_db)):
    return {"base_price": get_base_price(db)}


@router.put("/base-price", response_model=BasePriceResponse)
def update_base_price(
    data: BasePriceUpdate,
    db: Session = Depends(get_db),
):
    # Recorded sales keep the price they were quoted at
    return {"base_price": set_base_price(db, data.base_price)}
