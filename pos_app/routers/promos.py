# pos_app/routers/promos.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.core.catalog import list_promos, reset_default_promos
from pos_app.models.promos import PromoRule
from pos_app.schemas.promo import (
    PromoCreate,
    PromoUpdate,
    PromoResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/promos",
    tags=["Promos"],
)


def _get_promo_or_404(db: Session, promo_id: int) -> PromoRule:
    promo = db.get(PromoRule, promo_id)

    if not promo:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Promo not found",
        )

    return promo


@router.get("", response_model=list[PromoResponse])
def read_promos(db: Session = Depends(get_db)):
    return list_promos(db)


@router.post(
    "",
    response_model=PromoResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_promo(
    promo_data: PromoCreate,
    db: Session = Depends(get_db),
):
    # Duplicate quantities are allowed; the oldest rule wins at pricing time
    promo = PromoRule(
        quantity=promo_data.quantity,
        price=promo_data.price,
    )

    db.add(promo)
    db.commit()
    db.refresh(promo)

    logger.info(f"Promo {promo.id} created: {promo.quantity}pcs for {promo.price}")

    return promo


@router.post("/reset", response_model=list[PromoResponse])
def reset_promos(db: Session = Depends(get_db)):
    return reset_default_promos(db)


@router.put("/{promo_id}", response_model=PromoResponse)
def update_promo(
    promo_id: int,
    promo_data: PromoUpdate,
    db: Session = Depends(get_db),
):
    promo = _get_promo_or_404(db, promo_id)

    if promo_data.quantity is not None:
        promo.quantity = promo_data.quantity

    if promo_data.price is not None:
        promo.price = promo_data.price

    db.commit()
    db.refresh(promo)

    logger.info(f"Promo {promo.id} updated: {promo.quantity}pcs for {promo.price}")

    return promo


@router.delete("/{promo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_promo(
    promo_id: int,
    db: Session = Depends(get_db),
):
    promo = _get_promo_or_404(db, promo_id)

    db.delete(promo)
    db.commit()

    logger.info(f"Promo {promo_id} deleted")

    return None
