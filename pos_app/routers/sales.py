# =========================================================
# SALES ROUTER
#
# - Creating a sale freezes the quote in effect at that
#   moment (total + applied promos)
# - Sales are never edited, only deleted
# - Resubmitting a request_id returns the original sale
# =========================================================

import logging
from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status, Request
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pos_app.database import get_db
from pos_app.core.catalog import get_pricing_config
from pos_app.core.periods import utc_bounds
from pos_app.core.pricing import quote
from pos_app.core.rate_limiter import limiter
from pos_app.models.sales import PaymentMethod, Sale
from pos_app.schemas.sale import SaleCreate, SaleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sales", tags=["Sales"])

GUEST_CUSTOMER = "Guest Customer"

MAX_SALE_TOTAL = Decimal("100000000")


def _get_sale_or_404(db: Session, sale_id: int) -> Sale:
    sale = db.get(Sale, sale_id)

    if not sale:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Sale not found",
        )

    return sale


def _find_by_request_id(db: Session, request_id: str) -> Sale | None:
    return (
        db.query(Sale)
        .filter(Sale.request_id == request_id)
        .first()
    )


# =========================================================
# CREATE SALE
# =========================================================
@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    db: Session = Depends(get_db),
):
    # ===============================
    # IDEMPOTENCY CHECK (DOUBLE CLICK PROTECTION)
    # ===============================
    if sale_data.request_id:
        existing_sale = _find_by_request_id(db, sale_data.request_id)

        if existing_sale:
            return existing_sale

    config = get_pricing_config(db)
    price = quote(sale_data.quantity, config.base_price, config.promos)

    # total_price is Numeric(10, 2)
    if price.total >= MAX_SALE_TOTAL:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Sale total exceeds the maximum allowed amount",
        )

    customer_name = (sale_data.customer_name or "").strip() or GUEST_CUSTOMER

    try:
        sale = Sale(
            customer_name=customer_name,
            quantity=sale_data.quantity,
            total_price=price.total,
            applied_promos=price.applied,
            payment_method=sale_data.payment_method,
            request_id=sale_data.request_id,
        )
        db.add(sale)
        db.commit()
        db.refresh(sale)

    except IntegrityError:
        db.rollback()

        # Concurrent submit with the same request_id won the insert
        if sale_data.request_id:
            existing_sale = _find_by_request_id(db, sale_data.request_id)
            if existing_sale:
                return existing_sale

        logger.exception("Failed to record sale")
        raise HTTPException(status_code=500, detail="Unable to complete sale")

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to record sale")
        raise HTTPException(status_code=500, detail="Unable to complete sale")

    logger.info(
        f"Sale {sale.id} recorded: {sale.quantity}pcs "
        f"{sale.payment_method.value} total={sale.total_price}"
    )

    return sale


# =========================================================
# LIST SALES
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(
    db: Session = Depends(get_db),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    payment_method: PaymentMethod | None = Query(None),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    query = db.query(Sale)

    if start_date is not None:
        start_dt, _ = utc_bounds(start_date, start_date)
        query = query.filter(Sale.created_at >= start_dt)

    if end_date is not None:
        _, end_dt = utc_bounds(end_date, end_date)
        query = query.filter(Sale.created_at <= end_dt)

    if payment_method is not None:
        query = query.filter(Sale.payment_method == payment_method)

    sales = (
        query
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )

    return sales


@router.get("/recent", response_model=list[SaleResponse])
def recent_sales(
    db: Session = Depends(get_db),
    limit: int = Query(10, ge=1, le=100),
):
    return (
        db.query(Sale)
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .limit(limit)
        .all()
    )


# =========================================================
# GET SINGLE SALE
# =========================================================
@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    db: Session = Depends(get_db),
):
    return _get_sale_or_404(db, sale_id)


# =========================================================
# DELETE SALE
# =========================================================
@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db),
):
    sale = _get_sale_or_404(db, sale_id)

    db.delete(sale)
    db.commit()

    logger.info(f"Sale {sale_id} deleted")

    return None
