# pos_app/routers/customers.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.models.customers import Customer
from pos_app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
)

EDITABLE_FIELDS = ("name", "email", "phone", "address", "total_purchases")


def _get_customer_or_404(db: Session, customer_id: int) -> Customer:
    customer = db.get(Customer, customer_id)

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Customer not found",
        )

    return customer


@router.get("", response_model=list[CustomerResponse])
def read_customers(db: Session = Depends(get_db)):
    return db.query(Customer).order_by(Customer.name.asc(), Customer.id.asc()).all()


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_customer(
    customer_data: CustomerCreate,
    db: Session = Depends(get_db),
):
    customer = Customer(
        name=customer_data.name.strip(),
        email=customer_data.email,
        phone=customer_data.phone,
        address=customer_data.address,
        total_purchases=customer_data.total_purchases,
    )

    db.add(customer)
    db.commit()
    db.refresh(customer)

    logger.info(f"Customer {customer.id} created: {customer.name}")

    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def read_customer(
    customer_id: int,
    db: Session = Depends(get_db),
):
    return _get_customer_or_404(db, customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
):
    customer = _get_customer_or_404(db, customer_id)

    # Omitted fields keep their stored value
    for field in EDITABLE_FIELDS:
        value = getattr(customer_data, field)
        if value is not None:
            setattr(customer, field, value)

    db.commit()
    db.refresh(customer)

    logger.info(f"Customer {customer.id} updated")

    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
):
    customer = _get_customer_or_404(db, customer_id)

    db.delete(customer)
    db.commit()

    logger.info(f"Customer {customer_id} deleted")

    return None
