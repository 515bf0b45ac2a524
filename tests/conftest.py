from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pos_app.core.rate_limiter import limiter
from pos_app.database import Base, get_db
from pos_app.main import app
from pos_app.models.promos import PromoRule
from pos_app.models.sales import PaymentMethod, Sale


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    limiter.enabled = False

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def default_promos(db_session):
    promos = [
        PromoRule(quantity=2, price=Decimal("5.00")),
        PromoRule(quantity=4, price=Decimal("10.00")),
    ]
    db_session.add_all(promos)
    db_session.commit()
    return promos


@pytest.fixture
def add_sale(db_session):
    """Insert a sale row directly, bypassing pricing, at a chosen instant."""

    def _add(
        total_price,
        quantity=1,
        payment_method=PaymentMethod.CASH,
        created_at=None,
        customer_name="Guest Customer",
        applied_promos=None,
        request_id=None,
    ):
        sale = Sale(
            customer_name=customer_name,
            quantity=quantity,
            total_price=Decimal(str(total_price)),
            applied_promos=applied_promos or [],
            payment_method=payment_method,
            created_at=created_at or datetime.now(timezone.utc),
            request_id=request_id,
        )
        db_session.add(sale)
        db_session.commit()
        db_session.refresh(sale)
        return sale

    return _add
