"""API tests for dashboard summaries and period reports."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from pos_app.models.sales import PaymentMethod


def test_summary_empty(client):
    stats = client.get("/reports/summary").json()

    assert stats["total_orders"] == 0
    assert stats["total_quantity"] == 0
    assert Decimal(stats["total_revenue"]) == 0
    assert Decimal(stats["cash_revenue"]) == 0
    assert Decimal(stats["qr_revenue"]) == 0


def test_summary_splits_payment_methods(client, add_sale):
    add_sale(5, quantity=2)
    add_sale(7, quantity=3, payment_method=PaymentMethod.QR)
    add_sale(10, quantity=4, created_at=datetime.now(timezone.utc) - timedelta(days=40))

    stats = client.get("/reports/summary").json()

    assert stats["total_orders"] == 3
    assert stats["total_quantity"] == 9
    assert Decimal(stats["total_revenue"]) == Decimal("22")
    assert Decimal(stats["cash_revenue"]) == Decimal("15")
    assert Decimal(stats["qr_revenue"]) == Decimal("7")


def test_daily_revenue_series(client, add_sale):
    add_sale(5)
    add_sale(7)

    series = client.get("/reports/daily-revenue").json()

    assert len(series) == 7
    assert series[-1]["label"] == datetime.now(timezone.utc).strftime("%a")
    assert Decimal(series[-1]["revenue"]) == Decimal("12")


def test_daily_revenue_window_bounds(client):
    assert len(client.get("/reports/daily-revenue", params={"window_days": 3}).json()) == 3
    assert client.get("/reports/daily-revenue", params={"window_days": 0}).status_code == 422
    assert client.get("/reports/daily-revenue", params={"window_days": 32}).status_code == 422


def test_daily_report_for_given_day(client, add_sale):
    day = datetime(2026, 3, 14, 10, 0, tzinfo=timezone.utc)
    add_sale(5, quantity=2, created_at=day)
    add_sale(10, quantity=4, payment_method=PaymentMethod.QR, created_at=day + timedelta(hours=5))
    add_sale(3, created_at=day + timedelta(days=1))

    report = client.get("/reports/daily", params={"day": "2026-03-14"}).json()

    assert report["start_date"] == "2026-03-14"
    assert report["end_date"] == "2026-03-14"
    assert report["stats"]["total_orders"] == 2
    assert report["stats"]["total_quantity"] == 6
    assert Decimal(report["stats"]["total_revenue"]) == Decimal("15")
    assert Decimal(report["average_order_value"]) == Decimal("7.50")


def test_monthly_report(client, add_sale):
    add_sale(5, created_at=datetime(2026, 2, 1, 0, 0, 1, tzinfo=timezone.utc))
    add_sale(9, created_at=datetime(2026, 2, 28, 23, 59, tzinfo=timezone.utc))
    add_sale(100, created_at=datetime(2026, 3, 1, 0, 0, 1, tzinfo=timezone.utc))

    report = client.get("/reports/monthly", params={"month": "2026-02"}).json()

    assert report["start_date"] == "2026-02-01"
    assert report["end_date"] == "2026-02-28"
    assert report["stats"]["total_orders"] == 2
    assert Decimal(report["stats"]["total_revenue"]) == Decimal("14")


def test_empty_period_report(client):
    report = client.get("/reports/daily", params={"day": "2025-01-01"}).json()

    assert report["stats"]["total_orders"] == 0
    assert Decimal(report["average_order_value"]) == 0


def test_bad_period_strings(client):
    assert client.get("/reports/daily", params={"day": "14/03/2026"}).status_code == 400
    assert client.get("/reports/monthly", params={"month": "2026-13"}).status_code == 400
