"""API tests for CSV, Excel and PDF exports."""

import csv
from datetime import datetime, timedelta, timezone
from io import BytesIO, StringIO

from openpyxl import load_workbook

from pos_app.models.sales import PaymentMethod

DAY = datetime(2026, 5, 4, 9, 30, tzinfo=timezone.utc)


def test_daily_csv(client, add_sale):
    add_sale(
        5,
        quantity=2,
        created_at=DAY,
        customer_name='Siti "Kak" Ali, Jr',
        applied_promos=["2pcs Promo"],
    )
    add_sale(3, created_at=DAY + timedelta(days=1))

    response = client.get("/exports/daily.csv", params={"day": "2026-05-04"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="Daily_Report_2026-05-04.csv"' in response.headers["content-disposition"]

    rows = list(csv.reader(StringIO(response.text)))
    assert rows[0] == [
        "ID",
        "Timestamp",
        "Customer Name",
        "Quantity",
        "Total Price (RM)",
        "Payment Method",
        "Promos",
    ]
    assert len(rows) == 2
    assert rows[1][1] == "2026-05-04 09:30:00"
    assert rows[1][2] == 'Siti "Kak" Ali, Jr'
    assert rows[1][3:] == ["2", "5.00", "CASH", "2pcs Promo"]


def test_monthly_csv(client, add_sale):
    add_sale(5, created_at=DAY)
    add_sale(7, payment_method=PaymentMethod.QR, created_at=DAY + timedelta(days=3))
    add_sale(9, created_at=datetime(2026, 6, 1, 1, 0, tzinfo=timezone.utc))

    response = client.get("/exports/monthly.csv", params={"month": "2026-05"})

    assert response.status_code == 200
    assert 'filename="Monthly_Report_2026-05.csv"' in response.headers["content-disposition"]
    rows = list(csv.reader(StringIO(response.text)))
    assert len(rows) == 3


def test_export_without_sales_returns_404(client):
    for url, params in [
        ("/exports/daily.csv", {"day": "2026-05-04"}),
        ("/exports/monthly.csv", {"month": "2026-05"}),
        ("/exports/daily.xlsx", {"day": "2026-05-04"}),
        ("/exports/monthly.xlsx", {"month": "2026-05"}),
        ("/exports/daily.pdf", {"day": "2026-05-04"}),
        ("/exports/monthly.pdf", {"month": "2026-05"}),
    ]:
        response = client.get(url, params=params)

        assert response.status_code == 404
        assert response.json()["detail"] == "No data found for the selected period."


def test_daily_excel(client, add_sale):
    add_sale(5, quantity=2, created_at=DAY, applied_promos=["2pcs Promo"])
    add_sale(10, quantity=4, payment_method=PaymentMethod.QR, created_at=DAY + timedelta(hours=2))

    response = client.get("/exports/daily.xlsx", params={"day": "2026-05-04"})

    assert response.status_code == 200
    workbook = load_workbook(BytesIO(response.content))
    assert workbook.sheetnames == ["Sales Data", "Business Summary"]

    sales_sheet = workbook["Sales Data"]
    assert sales_sheet.max_row == 3

    summary = {row[0]: row[1] for row in workbook["Business Summary"].iter_rows(values_only=True)}
    assert summary["Period"] == "2026-05-04 to 2026-05-04"
    assert summary["Total Orders"] == 2
    assert summary["Total Pcs Sold"] == 6
    assert summary["Total Revenue (RM)"] == 15
    assert summary["Cash Sales (RM)"] == 5
    assert summary["QR Sales (RM)"] == 10
    assert summary["Average Order Value (RM)"] == 7.5


def test_bad_export_period(client):
    assert client.get("/exports/monthly.xlsx", params={"month": "May 2026"}).status_code == 400
    assert client.get("/exports/daily.pdf", params={"day": "04/05/2026"}).status_code == 400


def test_daily_pdf(client, add_sale):
    add_sale(5, quantity=2, created_at=DAY, customer_name="Aminah <Kedai> & Co")
    add_sale(3, payment_method=PaymentMethod.QR, created_at=DAY + timedelta(hours=2))

    response = client.get("/exports/daily.pdf", params={"day": "2026-05-04"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="Daily_Report_2026-05-04.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")
    assert response.content.rstrip().endswith(b"%%EOF")


def test_monthly_pdf(client, add_sale):
    add_sale(5, created_at=DAY)
    add_sale(7, created_at=DAY + timedelta(days=10))

    response = client.get("/exports/monthly.pdf", params={"month": "2026-05"})

    assert response.status_code == 200
    assert 'filename="Monthly_Report_2026-05.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")
