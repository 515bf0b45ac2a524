import csv
import logging
from datetime import date, datetime, timezone
from io import BytesIO, StringIO
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import StreamingResponse
from openpyxl import Workbook
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.core.config import settings
from pos_app.core.periods import local_tz, parse_day, parse_month, sales_between
from pos_app.core.rate_limiter import limiter
from pos_app.core.stats import average_order_value, summarize
from pos_app.models.sales import Sale

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exports", tags=["Exports"])


def _load_sales(db: Session, start_date: date, end_date: date) -> list[Sale]:
    sales = sales_between(db, start_date, end_date)

    if not sales:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No data found for the selected period.",
        )

    return sales


def _timestamp(sale: Sale) -> str:
    created_at = sale.created_at

    # Stored as UTC; some drivers return it naive
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return created_at.astimezone(local_tz()).strftime("%Y-%m-%d %H:%M:%S")


# =========================================================
# EXPORT ROUTES
# =========================================================

@router.get("/daily.csv")
@limiter.limit("10/minute")
def export_daily_csv(
    request: Request,
    day: str | None = Query(None, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_day(day)
    sales = _load_sales(db, start_date, end_date)
    return _build_csv(sales, f"Daily_Report_{start_date}.csv")


@router.get("/monthly.csv")
@limiter.limit("10/minute")
def export_monthly_csv(
    request: Request,
    month: str | None = Query(None, description="YYYY-MM, defaults to this month"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_month(month)
    sales = _load_sales(db, start_date, end_date)
    return _build_csv(sales, f"Monthly_Report_{start_date:%Y-%m}.csv")


@router.get("/daily.xlsx")
@limiter.limit("5/minute")
def export_daily_excel(
    request: Request,
    day: str | None = Query(None, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_day(day)
    sales = _load_sales(db, start_date, end_date)
    return _build_excel(sales, start_date, end_date, f"Daily_Report_{start_date}.xlsx")


@router.get("/monthly.xlsx")
@limiter.limit("5/minute")
def export_monthly_excel(
    request: Request,
    month: str | None = Query(None, description="YYYY-MM, defaults to this month"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_month(month)
    sales = _load_sales(db, start_date, end_date)
    return _build_excel(sales, start_date, end_date, f"Monthly_Report_{start_date:%Y-%m}.xlsx")


@router.get("/daily.pdf")
@limiter.limit("5/minute")
def export_daily_pdf(
    request: Request,
    day: str | None = Query(None, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_day(day)
    sales = _load_sales(db, start_date, end_date)
    return _build_pdf(
        sales,
        f"Daily Sales Report: {start_date}",
        f"Daily_Report_{start_date}.pdf",
    )


@router.get("/monthly.pdf")
@limiter.limit("5/minute")
def export_monthly_pdf(
    request: Request,
    month: str | None = Query(None, description="YYYY-MM, defaults to this month"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_month(month)
    sales = _load_sales(db, start_date, end_date)
    return _build_pdf(
        sales,
        f"Monthly Sales Report: {start_date:%Y-%m}",
        f"Monthly_Report_{start_date:%Y-%m}.pdf",
    )


# =========================================================
# CSV BUILDER
# =========================================================
def _build_csv(sales: list[Sale], filename: str):
    output = StringIO()
    writer = csv.writer(output, lineterminator="\n")

    writer.writerow([
        "ID",
        "Timestamp",
        "Customer Name",
        "Quantity",
        f"Total Price ({settings.CURRENCY})",
        "Payment Method",
        "Promos",
    ])

    for sale in sales:
        writer.writerow([
            sale.id,
            _timestamp(sale),
            sale.customer_name,
            sale.quantity,
            f"{sale.total_price:.2f}",
            sale.payment_method.value,
            "; ".join(sale.applied_promos or []),
        ])

    logger.info(f"CSV export {filename} generated with {len(sales)} sales")

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# =========================================================
# EXCEL BUILDER
# =========================================================
def _build_excel(
    sales: list[Sale],
    start_date: date,
    end_date: date,
    filename: str,
):

    workbook = Workbook()

    # =======================
    # SHEET 1 - RAW SALES
    # =======================
    sheet = workbook.active
    sheet.title = "Sales Data"

    sheet.append([
        "Date",
        "Sale ID",
        "Customer",
        "Quantity",
        "Payment",
        "Promos",
        f"Total ({settings.CURRENCY})",
    ])

    for sale in sales:
        sheet.append([
            _timestamp(sale),
            sale.id,
            sale.customer_name,
            sale.quantity,
            sale.payment_method.value,
            "; ".join(sale.applied_promos or []),
            float(sale.total_price),
        ])

    # =======================
    # SHEET 2 - BUSINESS SUMMARY
    # =======================
    stats = summarize(sales)

    summary = workbook.create_sheet(title="Business Summary")

    summary.append(["Period", f"{start_date} to {end_date}"])
    summary.append([])
    summary.append(["Total Orders", stats.total_orders])
    summary.append(["Total Pcs Sold", stats.total_quantity])
    summary.append([f"Total Revenue ({settings.CURRENCY})", float(stats.total_revenue)])
    summary.append([f"Cash Sales ({settings.CURRENCY})", float(stats.cash_revenue)])
    summary.append([f"QR Sales ({settings.CURRENCY})", float(stats.qr_revenue)])
    summary.append([
        f"Average Order Value ({settings.CURRENCY})",
        float(average_order_value(stats)),
    ])

    # =======================
    # RETURN FILE
    # =======================
    output = BytesIO()
    workbook.save(output)
    output.seek(0)

    logger.info(f"Excel export {filename} generated with {len(sales)} sales")

    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


# =========================================================
# PDF BUILDER
# =========================================================
TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 10),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 12),
        ("BACKGROUND", (0, 1), (-1, -1), colors.beige),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("GRID", (0, 0), (-1, -1), 1, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
)


def _build_pdf(sales: list[Sale], title: str, filename: str):
    """
    Render a printable report: business summary on top, then one row per sale.
    """
    output = BytesIO()
    doc = SimpleDocTemplate(output, pagesize=A4, title=title)
    styles = getSampleStyleSheet()
    currency = settings.CURRENCY

    story = [
        Paragraph(escape(settings.BUSINESS_NAME), styles["Title"]),
        Paragraph(escape(title), styles["Heading2"]),
        Spacer(1, 12),
    ]

    stats = summarize(sales)

    summary = Table([
        [f"Total Revenue ({currency})", "Total Pcs", "Total Orders"],
        [f"{stats.total_revenue:.2f}", str(stats.total_quantity), str(stats.total_orders)],
    ])
    summary.setStyle(TABLE_STYLE)
    story.append(summary)
    story.append(Spacer(1, 18))

    rows = [["Date", "Customer", "Qty", "Payment", f"Total ({currency})"]]
    for sale in sales:
        rows.append([
            _timestamp(sale),
            sale.customer_name,
            str(sale.quantity),
            sale.payment_method.value,
            f"{sale.total_price:.2f}",
        ])

    table = Table(rows, repeatRows=1)
    table.setStyle(TABLE_STYLE)
    story.append(table)

    story.append(Spacer(1, 12))
    generated = datetime.now(local_tz()).strftime("%Y-%m-%d %H:%M:%S")
    story.append(Paragraph(f"Generated on: {generated}", styles["Normal"]))

    doc.build(story)
    output.seek(0)

    logger.info(f"PDF export {filename} generated with {len(sales)} sales")

    return StreamingResponse(
        output,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
