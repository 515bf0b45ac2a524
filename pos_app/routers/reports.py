# =========================================================
# REPORTS ROUTER
#
# - Summary over all recorded sales (dashboard cards)
# - Daily revenue series for the dashboard chart
# - Daily / monthly period reports
#
# Schema-safe: money is always Decimal (never None)
# =========================================================

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date

from pos_app.database import get_db
from pos_app.core.periods import local_now, parse_day, parse_month, sales_between
from pos_app.core.stats import average_order_value, daily_revenue, summarize
from pos_app.models.sales import Sale
from pos_app.schemas.report import (
    BusinessStats,
    DailyRevenue,
    PeriodReportResponse,
)

router = APIRouter(prefix="/reports", tags=["Reports"])


# =========================================================
# CORE PERIOD REPORT CALCULATION
# =========================================================
def _calculate_report(db: Session, start_date: date, end_date: date):
    stats = summarize(sales_between(db, start_date, end_date))

    return PeriodReportResponse(
        start_date=start_date,
        end_date=end_date,
        stats=stats,
        average_order_value=average_order_value(stats),
    )


# =========================================================
# SUMMARY (ALL SALES)
# =========================================================
@router.get("/summary", response_model=BusinessStats)
def summary(db: Session = Depends(get_db)):
    return summarize(db.query(Sale).all())


# =========================================================
# DAILY REVENUE CHART
# =========================================================
@router.get("/daily-revenue", response_model=list[DailyRevenue])
def daily_revenue_chart(
    window_days: int = Query(7, ge=1, le=31),
    db: Session = Depends(get_db),
):
    return daily_revenue(
        db.query(Sale).all(),
        window_days=window_days,
        reference=local_now(),
    )


# =========================================================
# DAILY REPORT
# =========================================================
@router.get("/daily", response_model=PeriodReportResponse)
def daily_report(
    day: str | None = Query(None, description="YYYY-MM-DD, defaults to today"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_day(day)

    return _calculate_report(db, start_date, end_date)


# =========================================================
# MONTHLY REPORT
# =========================================================
@router.get("/monthly", response_model=PeriodReportResponse)
def monthly_report(
    month: str | None = Query(None, description="YYYY-MM, defaults to this month"),
    db: Session = Depends(get_db),
):
    start_date, end_date = parse_month(month)

    return _calculate_report(db, start_date, end_date)
