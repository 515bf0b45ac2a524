# =========================================================
# REPORTING PERIOD HELPERS
# Shared by reports and exports: turn "YYYY-MM-DD" /
# "YYYY-MM" into date ranges and load the sales inside them
# =========================================================

from calendar import monthrange
from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from pos_app.core.config import settings
from pos_app.models.sales import Sale


def local_tz() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def local_now() -> datetime:
    return datetime.now(local_tz())


def parse_day(day: str | None) -> tuple[date, date]:
    if day is None:
        today = local_now().date()
        return today, today

    try:
        parsed = date.fromisoformat(day)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Day must be formatted as YYYY-MM-DD",
        )

    return parsed, parsed


def parse_month(month: str | None) -> tuple[date, date]:
    if month is None:
        month = local_now().strftime("%Y-%m")

    try:
        parsed = datetime.strptime(month, "%Y-%m")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Month must be formatted as YYYY-MM",
        )

    last_day = monthrange(parsed.year, parsed.month)[1]

    return date(parsed.year, parsed.month, 1), date(parsed.year, parsed.month, last_day)


def utc_bounds(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    tz = local_tz()

    start_dt = datetime.combine(start_date, time.min, tzinfo=tz)
    end_dt = datetime.combine(end_date, time.max, tzinfo=tz)

    return start_dt.astimezone(timezone.utc), end_dt.astimezone(timezone.utc)


def sales_between(db: Session, start_date: date, end_date: date) -> list[Sale]:
    start_dt, end_dt = utc_bounds(start_date, end_date)

    return (
        db.query(Sale)
        .filter(Sale.created_at.between(start_dt, end_dt))
        .order_by(Sale.created_at.desc())
        .all()
    )
