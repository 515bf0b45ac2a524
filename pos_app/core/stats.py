# =========================================================
# SALES STATISTICS
#
# Pure reductions over sale records. Records are duck-typed:
# anything with quantity, total_price, payment_method and
# created_at works (ORM rows, response schemas, test doubles).
# =========================================================

from collections import defaultdict
from datetime import datetime, timedelta, timezone, tzinfo
from decimal import Decimal
from typing import Iterable, List

from pos_app.models.sales import PaymentMethod
from pos_app.schemas.report import BusinessStats, DailyRevenue


def summarize(sales: Iterable) -> BusinessStats:
    total_revenue = Decimal("0")
    cash_revenue = Decimal("0")
    qr_revenue = Decimal("0")
    total_quantity = 0
    total_orders = 0

    for sale in sales:
        amount = Decimal(sale.total_price)

        total_orders += 1
        total_quantity += sale.quantity
        total_revenue += amount

        if sale.payment_method == PaymentMethod.CASH:
            cash_revenue += amount
        elif sale.payment_method == PaymentMethod.QR:
            qr_revenue += amount

    return BusinessStats(
        total_revenue=total_revenue,
        total_quantity=total_quantity,
        total_orders=total_orders,
        cash_revenue=cash_revenue,
        qr_revenue=qr_revenue,
    )


def average_order_value(stats: BusinessStats) -> Decimal:
    if stats.total_orders == 0:
        return Decimal("0.00")

    return (stats.total_revenue / stats.total_orders).quantize(Decimal("0.01"))


def _local(moment: datetime, tz: tzinfo | None) -> datetime:
    # SQLite hands timestamps back naive; they were stored as UTC
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    return moment.astimezone(tz)


def _day_label(moment: datetime) -> str:
    return moment.strftime("%a")


def daily_revenue(
    sales: Iterable,
    window_days: int = 7,
    reference: datetime | None = None,
) -> List[DailyRevenue]:
    """
    Revenue per day for the ``window_days`` days ending on ``reference``'s
    day, oldest first. Every day of the window is present.

    Sales are bucketed by weekday label ("Mon", "Tue", ...) in the reference
    timezone, not by calendar date. Sales from an earlier week therefore land
    in the bucket of the same weekday, and windows longer than seven days show
    the merged bucket under every repeated label.
    """
    if reference is None:
        reference = datetime.now(timezone.utc).astimezone()

    tz = reference.tzinfo

    buckets = defaultdict(Decimal)
    for sale in sales:
        buckets[_day_label(_local(sale.created_at, tz))] += Decimal(sale.total_price)

    series = []
    for offset in range(window_days - 1, -1, -1):
        label = _day_label(reference - timedelta(days=offset))
        series.append(DailyRevenue(label=label, revenue=buckets.get(label, Decimal("0"))))

    return series
