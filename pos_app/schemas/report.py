# schemas/report.py

from pydantic import BaseModel
from datetime import date
from decimal import Decimal


class BusinessStats(BaseModel):
    total_revenue: Decimal = Decimal("0")
    total_quantity: int = 0
    total_orders: int = 0
    cash_revenue: Decimal = Decimal("0")
    qr_revenue: Decimal = Decimal("0")


class DailyRevenue(BaseModel):
    label: str
    revenue: Decimal


class PeriodReportResponse(BaseModel):
    start_date: date
    end_date: date
    stats: BusinessStats
    average_order_value: Decimal
