# =========================================================
# INSIGHTS ROUTER
#
# Sends the current pricing setup and the most recent sales
# to Gemini and returns its Markdown analysis:
# - Executive summary
# - Promo recommendations for average order value
# - Cash vs QR trend
# =========================================================

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from pos_app.database import get_db
from pos_app.core.catalog import get_pricing_config
from pos_app.core.config import settings
from pos_app.core.gemini import (
    RECENT_SALES_LIMIT,
    InsightServiceError,
    build_insight_prompt,
    generate_insight,
)
from pos_app.core.rate_limiter import limiter
from pos_app.models.sales import Sale
from pos_app.schemas.insight import InsightResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.post("", response_model=InsightResponse)
@limiter.limit("5/minute")
def create_insight(
    request: Request,
    db: Session = Depends(get_db),
):
    if not settings.GEMINI_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI insights are not configured",
        )

    config = get_pricing_config(db)

    recent_sales = (
        db.query(Sale)
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .limit(RECENT_SALES_LIMIT)
        .all()
    )

    prompt = build_insight_prompt(config.base_price, config.promos, recent_sales)

    try:
        insight = generate_insight(prompt)
    except InsightServiceError as exc:
        logger.error(f"Insight generation failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error connecting to AI. Please try again later.",
        )

    if not insight:
        insight = "Unable to generate insights at this time."

    return {"model": settings.GEMINI_MODEL, "insight": insight}
