import json

import requests

from pos_app.core.config import settings


GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

RECENT_SALES_LIMIT = 20


class InsightServiceError(Exception):
    pass


def build_insight_prompt(base_price, promos, sales) -> str:
    """Describe the business to the model. ``sales`` is expected newest first."""

    sales_summary = [
        {
            "qty": sale.quantity,
            "price": float(sale.total_price),
            "method": sale.payment_method.value,
            "date": sale.created_at.strftime("%Y-%m-%d"),
        }
        for sale in list(sales)[:RECENT_SALES_LIMIT]
    ]

    promo_text = ", ".join(
        f"{promo.quantity}pcs for {settings.CURRENCY}{promo.price}" for promo in promos
    ) or "none"

    return f"""Analyze this sales data for my "{settings.BUSINESS_NAME}" business.
Current base price: {settings.CURRENCY} {base_price}.
Current promos: {promo_text}.
Recent Sales (JSON): {json.dumps(sales_summary)}.

Please provide:
1. A brief executive summary of performance.
2. Recommendation for new/better promos to increase "Average Order Value".
3. Trend analysis (Cash vs QR).
Keep it professional, concise, and formatted in clean Markdown with bullet points."""


def generate_insight(prompt: str) -> str:
    url = GEMINI_URL.format(model=settings.GEMINI_MODEL)

    payload = {
        "contents": [
            {"parts": [{"text": prompt}]},
        ],
    }

    headers = {
        "x-goog-api-key": settings.GEMINI_API_KEY,
        "Content-Type": "application/json",
    }

    try:
        response = requests.post(
            url,
            json=payload,
            headers=headers,
            timeout=settings.GEMINI_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise InsightServiceError(f"Gemini request failed: {exc}") from exc

    if response.status_code >= 400:
        raise InsightServiceError(f"Gemini request failed: {response.text}")

    try:
        parts = response.json()["candidates"][0]["content"]["parts"]
    except (ValueError, KeyError, IndexError) as exc:
        raise InsightServiceError("Gemini returned an unexpected payload") from exc

    return "".join(part.get("text", "") for part in parts).strip()
