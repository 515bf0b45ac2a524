# pos_app/main.py
#
# Application factory. Uvicorn entry point: pos_app.main:app

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from pos_app.core.config import settings
from pos_app.core.rate_limiter import limiter
from pos_app.routers import (
    customers,
    exports,
    insights,
    pricing,
    promos,
    reports,
    sales,
    settings as settings_router,
)

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

logger = logging.getLogger("pos_app")

ROUTERS = (
    pricing.router,
    settings_router.router,
    promos.router,
    sales.router,
    customers.router,
    reports.router,
    exports.router,
    insights.router,
)


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        "%s %s -> %s (%.2fms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def create_app() -> FastAPI:
    application = FastAPI(
        title="Simple POS API",
        description="Point-of-sale backend with bundle pricing, sales history and reports",
        version="1.0.0",
        debug=settings.DEBUG,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )
    application.middleware("http")(log_requests)

    # slowapi looks the limiter up on app.state
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    for router in ROUTERS:
        application.include_router(router)

    @application.get("/", tags=["Health"])
    def root():
        return {
            "message": "Simple POS API is running",
            "business": settings.BUSINESS_NAME,
        }

    return application


app = create_app()
