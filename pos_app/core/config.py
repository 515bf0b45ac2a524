# pos_app/core/config.py

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./pos.db"

    # Business
    BUSINESS_NAME: str = "Kacang Parpu"
    CURRENCY: str = "RM"
    DEFAULT_BASE_PRICE: Decimal = Decimal("3.00")

    # Reports group sales by calendar day in this timezone
    TIMEZONE: str = "UTC"

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True

    # AI insights (Gemini)
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TIMEOUT_SECONDS: float = 30.0



    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
