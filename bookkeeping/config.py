"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode secrets such as the Gemini API key in code.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Double-Entry Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = _env_flag("DEBUG", "false")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = _env_flag("LOG_JSON", "false")

    # Ledger engine
    # Largest debit/credit difference still treated as balanced.
    BALANCE_TOLERANCE: Decimal = Decimal(os.getenv("BALANCE_TOLERANCE", "0.001"))
    # Whether an entry whose debits and credits are both zero may be posted.
    ALLOW_ZERO_TOTAL_ENTRIES: bool = _env_flag("ALLOW_ZERO_TOTAL_ENTRIES", "true")
    RETAINED_EARNINGS_ACCOUNT_ID: str = os.getenv(
        "RETAINED_EARNINGS_ACCOUNT_ID", "acc-10"
    )

    # Insights (Gemini)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL_NAME: str = os.getenv("GEMINI_MODEL_NAME", "gemini-1.5-flash")
    INSIGHTS_RECENT_ENTRIES: int = int(os.getenv("INSIGHTS_RECENT_ENTRIES", "5"))


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()
