"""
FastAPI dependencies.

The application runs one LedgerEngine for its lifetime. FastAPI
runs sync endpoints on a thread pool, so every route that touches
the engine holds engine_lock for the whole call. Tests replace
get_engine through app.dependency_overrides.
"""

import threading
from functools import lru_cache

from bookkeeping.chart_of_accounts import default_chart
from bookkeeping.config import get_settings
from bookkeeping.services.insights_service import InsightsService
from bookkeeping.services.ledger_engine import LedgerEngine

engine_lock = threading.Lock()


@lru_cache()
def get_engine() -> LedgerEngine:
    """Build the application's engine over the default chart of accounts."""
    settings = get_settings()
    return LedgerEngine(
        default_chart(),
        balance_tolerance=settings.BALANCE_TOLERANCE,
        allow_zero_total=settings.ALLOW_ZERO_TOTAL_ENTRIES,
    )


@lru_cache()
def get_insights_service() -> InsightsService:
    return InsightsService(get_settings())
