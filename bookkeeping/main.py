"""
Double-Entry Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bookkeeping.config import get_settings
from bookkeeping.logging_config import configure_logging
from bookkeeping.api.health import router as health_router
from bookkeeping.api.ledger import router as ledger_router
from bookkeeping.api.reports import router as reports_router
from bookkeeping.api.closing import router as closing_router
from bookkeeping.api.insights import router as insights_router

settings = get_settings()

configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="An in-memory double-entry bookkeeping ledger",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(ledger_router)
app.include_router(reports_router)
app.include_router(closing_router)
app.include_router(insights_router)
