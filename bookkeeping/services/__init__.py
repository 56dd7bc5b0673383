"""Business logic services."""

from bookkeeping.services.ledger_engine import LedgerEngine
from bookkeeping.services.report_service import ReportService
from bookkeeping.services.closing_service import ClosingService
from bookkeeping.services.insights_service import InsightsService

__all__ = ["LedgerEngine", "ReportService", "ClosingService", "InsightsService"]
