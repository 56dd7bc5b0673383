"""
Insights endpoint.

The insights service gets copies of the accounts and the
journal. Whatever happens on the model side, this endpoint
answers 200 with either insights or a placeholder message.
"""

from fastapi import APIRouter, Depends

from bookkeeping.dependencies import engine_lock, get_engine, get_insights_service
from bookkeeping.services.insights_service import InsightsService
from bookkeeping.services.ledger_engine import LedgerEngine
from bookkeeping.schemas.ledger import InsightsResponse

router = APIRouter(prefix="/insights", tags=["Insights"])


@router.get("", response_model=InsightsResponse)
def get_insights(
    engine: LedgerEngine = Depends(get_engine),
    service: InsightsService = Depends(get_insights_service),
):
    with engine_lock:
        accounts = engine.get_accounts()
        ledger = engine.get_ledger()
    return InsightsResponse(text=service.generate(accounts, ledger))
