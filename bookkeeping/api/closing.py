"""
Period closing endpoints.
"""

from fastapi import APIRouter, Depends, Response

from bookkeeping.api.errors import raise_for_result
from bookkeeping.config import get_settings
from bookkeeping.dependencies import engine_lock, get_engine
from bookkeeping.services.closing_service import ClosingService
from bookkeeping.services.ledger_engine import LedgerEngine
from bookkeeping.schemas.ledger import JournalEntryResponse

router = APIRouter(prefix="/closing", tags=["Closing"])


def get_closing_service(
    engine: LedgerEngine = Depends(get_engine),
) -> ClosingService:
    return ClosingService(engine, get_settings().RETAINED_EARNINGS_ACCOUNT_ID)


@router.post("", response_model=JournalEntryResponse, status_code=201)
def close_period(service: ClosingService = Depends(get_closing_service)):
    """Close revenue and expense balances into retained earnings."""
    with engine_lock:
        result = service.close_period()
        raise_for_result(result)
        return service.engine.get_entry(result.entry_id)


@router.delete("", status_code=204)
def reopen_period(service: ClosingService = Depends(get_closing_service)):
    """Reverse the most recent closing entry."""
    with engine_lock:
        result = service.reopen_period()
    raise_for_result(result)
    return Response(status_code=204)
