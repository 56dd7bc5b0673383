"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from bookkeeping.dependencies import engine_lock, get_engine
from bookkeeping.services.ledger_engine import LedgerEngine

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(engine: LedgerEngine = Depends(get_engine)):
    """
    Return application health status including engine state.

    The engine check confirms the ledger is reachable and
    reports how many accounts and entries it holds.
    """
    with engine_lock:
        account_count = len(engine.get_accounts())
        entry_count = len(engine.get_ledger())

    return {
        "status": "healthy",
        "service": "double-entry-ledger",
        "accounts": account_count,
        "entries": entry_count,
    }
