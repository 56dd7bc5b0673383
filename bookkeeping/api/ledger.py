"""
Ledger API endpoints.

These endpoints expose the engine operations to HTTP clients.
The API layer is thin — it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
LedgerEngine.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from bookkeeping.api.errors import raise_for_result
from bookkeeping.dependencies import engine_lock, get_engine
from bookkeeping.services.ledger_engine import LedgerEngine
from bookkeeping.schemas.ledger import (
    AccountResponse,
    JournalEntryCreate,
    JournalEntryResponse,
    StatsResponse,
)

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(engine: LedgerEngine = Depends(get_engine)):
    """Return every account in the chart with its current balance."""
    with engine_lock:
        return engine.get_accounts()


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(account_id: str, engine: LedgerEngine = Depends(get_engine)):
    with engine_lock:
        account = engine.get_account(account_id)
    if account is None:
        raise HTTPException(
            status_code=404, detail=f"Account {account_id} not found"
        )
    return account


@router.get("/entries", response_model=list[JournalEntryResponse])
def list_entries(engine: LedgerEngine = Depends(get_engine)):
    """Return the journal, oldest posting first."""
    with engine_lock:
        return engine.get_ledger()


@router.get("/entries/{entry_id}", response_model=JournalEntryResponse)
def get_entry(entry_id: str, engine: LedgerEngine = Depends(get_engine)):
    with engine_lock:
        entry = engine.get_entry(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=404, detail=f"Transaction {entry_id} not found"
        )
    return entry


@router.post("/entries", response_model=JournalEntryResponse, status_code=201)
def post_entry(
    request: JournalEntryCreate,
    engine: LedgerEngine = Depends(get_engine),
):
    """
    Post a balanced journal entry.

    Total debits must equal total credits. Reusing the
    idempotency_key of an entry still in the ledger is
    rejected with 409.
    """
    with engine_lock:
        result = engine.post_transaction(request.to_domain())
        raise_for_result(result)
        return engine.get_entry(result.entry_id)


@router.put("/entries/{entry_id}", response_model=JournalEntryResponse)
def update_entry(
    entry_id: str,
    request: JournalEntryCreate,
    engine: LedgerEngine = Depends(get_engine),
):
    """
    Replace a posted entry with a new one.

    The old entry is deleted first. If the new entry is then
    rejected, the old one is NOT restored.
    """
    with engine_lock:
        result = engine.update_transaction(entry_id, request.to_domain())
        raise_for_result(result)
        return engine.get_entry(result.entry_id)


@router.delete("/entries/{entry_id}", status_code=204)
def delete_entry(entry_id: str, engine: LedgerEngine = Depends(get_engine)):
    """Delete an entry and reverse its effect on every balance."""
    with engine_lock:
        result = engine.delete_transaction(entry_id)
    raise_for_result(result)
    return Response(status_code=204)


@router.get("/stats", response_model=StatsResponse)
def get_stats(engine: LedgerEngine = Depends(get_engine)):
    with engine_lock:
        return engine.get_stats()
