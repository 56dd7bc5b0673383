"""
Report API endpoints.

Every report is computed from one consistent set of engine
snapshots taken under the engine lock.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeping.dependencies import engine_lock, get_engine
from bookkeeping.services.ledger_engine import LedgerEngine
from bookkeeping.services.report_service import ReportService
from bookkeeping.schemas.report import (
    BalanceSheetResponse,
    GeneralLedgerResponse,
    IncomeStatementResponse,
    TrialBalanceResponse,
)

router = APIRouter(prefix="/reports", tags=["Reports"])


def get_report_service(engine: LedgerEngine = Depends(get_engine)) -> ReportService:
    with engine_lock:
        return ReportService.from_engine(engine)


@router.get("/trial-balance", response_model=TrialBalanceResponse)
def trial_balance(service: ReportService = Depends(get_report_service)):
    return service.trial_balance()


@router.get("/income-statement", response_model=IncomeStatementResponse)
def income_statement(service: ReportService = Depends(get_report_service)):
    return service.income_statement()


@router.get("/balance-sheet", response_model=BalanceSheetResponse)
def balance_sheet(service: ReportService = Depends(get_report_service)):
    return service.balance_sheet()


@router.get(
    "/general-ledger/{account_id}",
    response_model=GeneralLedgerResponse,
)
def general_ledger(
    account_id: str,
    service: ReportService = Depends(get_report_service),
):
    """All movements of one account with a running balance."""
    try:
        return service.general_ledger(account_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
