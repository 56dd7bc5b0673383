"""
Pydantic schemas for financial reports.

Reports are read-only projections of the engine's snapshots.
They carry no business rules beyond grouping and summation.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from bookkeeping.models.enums import AccountType, EntryType


class AccountLine(BaseModel):
    """One account and the amount shown for it in a statement."""
    account_id: str
    account_name: str
    amount: Decimal


class GeneralLedgerLine(BaseModel):
    entry_id: str
    date: datetime
    description: str
    entry_type: EntryType
    amount: Decimal
    running_balance: Decimal


class GeneralLedgerResponse(BaseModel):
    """Every movement of one account, in posting order."""
    account_id: str
    account_name: str
    account_type: AccountType
    lines: list[GeneralLedgerLine]
    total_debits: Decimal
    total_credits: Decimal
    balance: Decimal


class TrialBalanceRow(BaseModel):
    account_id: str
    account_name: str
    account_type: AccountType
    total_debits: Decimal
    total_credits: Decimal
    balance: Decimal


class TrialBalanceResponse(BaseModel):
    """Four-column trial balance with control totals."""
    rows: list[TrialBalanceRow]
    total_debits: Decimal
    total_credits: Decimal
    is_balanced: bool


class IncomeStatementResponse(BaseModel):
    revenue: list[AccountLine]
    expenses: list[AccountLine]
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal


class BalanceSheetResponse(BaseModel):
    """
    Assets on one side, liabilities plus equity on the other.

    Equity includes the current period's net income until the
    period is closed into retained earnings.
    """
    assets: list[AccountLine]
    liabilities: list[AccountLine]
    equity: list[AccountLine]
    total_assets: Decimal
    total_liabilities: Decimal
    net_income: Decimal
    total_equity: Decimal
    total_liabilities_and_equity: Decimal
    difference: Decimal
    is_balanced: bool
