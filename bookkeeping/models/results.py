"""
Result types returned by the ledger engine.

Expected failures (duplicate key, unbalanced entry, unknown
entry) are values, not exceptions. The caller inspects
`success` and decides how to surface `message`.
"""

from decimal import Decimal

from pydantic import BaseModel

from bookkeeping.models.enums import ErrorKind


class OperationResult(BaseModel):
    success: bool
    error: ErrorKind | None = None
    message: str | None = None
    entry_id: str | None = None

    @classmethod
    def ok(cls, entry_id: str | None = None) -> "OperationResult":
        return cls(success=True, entry_id=entry_id)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "OperationResult":
        return cls(success=False, error=error, message=message)


class LedgerStats(BaseModel):
    """Headline aggregates over current account balances."""
    total_assets: Decimal
    # Reported as a magnitude, regardless of sign.
    total_liabilities: Decimal
    total_revenue: Decimal
    total_expenses: Decimal
    net_worth: Decimal
