"""
Ledger domain models.

Everything a caller needs to build accounts and entries,
and to read engine results, is importable from here.
"""

from bookkeeping.models.enums import (
    AccountType,
    EntryType,
    ErrorKind,
    NATURAL_SIDE,
)
from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import (
    TransactionLine,
    NewJournalEntry,
    JournalEntry,
)
from bookkeeping.models.results import OperationResult, LedgerStats

__all__ = [
    "AccountType",
    "EntryType",
    "ErrorKind",
    "NATURAL_SIDE",
    "Account",
    "TransactionLine",
    "NewJournalEntry",
    "JournalEntry",
    "OperationResult",
    "LedgerStats",
]
