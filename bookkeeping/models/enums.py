"""
Shared enumerations for ledger models.

Using str-based enums means values serialize cleanly to JSON
and an invalid account type or posting side is rejected by
pydantic before it ever reaches the engine.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class EntryType(str, enum.Enum):
    """Side of a transaction line."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    @property
    def opposite(self) -> "EntryType":
        return EntryType.CREDIT if self is EntryType.DEBIT else EntryType.DEBIT


class ErrorKind(str, enum.Enum):
    """Why a ledger operation was refused."""
    DUPLICATE_TRANSACTION = "DUPLICATE_TRANSACTION"
    UNBALANCED_ENTRY = "UNBALANCED_ENTRY"
    NOT_FOUND = "NOT_FOUND"
    ENGINE_FAILURE = "ENGINE_FAILURE"
    NOTHING_TO_CLOSE = "NOTHING_TO_CLOSE"


# The side that increases each account type's balance.
NATURAL_SIDE: dict[AccountType, EntryType] = {
    AccountType.ASSET: EntryType.DEBIT,
    AccountType.EXPENSE: EntryType.DEBIT,
    AccountType.LIABILITY: EntryType.CREDIT,
    AccountType.EQUITY: EntryType.CREDIT,
    AccountType.REVENUE: EntryType.CREDIT,
}
