"""
Journal entry models.

A journal entry groups transaction lines that must balance:
the sum of DEBIT amounts equals the sum of CREDIT amounts.
That rule is enforced by the LedgerEngine, not by the model;
the model is just the data structure.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import EntryType


class TransactionLine(BaseModel):
    """One debit or credit against a single account."""
    account_id: str
    entry_type: EntryType
    amount: Decimal = Field(ge=0)


class NewJournalEntry(BaseModel):
    """An entry as submitted for posting, before the engine assigns an id."""
    date: datetime = Field(default_factory=datetime.utcnow)
    description: str = ""
    lines: list[TransactionLine]
    idempotency_key: str = Field(min_length=1)
    is_closing: bool = False

    def total_debits(self) -> Decimal:
        return sum(
            (line.amount for line in self.lines
             if line.entry_type == EntryType.DEBIT),
            Decimal("0"),
        )

    def total_credits(self) -> Decimal:
        return sum(
            (line.amount for line in self.lines
             if line.entry_type == EntryType.CREDIT),
            Decimal("0"),
        )


class JournalEntry(NewJournalEntry):
    """A posted entry. Line order is kept for display only."""
    id: str

    def __repr__(self) -> str:
        return f"<JournalEntry {self.id} {self.description!r}>"
