"""
Pydantic schemas for ledger operations.

These define the API contract — what data comes in,
what data goes out. They are separate from the domain
models because the HTTP boundary is stricter: amounts must
be positive and an entry needs at least one line.
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import AccountType, EntryType
from bookkeeping.models.journal_entry import NewJournalEntry, TransactionLine


# --- Request Schemas ---

class TransactionLineCreate(BaseModel):
    """A single debit or credit in an entry."""
    account_id: str = Field(min_length=1)
    entry_type: EntryType
    amount: Decimal = Field(gt=0, decimal_places=4)


class JournalEntryCreate(BaseModel):
    """
    A complete entry — a group of lines that must balance.

    The client may provide an idempotency_key so that retries
    with the same key are rejected instead of posted twice.
    """
    date: datetime = Field(default_factory=datetime.utcnow)
    description: str = Field(min_length=1, max_length=255)
    lines: list[TransactionLineCreate] = Field(min_length=1)
    idempotency_key: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        min_length=1,
        max_length=100,
    )
    is_closing: bool = False

    def to_domain(self) -> NewJournalEntry:
        return NewJournalEntry(
            date=self.date,
            description=self.description,
            lines=[
                TransactionLine(**line.model_dump()) for line in self.lines
            ],
            idempotency_key=self.idempotency_key,
            is_closing=self.is_closing,
        )


# --- Response Schemas ---

class AccountResponse(BaseModel):
    """Account snapshot in API responses."""
    id: str
    name: str
    account_type: AccountType
    balance: Decimal

    model_config = {"from_attributes": True}


class TransactionLineResponse(BaseModel):
    account_id: str
    entry_type: EntryType
    amount: Decimal

    model_config = {"from_attributes": True}


class JournalEntryResponse(BaseModel):
    """Posted entry in API responses."""
    id: str
    date: datetime
    description: str
    lines: list[TransactionLineResponse]
    idempotency_key: str
    is_closing: bool

    model_config = {"from_attributes": True}


class StatsResponse(BaseModel):
    total_assets: Decimal
    total_liabilities: Decimal
    total_revenue: Decimal
    total_expenses: Decimal
    net_worth: Decimal

    model_config = {"from_attributes": True}


class InsightsResponse(BaseModel):
    text: str
