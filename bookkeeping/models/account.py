"""
Account model (chart of accounts).

Every account the engine knows about is created once, when
the engine is constructed. Entries are applied against these
accounts; the balance is only ever changed by the engine.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import AccountType, EntryType, NATURAL_SIDE


class Account(BaseModel):
    """
    A single account in the chart of accounts.

    The balance is expressed in the account's natural direction:
    a positive Cash balance means money on hand, a positive
    Sales balance means revenue earned.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    account_type: AccountType
    balance: Decimal = Decimal("0")

    @property
    def natural_side(self) -> EntryType:
        return NATURAL_SIDE[self.account_type]

    def signed_delta(self, side: EntryType, amount: Decimal) -> Decimal:
        """Change in balance caused by posting `amount` on `side`."""
        return amount if side == self.natural_side else -amount

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.name} ({self.account_type.value})>"
