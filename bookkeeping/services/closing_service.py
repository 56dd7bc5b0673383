"""
Closing service — end-of-period closing and reopening.

Closing moves every revenue and expense balance into
retained earnings with a single entry:
    DEBIT  each revenue account (brings it to zero)
    CREDIT each expense account (brings it to zero)
    CREDIT retained earnings for a profit, DEBIT for a loss

The closing entry is an ordinary entry flagged is_closing,
so reopening the period is just deleting it.
"""

import uuid
from datetime import datetime
from decimal import Decimal

import structlog

from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType, EntryType, ErrorKind
from bookkeeping.models.journal_entry import NewJournalEntry, TransactionLine
from bookkeeping.models.results import OperationResult
from bookkeeping.services.ledger_engine import LedgerEngine

logger = structlog.get_logger(__name__)

CLOSING_DESCRIPTION = "Automatic period closing"


class ClosingService:

    def __init__(self, engine: LedgerEngine, retained_earnings_account_id: str):
        self.engine = engine
        self.retained_earnings_account_id = retained_earnings_account_id

    def build_closing_lines(self) -> list[TransactionLine]:
        """Lines that zero every result account into retained earnings."""
        accounts = self.engine.get_accounts()
        lines = []
        net_result = Decimal("0")

        for account in accounts:
            if account.account_type not in (
                AccountType.REVENUE, AccountType.EXPENSE
            ):
                continue
            if account.balance == 0:
                continue
            lines.append(self._zeroing_line(account))
            if account.account_type == AccountType.REVENUE:
                net_result += account.balance
            else:
                net_result -= account.balance

        if lines and net_result != 0:
            lines.append(TransactionLine(
                account_id=self.retained_earnings_account_id,
                entry_type=(
                    EntryType.CREDIT if net_result > 0 else EntryType.DEBIT
                ),
                amount=abs(net_result),
            ))
        return lines

    def close_period(self) -> OperationResult:
        """
        Post the closing entry.

        Fails with NOTHING_TO_CLOSE when every revenue and
        expense account is already at zero.
        """
        lines = self.build_closing_lines()
        if not lines:
            return OperationResult.fail(
                ErrorKind.NOTHING_TO_CLOSE,
                "No revenue or expense balances to close",
            )

        result = self.engine.post_transaction(NewJournalEntry(
            date=datetime.utcnow(),
            description=CLOSING_DESCRIPTION,
            lines=lines,
            idempotency_key=f"closing-{uuid.uuid4()}",
            is_closing=True,
        ))
        if result.success:
            logger.info("period_closed", entry_id=result.entry_id)
        return result

    def reopen_period(self) -> OperationResult:
        """Delete the most recently posted closing entry."""
        closing = next(
            (e for e in reversed(self.engine.get_ledger()) if e.is_closing),
            None,
        )
        if closing is None:
            return OperationResult.fail(
                ErrorKind.NOT_FOUND,
                "No closing entry found to reverse",
            )

        result = self.engine.delete_transaction(closing.id)
        if result.success:
            logger.info("period_reopened", entry_id=closing.id)
        return result

    @staticmethod
    def _zeroing_line(account: Account) -> TransactionLine:
        # The side opposite the natural one reduces a positive balance.
        side = account.natural_side.opposite
        if account.balance < 0:
            side = account.natural_side
        return TransactionLine(
            account_id=account.id,
            entry_type=side,
            amount=abs(account.balance),
        )
