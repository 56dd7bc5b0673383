"""
Ledger engine — the core of the bookkeeping system.

This engine enforces the fundamental rules:
1. Every entry must balance (debits = credits)
2. An idempotency key can only be posted once while its entry exists
3. Every line must reference an account in the chart of accounts
4. Balances only change through posting and reversal

No other component mutates accounts or entries directly.
Callers receive copies; all writes go through the engine.
"""

import uuid
from decimal import Decimal

import structlog

from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType, ErrorKind
from bookkeeping.models.journal_entry import (
    JournalEntry,
    NewJournalEntry,
    TransactionLine,
)
from bookkeeping.models.results import LedgerStats, OperationResult

logger = structlog.get_logger(__name__)

DEFAULT_BALANCE_TOLERANCE = Decimal("0.001")


class LedgerEngine:
    """
    In-memory owner of the chart of accounts and the journal.

    The engine is synchronous and holds no lock. Callers that
    share one engine between threads must serialize access
    around every call.
    """

    def __init__(
        self,
        accounts: list[Account],
        *,
        balance_tolerance: Decimal = DEFAULT_BALANCE_TOLERANCE,
        allow_zero_total: bool = True,
    ):
        """
        Build an engine over a fixed chart of accounts.

        Raises ValueError if two accounts share an id, or if an
        account arrives with a non-zero balance.
        """
        self._accounts: dict[str, Account] = {}
        for account in accounts:
            if account.id in self._accounts:
                raise ValueError(f"Duplicate account id '{account.id}'")
            if account.balance != 0:
                raise ValueError(
                    f"Account '{account.id}' must start with a zero balance, "
                    f"got {account.balance}"
                )
            self._accounts[account.id] = account.model_copy(deep=True)

        self._ledger: list[JournalEntry] = []
        self._idempotency_keys: set[str] = set()
        self.balance_tolerance = balance_tolerance
        self.allow_zero_total = allow_zero_total

    # --- Write operations ---

    def post_transaction(self, entry: NewJournalEntry) -> OperationResult:
        """
        Validate and post a new journal entry.

        Checks run in order: duplicate key, balance, zero-total
        policy, account references. If any check fails, nothing
        is changed.
        """
        if entry.idempotency_key in self._idempotency_keys:
            return self._reject(
                ErrorKind.DUPLICATE_TRANSACTION,
                f"Transaction with key '{entry.idempotency_key}' "
                f"has already been processed",
            )

        total_debits = entry.total_debits()
        total_credits = entry.total_credits()

        if abs(total_debits - total_credits) > self.balance_tolerance:
            return self._reject(
                ErrorKind.UNBALANCED_ENTRY,
                f"Entry does not balance: "
                f"debits ({total_debits:.2f}) != credits ({total_credits:.2f})",
            )

        if not self.allow_zero_total and total_debits == 0:
            return self._reject(
                ErrorKind.UNBALANCED_ENTRY,
                "Entry total must be greater than zero",
            )

        missing = self._missing_accounts(entry.lines)
        if missing:
            return self._reject(
                ErrorKind.ENGINE_FAILURE,
                f"Accounts not found: {', '.join(missing)}",
            )

        posted = JournalEntry(
            id=str(uuid.uuid4()),
            **entry.model_dump(),
        )
        for line in posted.lines:
            self._apply_line(line)

        self._ledger.append(posted)
        self._idempotency_keys.add(posted.idempotency_key)

        logger.info(
            "entry_posted",
            entry_id=posted.id,
            idempotency_key=posted.idempotency_key,
            total=str(total_debits),
            is_closing=posted.is_closing,
        )
        return OperationResult.ok(posted.id)

    def delete_transaction(self, entry_id: str) -> OperationResult:
        """
        Remove a posted entry and reverse its effect on balances.

        Each line is re-applied with the opposite side, which is
        the exact negation of its original delta. The entry's
        idempotency key becomes available again.
        """
        index = self._find_index(entry_id)
        if index is None:
            return self._reject(
                ErrorKind.NOT_FOUND,
                f"Transaction {entry_id} not found",
            )

        entry = self._ledger[index]

        # Unreachable while the chart is fixed, checked so a
        # reversal is never half-applied.
        missing = self._missing_accounts(entry.lines)
        if missing:
            return self._reject(
                ErrorKind.ENGINE_FAILURE,
                f"Cannot reverse entry {entry_id}: "
                f"accounts not found: {', '.join(missing)}",
            )

        for line in entry.lines:
            self._apply_line(line.model_copy(
                update={"entry_type": line.entry_type.opposite}
            ))

        del self._ledger[index]
        self._idempotency_keys.discard(entry.idempotency_key)

        logger.info("entry_deleted", entry_id=entry_id)
        return OperationResult.ok(entry_id)

    def update_transaction(
        self, entry_id: str, entry: NewJournalEntry
    ) -> OperationResult:
        """
        Replace a posted entry: delete it, then post the new one.

        This is two steps, not one. If the new entry is rejected,
        the old entry stays deleted. On success the replacement
        has a new id.
        """
        deleted = self.delete_transaction(entry_id)
        if not deleted.success:
            return deleted

        result = self.post_transaction(entry)
        if not result.success:
            logger.warning(
                "update_left_entry_deleted",
                old_entry_id=entry_id,
                error=result.error.value,
            )
        return result

    # --- Read operations ---

    def get_accounts(self) -> list[Account]:
        """Return copies of all accounts, in chart order."""
        return [a.model_copy(deep=True) for a in self._accounts.values()]

    def get_account(self, account_id: str) -> Account | None:
        account = self._accounts.get(account_id)
        return account.model_copy(deep=True) if account else None

    def get_ledger(self) -> list[JournalEntry]:
        """Return copies of all entries, in posting order."""
        return [e.model_copy(deep=True) for e in self._ledger]

    def get_entry(self, entry_id: str) -> JournalEntry | None:
        index = self._find_index(entry_id)
        if index is None:
            return None
        return self._ledger[index].model_copy(deep=True)

    def get_stats(self) -> LedgerStats:
        """
        Sum balances by account type.

        Liabilities are reported as a magnitude so a dashboard
        can show them next to assets without sign juggling.
        """
        total_assets = self._sum_balances(AccountType.ASSET)
        total_liabilities = abs(self._sum_balances(AccountType.LIABILITY))
        return LedgerStats(
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            total_revenue=self._sum_balances(AccountType.REVENUE),
            total_expenses=self._sum_balances(AccountType.EXPENSE),
            net_worth=total_assets - total_liabilities,
        )

    # --- Internals ---

    def _apply_line(self, line: TransactionLine) -> None:
        account = self._accounts[line.account_id]
        account.balance += account.signed_delta(line.entry_type, line.amount)

    def _missing_accounts(self, lines: list[TransactionLine]) -> list[str]:
        return sorted(
            {line.account_id for line in lines} - set(self._accounts)
        )

    def _find_index(self, entry_id: str) -> int | None:
        for index, entry in enumerate(self._ledger):
            if entry.id == entry_id:
                return index
        return None

    def _sum_balances(self, account_type: AccountType) -> Decimal:
        return sum(
            (a.balance for a in self._accounts.values()
             if a.account_type == account_type),
            Decimal("0"),
        )

    def _reject(self, error: ErrorKind, message: str) -> OperationResult:
        logger.warning("operation_rejected", error=error.value, reason=message)
        return OperationResult.fail(error, message)
