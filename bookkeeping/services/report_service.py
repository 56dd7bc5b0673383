"""
Report service — journal, general ledger, trial balance,
income statement and balance sheet.

Reports are computed from snapshots handed out by the
LedgerEngine. They never write back to the engine.
"""

from decimal import Decimal

from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType, EntryType
from bookkeeping.models.journal_entry import JournalEntry
from bookkeeping.models.results import LedgerStats
from bookkeeping.schemas.report import (
    AccountLine,
    BalanceSheetResponse,
    GeneralLedgerLine,
    GeneralLedgerResponse,
    IncomeStatementResponse,
    TrialBalanceResponse,
    TrialBalanceRow,
)
from bookkeeping.services.ledger_engine import LedgerEngine


# Control totals that differ by less than a cent are equal.
REPORT_TOLERANCE = Decimal("0.01")

ZERO = Decimal("0")


class ReportService:

    def __init__(
        self,
        accounts: list[Account],
        ledger: list[JournalEntry],
        stats: LedgerStats,
    ):
        self.accounts = accounts
        self.ledger = ledger
        self.stats = stats

    @classmethod
    def from_engine(cls, engine: LedgerEngine) -> "ReportService":
        """Take a consistent set of snapshots from the engine."""
        return cls(
            accounts=engine.get_accounts(),
            ledger=engine.get_ledger(),
            stats=engine.get_stats(),
        )

    def journal(self) -> list[JournalEntry]:
        """All entries in posting order."""
        return list(self.ledger)

    def general_ledger(self, account_id: str) -> GeneralLedgerResponse:
        """
        All movements of one account with a running balance.

        Raises ValueError if the account does not exist.
        """
        account = self._get_account(account_id)

        lines = []
        running = ZERO
        total_debits = ZERO
        total_credits = ZERO
        for entry in self.ledger:
            for line in entry.lines:
                if line.account_id != account_id:
                    continue
                running += account.signed_delta(line.entry_type, line.amount)
                if line.entry_type == EntryType.DEBIT:
                    total_debits += line.amount
                else:
                    total_credits += line.amount
                lines.append(GeneralLedgerLine(
                    entry_id=entry.id,
                    date=entry.date,
                    description=entry.description,
                    entry_type=line.entry_type,
                    amount=line.amount,
                    running_balance=running,
                ))

        return GeneralLedgerResponse(
            account_id=account.id,
            account_name=account.name,
            account_type=account.account_type,
            lines=lines,
            total_debits=total_debits,
            total_credits=total_credits,
            balance=account.balance,
        )

    def trial_balance(self) -> TrialBalanceResponse:
        """Total debits, total credits and balance for every account."""
        debits = {a.id: ZERO for a in self.accounts}
        credits = {a.id: ZERO for a in self.accounts}
        for entry in self.ledger:
            for line in entry.lines:
                if line.entry_type == EntryType.DEBIT:
                    debits[line.account_id] += line.amount
                else:
                    credits[line.account_id] += line.amount

        rows = [
            TrialBalanceRow(
                account_id=a.id,
                account_name=a.name,
                account_type=a.account_type,
                total_debits=debits[a.id],
                total_credits=credits[a.id],
                balance=a.balance,
            )
            for a in self.accounts
        ]
        total_debits = sum(debits.values(), ZERO)
        total_credits = sum(credits.values(), ZERO)

        return TrialBalanceResponse(
            rows=rows,
            total_debits=total_debits,
            total_credits=total_credits,
            is_balanced=abs(total_debits - total_credits) < REPORT_TOLERANCE,
        )

    def income_statement(self) -> IncomeStatementResponse:
        return IncomeStatementResponse(
            revenue=self._lines_for(AccountType.REVENUE),
            expenses=self._lines_for(AccountType.EXPENSE),
            total_revenue=self.stats.total_revenue,
            total_expenses=self.stats.total_expenses,
            net_income=self.stats.total_revenue - self.stats.total_expenses,
        )

    def balance_sheet(self) -> BalanceSheetResponse:
        """
        Check Assets = Liabilities + Equity.

        Revenue and expenses not yet closed are folded into
        equity as the period's net income.
        """
        net_income = self.stats.total_revenue - self.stats.total_expenses
        equity = self._lines_for(AccountType.EQUITY)
        total_equity = sum((line.amount for line in equity), ZERO) + net_income
        total_liabilities_and_equity = self.stats.total_liabilities + total_equity
        difference = abs(self.stats.total_assets - total_liabilities_and_equity)

        return BalanceSheetResponse(
            assets=self._lines_for(AccountType.ASSET),
            liabilities=self._lines_for(AccountType.LIABILITY, magnitude=True),
            equity=equity,
            total_assets=self.stats.total_assets,
            total_liabilities=self.stats.total_liabilities,
            net_income=net_income,
            total_equity=total_equity,
            total_liabilities_and_equity=total_liabilities_and_equity,
            difference=difference,
            is_balanced=difference <= REPORT_TOLERANCE,
        )

    def _get_account(self, account_id: str) -> Account:
        for account in self.accounts:
            if account.id == account_id:
                return account
        raise ValueError(f"Account {account_id} not found")

    def _lines_for(
        self, account_type: AccountType, magnitude: bool = False
    ) -> list[AccountLine]:
        return [
            AccountLine(
                account_id=a.id,
                account_name=a.name,
                amount=abs(a.balance) if magnitude else a.balance,
            )
            for a in self.accounts
            if a.account_type == account_type
        ]
