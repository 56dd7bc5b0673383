"""
Tests for the ReportService projections.
"""

from decimal import Decimal

import pytest

from bookkeeping.models import EntryType, NewJournalEntry, TransactionLine
from bookkeeping.services.report_service import ReportService


def post(engine, key, *lines):
    result = engine.post_transaction(NewJournalEntry(
        description=key,
        lines=[
            TransactionLine(account_id=a, entry_type=side, amount=Decimal(amt))
            for a, side, amt in lines
        ],
        idempotency_key=key,
    ))
    assert result.success, result.message
    return result.entry_id


@pytest.fixture
def trading_engine(engine):
    """Borrow 1000, sell 500 for cash, pay 200 rent and 100 wages."""
    post(engine, "loan", ("cash", EntryType.DEBIT, "1000"),
         ("loan", EntryType.CREDIT, "1000"))
    post(engine, "sale", ("cash", EntryType.DEBIT, "500"),
         ("sales", EntryType.CREDIT, "500"))
    post(engine, "rent", ("rent", EntryType.DEBIT, "200"),
         ("cash", EntryType.CREDIT, "200"))
    post(engine, "wages", ("wages", EntryType.DEBIT, "100"),
         ("cash", EntryType.CREDIT, "100"))
    return engine


class TestJournal:

    def test_journal_in_posting_order(self, trading_engine):
        service = ReportService.from_engine(trading_engine)

        descriptions = [e.description for e in service.journal()]

        assert descriptions == ["loan", "sale", "rent", "wages"]


class TestGeneralLedger:

    def test_running_balance(self, trading_engine):
        report = ReportService.from_engine(trading_engine).general_ledger("cash")

        assert [line.running_balance for line in report.lines] == [
            Decimal("1000"), Decimal("1500"), Decimal("1300"), Decimal("1200"),
        ]
        assert report.total_debits == Decimal("1500")
        assert report.total_credits == Decimal("300")
        assert report.balance == Decimal("1200")

    def test_credit_natural_account(self, trading_engine):
        report = ReportService.from_engine(trading_engine).general_ledger("loan")

        assert len(report.lines) == 1
        assert report.lines[0].entry_type == EntryType.CREDIT
        assert report.lines[0].running_balance == Decimal("1000")

    def test_account_without_movements(self, trading_engine):
        report = ReportService.from_engine(trading_engine).general_ledger("equity")

        assert report.lines == []
        assert report.balance == Decimal("0")

    def test_unknown_account(self, trading_engine):
        service = ReportService.from_engine(trading_engine)

        with pytest.raises(ValueError, match="not found"):
            service.general_ledger("missing")


class TestTrialBalance:

    def test_totals_balance(self, trading_engine):
        report = ReportService.from_engine(trading_engine).trial_balance()

        assert report.total_debits == Decimal("1800")
        assert report.total_credits == Decimal("1800")
        assert report.is_balanced is True

    def test_one_row_per_account(self, trading_engine):
        report = ReportService.from_engine(trading_engine).trial_balance()
        rows = {row.account_id: row for row in report.rows}

        assert len(report.rows) == 6
        assert rows["cash"].total_debits == Decimal("1500")
        assert rows["cash"].total_credits == Decimal("300")
        assert rows["cash"].balance == Decimal("1200")
        assert rows["equity"].total_debits == Decimal("0")

    def test_empty_ledger(self, engine):
        report = ReportService.from_engine(engine).trial_balance()

        assert report.total_debits == Decimal("0")
        assert report.is_balanced is True


class TestIncomeStatement:

    def test_net_income(self, trading_engine):
        report = ReportService.from_engine(trading_engine).income_statement()

        assert report.total_revenue == Decimal("500")
        assert report.total_expenses == Decimal("300")
        assert report.net_income == Decimal("200")
        assert [line.account_id for line in report.expenses] == ["rent", "wages"]


class TestBalanceSheet:

    def test_balances_with_unclosed_income(self, trading_engine):
        report = ReportService.from_engine(trading_engine).balance_sheet()

        assert report.total_assets == Decimal("1200")
        assert report.total_liabilities == Decimal("1000")
        assert report.net_income == Decimal("200")
        assert report.total_equity == Decimal("200")
        assert report.total_liabilities_and_equity == Decimal("1200")
        assert report.difference == Decimal("0")
        assert report.is_balanced is True

    def test_snapshot_is_detached_from_engine(self, trading_engine):
        service = ReportService.from_engine(trading_engine)
        post(trading_engine, "late", ("cash", EntryType.DEBIT, "50"),
             ("sales", EntryType.CREDIT, "50"))

        assert service.balance_sheet().total_assets == Decimal("1200")
