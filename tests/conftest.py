"""
Shared test fixtures.

Every test gets a fresh engine, so no ledger state leaks
between tests. The API client swaps the application's engine
for that fresh one through dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from bookkeeping.chart_of_accounts import default_chart
from bookkeeping.dependencies import get_engine, get_insights_service
from bookkeeping.main import app
from bookkeeping.models import Account, AccountType
from bookkeeping.services.insights_service import InsightsService
from bookkeeping.services.ledger_engine import LedgerEngine


@pytest.fixture
def engine():
    """A small chart: one account of each type, plus a second expense."""
    return LedgerEngine([
        Account(id="cash", name="Cash", account_type=AccountType.ASSET),
        Account(id="loan", name="Loan", account_type=AccountType.LIABILITY),
        Account(id="equity", name="Retained Earnings", account_type=AccountType.EQUITY),
        Account(id="sales", name="Sales", account_type=AccountType.REVENUE),
        Account(id="rent", name="Rent", account_type=AccountType.EXPENSE),
        Account(id="wages", name="Wages", account_type=AccountType.EXPENSE),
    ])


class FakeModel:
    """Stands in for a Gemini GenerativeModel."""

    def __init__(self, text="- Keep an eye on liquidity", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return type("Response", (), {"text": self.text})()


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def app_engine():
    """An engine over the default chart, as the application builds it."""
    return LedgerEngine(default_chart())


@pytest.fixture
def client(app_engine, fake_model):
    """
    Provide a test client backed by a fresh engine.

    We override get_engine so the FastAPI app uses our engine
    instead of the process-wide one.
    """
    app.dependency_overrides[get_engine] = lambda: app_engine
    app.dependency_overrides[get_insights_service] = (
        lambda: InsightsService(model=fake_model)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
