"""
Tests for the InsightsService.

The Gemini model is replaced by FakeModel from conftest.
"""

import json
from decimal import Decimal

from bookkeeping.config import Settings
from bookkeeping.models import EntryType, NewJournalEntry, TransactionLine
from bookkeeping.services.insights_service import (
    INSIGHTS_UNAVAILABLE_MESSAGE,
    InsightsService,
)


class NoKeySettings(Settings):
    GEMINI_API_KEY = ""


class NoRecentEntriesSettings(Settings):
    INSIGHTS_RECENT_ENTRIES = 0


def post_sales(engine, count):
    for i in range(count):
        engine.post_transaction(NewJournalEntry(
            description=f"sale {i}",
            lines=[
                TransactionLine(account_id="cash", entry_type=EntryType.DEBIT,
                                amount=Decimal("10")),
                TransactionLine(account_id="sales", entry_type=EntryType.CREDIT,
                                amount=Decimal("10")),
            ],
            idempotency_key=f"sale-{i}",
        ))


class TestGenerate:

    def test_returns_model_text(self, engine, fake_model):
        service = InsightsService(model=fake_model)

        text = service.generate(engine.get_accounts(), engine.get_ledger())

        assert text == "- Keep an eye on liquidity"
        assert len(fake_model.prompts) == 1

    def test_model_failure_returns_placeholder(self, engine, fake_model):
        fake_model.error = RuntimeError("quota exceeded")
        service = InsightsService(model=fake_model)

        text = service.generate(engine.get_accounts(), engine.get_ledger())

        assert text == INSIGHTS_UNAVAILABLE_MESSAGE

    def test_empty_response_returns_placeholder(self, engine, fake_model):
        fake_model.text = "   "
        service = InsightsService(model=fake_model)

        assert service.generate([], []) == INSIGHTS_UNAVAILABLE_MESSAGE

    def test_no_api_key_returns_placeholder(self, engine):
        service = InsightsService(settings=NoKeySettings())

        text = service.generate(engine.get_accounts(), engine.get_ledger())

        assert text == INSIGHTS_UNAVAILABLE_MESSAGE

    def test_failure_leaves_engine_untouched(self, engine, fake_model):
        post_sales(engine, 2)
        before = [a.model_dump() for a in engine.get_accounts()]
        fake_model.error = RuntimeError("boom")

        InsightsService(model=fake_model).generate(
            engine.get_accounts(), engine.get_ledger()
        )

        assert [a.model_dump() for a in engine.get_accounts()] == before


class TestPayload:

    def test_only_recent_entries_are_sent(self, engine, fake_model):
        post_sales(engine, 8)
        service = InsightsService(model=fake_model)

        payload = service.build_payload(engine.get_accounts(), engine.get_ledger())

        descriptions = [t["description"] for t in payload["recent_transactions"]]
        assert descriptions == ["sale 3", "sale 4", "sale 5", "sale 6", "sale 7"]

    def test_zero_recent_entries_sends_none(self, engine, fake_model):
        post_sales(engine, 3)
        service = InsightsService(settings=NoRecentEntriesSettings(), model=fake_model)

        payload = service.build_payload(engine.get_accounts(), engine.get_ledger())

        assert payload["recent_transactions"] == []

    def test_more_recent_entries_than_ledger(self, engine, fake_model):
        post_sales(engine, 2)
        service = InsightsService(model=fake_model)

        payload = service.build_payload(engine.get_accounts(), engine.get_ledger())

        assert len(payload["recent_transactions"]) == 2

    def test_payload_is_json_serializable(self, engine, fake_model):
        post_sales(engine, 1)
        service = InsightsService(model=fake_model)

        payload = service.build_payload(engine.get_accounts(), engine.get_ledger())

        decoded = json.loads(json.dumps(payload))
        cash = next(a for a in decoded["accounts"] if a["name"] == "Cash")
        assert cash == {"name": "Cash", "type": "ASSET", "balance": "10"}

    def test_prompt_contains_payload(self, engine, fake_model):
        service = InsightsService(model=fake_model)

        prompt = service.build_prompt(engine.get_accounts(), [])

        assert "Retained Earnings" in prompt
        assert "3 concise insights" in prompt
