"""
Insights service — narrative commentary from an LLM.

The service only ever sees copies of accounts and entries.
It NEVER writes to the engine. If the model is unavailable
or fails, the caller gets a placeholder message instead of
an error, so the rest of the application keeps working.
"""

import json

import google.generativeai as genai
import structlog

from bookkeeping.config import Settings, get_settings
from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry

logger = structlog.get_logger(__name__)

INSIGHTS_UNAVAILABLE_MESSAGE = (
    "Insights are not available right now. "
    "Check your connection or API key."
)


class InsightsService:

    def __init__(self, settings: Settings | None = None, model=None):
        self._settings = settings or get_settings()
        self._model = model
        if self._model is None and self._settings.GEMINI_API_KEY:
            self._configure_genai()

    def _configure_genai(self):
        """Configure Google Generative AI."""
        genai.configure(api_key=self._settings.GEMINI_API_KEY)
        self._model = genai.GenerativeModel(
            model_name=self._settings.GEMINI_MODEL_NAME,
            generation_config={
                "temperature": 0.4,
                "max_output_tokens": 512,
            },
        )

    def build_payload(
        self, accounts: list[Account], ledger: list[JournalEntry]
    ) -> dict:
        """Summarize balances and the most recent entries for the prompt."""
        count = self._settings.INSIGHTS_RECENT_ENTRIES
        recent = ledger[max(len(ledger) - count, 0):] if count > 0 else []
        return {
            "accounts": [
                {
                    "name": a.name,
                    "type": a.account_type.value,
                    "balance": str(a.balance),
                }
                for a in accounts
            ],
            "recent_transactions": [
                {
                    "description": e.description,
                    "date": e.date.isoformat(),
                    "total": str(e.lines[0].amount) if e.lines else "0",
                }
                for e in recent
            ],
        }

    def build_prompt(
        self, accounts: list[Account], ledger: list[JournalEntry]
    ) -> str:
        payload = json.dumps(self.build_payload(accounts, ledger))
        return f"""You are a senior financial advisor reviewing a small business ledger.

Analyze the accounting data below and give 3 concise insights or recommendations.
Focus on net worth, spending patterns and liquidity.

Data: {payload}

Respond strictly as a plain bulleted list."""

    def generate(
        self, accounts: list[Account], ledger: list[JournalEntry]
    ) -> str:
        """Return insight text, or the placeholder message on any failure."""
        if self._model is None:
            logger.info("insights_skipped", reason="no model configured")
            return INSIGHTS_UNAVAILABLE_MESSAGE

        try:
            response = self._model.generate_content(
                self.build_prompt(accounts, ledger)
            )
            text = (response.text or "").strip()
        except Exception:
            logger.exception("insights_failed")
            return INSIGHTS_UNAVAILABLE_MESSAGE

        return text or INSIGHTS_UNAVAILABLE_MESSAGE
