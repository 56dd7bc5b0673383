"""
Default chart of accounts.

A small-business chart: three assets, two liabilities,
one revenue, two expenses and two equity accounts. The last
one, Retained Earnings, receives the result of period closing.
"""

from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType


DEFAULT_ACCOUNTS: list[Account] = [
    Account(id="acc-1", name="Cash / Bank", account_type=AccountType.ASSET),
    Account(id="acc-2", name="Accounts Receivable", account_type=AccountType.ASSET),
    Account(id="acc-3", name="Inventory", account_type=AccountType.ASSET),
    Account(id="acc-4", name="Suppliers", account_type=AccountType.LIABILITY),
    Account(id="acc-5", name="Loans", account_type=AccountType.LIABILITY),
    Account(id="acc-6", name="Sales Revenue", account_type=AccountType.REVENUE),
    Account(id="acc-7", name="Operating Expenses", account_type=AccountType.EXPENSE),
    Account(id="acc-8", name="Salary Expenses", account_type=AccountType.EXPENSE),
    Account(id="acc-9", name="Share Capital", account_type=AccountType.EQUITY),
    Account(id="acc-10", name="Retained Earnings", account_type=AccountType.EQUITY),
]


def default_chart() -> list[Account]:
    """Fresh copies of the default accounts, all with zero balance."""
    return [account.model_copy(deep=True) for account in DEFAULT_ACCOUNTS]
