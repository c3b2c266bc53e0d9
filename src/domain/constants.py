"""Domain constants for fleet financial reporting."""

INVESTOR_ROLE = "investor"

TRANSACTION_INCOME = "income"
TRANSACTION_EXPENSE = "expense"
TRANSACTION_TYPES = (TRANSACTION_INCOME, TRANSACTION_EXPENSE)

DEFAULT_MONTHLY_WINDOW = 6
DEFAULT_COMPANY_NAME = "Miami Cars Investments"


__all__ = [
    "INVESTOR_ROLE",
    "TRANSACTION_INCOME",
    "TRANSACTION_EXPENSE",
    "TRANSACTION_TYPES",
    "DEFAULT_MONTHLY_WINDOW",
    "DEFAULT_COMPANY_NAME",
]
