from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum


class TransactionType(Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Category(Enum):
    # Income
    SALARY = "salary"
    BONUS = "bonus"
    OTHER_INCOME = "other_income"
    # Expense
    RENT = "rent"
    INSURANCE = "insurance"
    SUBSCRIPTION = "subscription"
    UTILITIES = "utilities"
    TRANSPORT = "transport"
    FOOD = "food"
    SHOPPING = "shopping"
    TRAVEL = "travel"
    EDUCATION = "education"
    MEDICAL = "medical"
    OTHER_EXPENSE = "other_expense"

    @property
    def transaction_type(self) -> TransactionType:
        if self in INCOME_CATEGORIES:
            return TransactionType.INCOME
        return TransactionType.EXPENSE


INCOME_CATEGORIES = frozenset({Category.SALARY, Category.BONUS, Category.OTHER_INCOME})
EXPENSE_CATEGORIES = frozenset(c for c in Category if c not in INCOME_CATEGORIES)


class RecurrenceType(Enum):
    ONCE = "once"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Transaction:
    id: str
    title: str
    amount: Decimal  # Whole currency units, always positive
    type: TransactionType
    category: Category
    date: date  # Anchor (first occurrence) for recurring transactions
    recurrence: RecurrenceType = RecurrenceType.ONCE
    recurrence_end_date: date | None = None  # None = unbounded
    memo: str | None = None
    created_at: str | None = None  # Display ordering only

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not RecurrenceType.ONCE

    def on(self, occurrence_date: date) -> "Transaction":
        """Copy of this transaction resolved to a single occurrence date."""
        return replace(self, date=occurrence_date)
