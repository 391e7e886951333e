from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class MonthSummary:
    year: int
    month: int
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")  # Includes loan interest, never principal
    balance: Decimal = Decimal("0")

    # Debt breakdown
    loan_interest: Decimal = Decimal("0")
    loan_principal: Decimal = Decimal("0")


@dataclass
class YearSummary:
    year: int
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")

    # Debt breakdown
    loan_interest: Decimal = Decimal("0")
    loan_principal: Decimal = Decimal("0")

    months: list[MonthSummary] = field(default_factory=list)


@dataclass
class HorizonSummary:
    start_year: int
    start_month: int
    months: int
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
    yearly: list[YearSummary] = field(default_factory=list)


@dataclass
class NetWorth:
    year: int
    month: int
    total_assets: Decimal = Decimal("0")
    total_loan_balance: Decimal = Decimal("0")
    net_worth: Decimal = Decimal("0")
