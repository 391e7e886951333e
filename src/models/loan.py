from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class RepaymentType(Enum):
    EQUAL_PRINCIPAL_INTEREST = "equal_principal_interest"  # Annuity: fixed total payment
    EQUAL_PRINCIPAL = "equal_principal"  # Fixed principal, shrinking interest
    BULLET = "bullet"  # Interest only, principal due at maturity


@dataclass(frozen=True)
class Loan:
    id: str
    name: str
    principal: Decimal
    interest_rate: Decimal  # Annual nominal %, e.g. Decimal("4.5")
    repayment_type: RepaymentType
    term_months: int
    start_date: date
    payment_day: int = 1  # 1-28
    memo: str | None = None
    created_at: str | None = None

    @property
    def monthly_rate(self) -> Decimal:
        return self.interest_rate / 100 / 12


@dataclass(frozen=True)
class LoanPayment:
    """One scheduled installment, rounded to whole currency units."""
    loan_id: str
    loan_name: str
    date: date
    month_number: int  # 1-indexed installment number
    principal: Decimal
    interest: Decimal
    total_payment: Decimal
    remaining_principal: Decimal
