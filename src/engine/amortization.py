"""Loan amortization: per-month payment breakdown for three repayment schemes.

Pure functions: Decimal in, dataclass out. No I/O.

Intermediate values are unrounded Decimals; principal, interest and total are
rounded to whole currency units only when a LoanPayment is produced.
"""

import functools
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from src.engine.recurrence import add_months, months_between, resolve_day
from src.models.loan import Loan, LoanPayment, RepaymentType

WHOLE = Decimal("1")
ZERO = Decimal("0")


def _round(amount: Decimal) -> Decimal:
    return amount.quantize(WHOLE, ROUND_HALF_UP)


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_months: int) -> Decimal:
    """Fixed annuity payment (unrounded).

    Args:
        principal: Amount borrowed
        annual_rate: Nominal annual rate in percent (e.g. 4.8 for 4.8%)
        term_months: Number of scheduled payments
    """
    r = annual_rate / 100 / 12
    if r == 0:
        return principal / term_months
    # A = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** term_months
    return principal * r * factor / (factor - 1)


def _annuity_balance(principal: Decimal, r: Decimal, payment: Decimal, paid: int) -> Decimal:
    """Outstanding balance after `paid` annuity payments.

    Closed form of the forward simulation B_k = B_{k-1} - (A - B_{k-1} * r):
    B_k = P(1+r)^k - A((1+r)^k - 1) / r
    """
    if r == 0:
        return principal - payment * paid
    growth = (1 + r) ** paid
    return principal * growth - payment * (growth - 1) / r


def _breakdown(loan: Loan, number: int) -> tuple[Decimal, Decimal, Decimal]:
    """Unrounded (principal, interest, remaining) for installment `number`."""
    p = loan.principal
    r = loan.monthly_rate
    n = loan.term_months

    if loan.repayment_type is RepaymentType.EQUAL_PRINCIPAL_INTEREST:
        pmt = monthly_payment(p, loan.interest_rate, n)
        before = _annuity_balance(p, r, pmt, number - 1)
        interest = before * r
        principal_paid = pmt - interest
        return principal_paid, interest, before - principal_paid

    if loan.repayment_type is RepaymentType.EQUAL_PRINCIPAL:
        principal_paid = p / n
        before = p - principal_paid * (number - 1)
        interest = before * r
        return principal_paid, interest, before - principal_paid

    # Bullet: interest only until maturity
    interest = p * r
    if number == n:
        return p, interest, ZERO
    return ZERO, interest, p


def _payment(loan: Loan, number: int) -> LoanPayment:
    year, month = add_months(loan.start_date.year, loan.start_date.month, number - 1)
    principal_paid, interest, remaining = _breakdown(loan, number)
    return LoanPayment(
        loan_id=loan.id,
        loan_name=loan.name,
        date=resolve_day(year, month, loan.payment_day),
        month_number=number,
        principal=_round(principal_paid),
        interest=_round(interest),
        total_payment=_round(principal_paid + interest),
        remaining_principal=_round(max(remaining, ZERO)),
    )


def payment_number(loan: Loan, year: int, month: int) -> int | None:
    """1-indexed installment number due in (year, month), or None if inactive."""
    number = months_between(loan.start_date, year, month)
    if number < 1 or number > loan.term_months:
        return None
    return number


def payment_for_month(loan: Loan, year: int, month: int) -> LoanPayment | None:
    """Payment breakdown for (year, month).

    Returns None when no payment is due: the month precedes the loan's start
    month or falls after its final installment.
    """
    number = payment_number(loan, year, month)
    if number is None:
        return None
    return _payment(loan, number)


def loan_payments_for_month(loans: Iterable[Loan], year: int, month: int) -> list[LoanPayment]:
    """Payments due in (year, month) across all loans, skipping inactive ones."""
    payments = []
    for loan in loans:
        payment = payment_for_month(loan, year, month)
        if payment is not None:
            payments.append(payment)
    return payments


@functools.lru_cache(maxsize=256)
def _schedule(loan: Loan) -> tuple[LoanPayment, ...]:
    return tuple(_payment(loan, number) for number in range(1, loan.term_months + 1))


def payment_schedule(loan: Loan) -> list[LoanPayment]:
    """Full schedule of `term_months` installments, numbered 1..term_months."""
    return list(_schedule(loan))


def remaining_balance(loan: Loan, year: int, month: int) -> Decimal:
    """Outstanding principal after the (year, month) payment, if any.

    The full principal before the loan starts, zero once it has matured.
    """
    number = months_between(loan.start_date, year, month)
    if number < 1:
        return loan.principal
    if number >= loan.term_months:
        return ZERO
    return _schedule(loan)[number - 1].remaining_principal


def yearly_loan_summary(loan: Loan) -> list[dict[str, Decimal]]:
    """Aggregate a loan's schedule by calendar year.

    Returns list of dicts with keys: year, principal, interest, debt_service, ending_balance
    """
    yearly: list[dict[str, Decimal]] = []
    current: dict[str, Decimal] | None = None

    for p in _schedule(loan):
        if current is None or current["year"] != p.date.year:
            current = {
                "year": Decimal(p.date.year),
                "principal": ZERO,
                "interest": ZERO,
                "debt_service": ZERO,
                "ending_balance": ZERO,
            }
            yearly.append(current)
        current["principal"] += p.principal
        current["interest"] += p.interest
        current["debt_service"] += p.total_payment
        current["ending_balance"] = p.remaining_principal

    return yearly
