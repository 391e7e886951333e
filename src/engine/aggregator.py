"""Aggregator: composes recurrence projection and amortization into summaries.

Pure computation. No I/O. Entity snapshots in, summary dataclasses out.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from src.config import settings
from src.engine.amortization import loan_payments_for_month, remaining_balance
from src.engine.recurrence import add_months, occurrences_in_month
from src.models.asset import Asset
from src.models.loan import Loan
from src.models.summary import HorizonSummary, MonthSummary, NetWorth, YearSummary
from src.models.transaction import EXPENSE_CATEGORIES, Transaction, TransactionType

ZERO = Decimal("0")
LOAN_INTEREST_KEY = "loan_interest"


def month_summary(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    year: int,
    month: int,
) -> MonthSummary:
    """Income, expense and balance for a single month.

    Loan interest counts as expense. Loan principal is a transfer against
    the balance sheet and is excluded.
    """
    occurrences = occurrences_in_month(transactions, year, month)
    payments = loan_payments_for_month(loans, year, month)

    income = sum((t.amount for t in occurrences if t.type is TransactionType.INCOME), ZERO)
    expense = sum((t.amount for t in occurrences if t.type is TransactionType.EXPENSE), ZERO)
    interest = sum((p.interest for p in payments), ZERO)
    principal = sum((p.principal for p in payments), ZERO)

    total_expense = expense + interest
    return MonthSummary(
        year=year,
        month=month,
        total_income=income,
        total_expense=total_expense,
        balance=income - total_expense,
        loan_interest=interest,
        loan_principal=principal,
    )


def multi_month_summaries(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    start_year: int,
    start_month: int,
    count: int,
) -> list[MonthSummary]:
    """`count` consecutive month summaries starting at (start_year, start_month)."""
    summaries: list[MonthSummary] = []
    for offset in range(count):
        year, month = add_months(start_year, start_month, offset)
        summaries.append(month_summary(transactions, loans, year, month))
    return summaries


def _rollup(year: int, months: list[MonthSummary]) -> YearSummary:
    summary = YearSummary(year=year, months=months)
    for m in months:
        summary.total_income += m.total_income
        summary.total_expense += m.total_expense
        summary.loan_interest += m.loan_interest
        summary.loan_principal += m.loan_principal
    summary.balance = summary.total_income - summary.total_expense
    return summary


def year_summary(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    year: int,
) -> YearSummary:
    """January through December rollup for a calendar year."""
    months = multi_month_summaries(transactions, loans, year, 1, 12)
    return _rollup(year, months)


def horizon_summary(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    start_year: int,
    start_month: int,
    years: int | None = None,
) -> HorizonSummary:
    """Multi-year outlook (e.g. 5, 10 or 30 years) starting at a given month.

    Yearly entries cover consecutive 12-month periods, each labelled with the
    calendar year its first month falls in.
    """
    years = settings.default_horizon_years if years is None else years
    months = multi_month_summaries(transactions, loans, start_year, start_month, years * 12)

    result = HorizonSummary(start_year=start_year, start_month=start_month, months=len(months))
    for i in range(0, len(months), 12):
        chunk = months[i:i + 12]
        result.yearly.append(_rollup(chunk[0].year, chunk))

    for y in result.yearly:
        result.total_income += y.total_income
        result.total_expense += y.total_expense
    result.balance = result.total_income - result.total_expense
    return result


def cumulative_balance(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    year: int,
    month: int,
    since_year: int | None = None,
) -> Decimal:
    """Running sum of monthly balances from January of `since_year` to (year, month)."""
    since_year = settings.cumulative_since_year if since_year is None else since_year
    count = (year - since_year) * 12 + month
    if count <= 0:
        return ZERO
    summaries = multi_month_summaries(transactions, loans, since_year, 1, count)
    return sum((s.balance for s in summaries), ZERO)


def expense_by_category(
    transactions: Sequence[Transaction],
    loans: Sequence[Loan],
    year: int,
    limit: int | None = 5,
) -> list[tuple[str, Decimal]]:
    """Top expense categories for a calendar year, largest first.

    Totals cover every realized occurrence in the year. Loan interest is
    reported under its own key.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for month in range(1, 13):
        for t in occurrences_in_month(transactions, year, month):
            if t.category in EXPENSE_CATEGORIES:
                totals[t.category.value] += t.amount
        for p in loan_payments_for_month(loans, year, month):
            totals[LOAN_INTEREST_KEY] += p.interest

    ranked = sorted(
        ((k, v) for k, v in totals.items() if v > 0),
        key=lambda kv: kv[1],
        reverse=True,
    )
    return ranked if limit is None else ranked[:limit]


def net_worth(
    assets: Sequence[Asset],
    loans: Sequence[Loan],
    year: int,
    month: int,
) -> NetWorth:
    """Assets at current value minus principal outstanding after (year, month)."""
    total_assets = sum((a.current_value for a in assets), ZERO)
    total_debt = sum((remaining_balance(loan, year, month) for loan in loans), ZERO)
    return NetWorth(
        year=year,
        month=month,
        total_assets=total_assets,
        total_loan_balance=total_debt,
        net_worth=total_assets - total_debt,
    )
