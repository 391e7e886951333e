"""CLI for inspecting projections from a saved timeline file.

Usage:
    python -m src.cli month 2025 6
    python -m src.cli year 2025
    python -m src.cli projection 2025 1 --years 30
    python -m src.cli schedule <loan-id>
    python -m src.cli --data path/to/finance-timeline.json month 2025 6
    python -m src.cli serve --port 8000
"""

import argparse
import logging
import sys
from datetime import MAXYEAR, MINYEAR

import uvicorn

from src.config import settings
from src.data.store import JsonFileStore, Snapshot, StoreError
from src.engine.aggregator import (
    cumulative_balance,
    expense_by_category,
    horizon_summary,
    month_summary,
    year_summary,
)
from src.engine.amortization import loan_payments_for_month, payment_schedule, yearly_loan_summary
from src.engine.recurrence import occurrences_in_month, within_calendar

logger = logging.getLogger(__name__)


def _fmt(amount) -> str:
    return f"{amount:>16,.0f}"


def _year(value: str) -> int:
    year = int(value)
    if not MINYEAR <= year <= MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be between {MINYEAR} and {MAXYEAR}")
    return year


def print_month(snap: Snapshot, year: int, month: int) -> None:
    summary = month_summary(snap.transactions, snap.loans, year, month)
    print(f"\n{'=' * 60}")
    print(f"  {year}-{month:02d}")
    print(f"{'=' * 60}")
    for t in occurrences_in_month(snap.transactions, year, month):
        sign = "+" if t.is_income else "-"
        print(f"  {t.date.isoformat()}  {t.title[:24]:<24} {sign}{_fmt(t.amount)}")
    for p in loan_payments_for_month(snap.loans, year, month):
        print(f"  {p.date.isoformat()}  {p.loan_name[:24]:<24} -{_fmt(p.interest)}  (#{p.month_number} interest)")
    print()
    print(f"  Income:     {_fmt(summary.total_income)}")
    print(f"  Expense:    {_fmt(summary.total_expense)}")
    print(f"  Balance:    {_fmt(summary.balance)}")
    print(f"  Cumulative: {_fmt(cumulative_balance(snap.transactions, snap.loans, year, month))}")
    print()


def print_year(snap: Snapshot, year: int) -> None:
    summary = year_summary(snap.transactions, snap.loans, year)
    print(f"\n{'=' * 60}")
    print(f"  {year}")
    print(f"{'=' * 60}")
    for m in summary.months:
        print(f"  {m.month:>2}  +{_fmt(m.total_income)}  -{_fmt(m.total_expense)}  ={_fmt(m.balance)}")
    print()
    print(f"  Income:         {_fmt(summary.total_income)}")
    print(f"  Expense:        {_fmt(summary.total_expense)}")
    print(f"  Balance:        {_fmt(summary.balance)}")
    print(f"  Loan interest:  {_fmt(summary.loan_interest)}")
    print(f"  Loan principal: {_fmt(summary.loan_principal)}")
    top = expense_by_category(snap.transactions, snap.loans, year)
    if top:
        print("\n  Top expenses:")
        for category, amount in top:
            print(f"    {category:>14}: {_fmt(amount)}")
    print()


def print_projection(snap: Snapshot, year: int, month: int, years: int) -> None:
    result = horizon_summary(snap.transactions, snap.loans, year, month, years)
    print(f"\n{'=' * 60}")
    print(f"  {years}-year projection from {year}-{month:02d}")
    print(f"{'=' * 60}")
    for y in result.yearly:
        print(f"  {y.year}  +{_fmt(y.total_income)}  -{_fmt(y.total_expense)}  ={_fmt(y.balance)}")
    print()
    print(f"  Total balance: {_fmt(result.balance)}")
    print()


def print_schedule(snap: Snapshot, loan_id: str) -> bool:
    loan = snap.get_loan(loan_id)
    if loan is None:
        print(f"Loan {loan_id} not found", file=sys.stderr)
        return False
    print(f"\n  {loan.name} ({loan.repayment_type.value}, {loan.term_months} months)\n")
    for p in payment_schedule(loan):
        print(
            f"  {p.month_number:>4}  {p.date.isoformat()}"
            f"  {_fmt(p.principal)}  {_fmt(p.interest)}  {_fmt(p.total_payment)}  {_fmt(p.remaining_principal)}"
        )
    print("\n  Yearly:")
    for y in yearly_loan_summary(loan):
        print(
            f"  {int(y['year']):>4}  {_fmt(y['principal'])}  {_fmt(y['interest'])}"
            f"  {_fmt(y['debt_service'])}  {_fmt(y['ending_balance'])}"
        )
    print()
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Finance timeline projections")
    parser.add_argument("--data", default=settings.data_file, help="Timeline JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_month = sub.add_parser("month", help="Transactions and summary for one month")
    p_month.add_argument("year", type=_year)
    p_month.add_argument("month", type=int, choices=range(1, 13))

    p_year = sub.add_parser("year", help="Twelve-month view of a calendar year")
    p_year.add_argument("year", type=_year)

    p_proj = sub.add_parser("projection", help="Multi-year outlook")
    p_proj.add_argument("year", type=_year)
    p_proj.add_argument("month", type=int, choices=range(1, 13))
    p_proj.add_argument("--years", type=int, default=settings.default_horizon_years)

    p_sched = sub.add_parser("schedule", help="Full repayment schedule for a loan")
    p_sched.add_argument("loan_id")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    if args.command == "projection" and not within_calendar(args.year, args.month, args.years * 12):
        parser.error(f"a {args.years}-year projection from {args.year}-{args.month:02d} runs past year {MAXYEAR}")
    logging.basicConfig(level=settings.log_level)
    logger.debug("Running %s against %s", args.command, args.data)

    if args.command == "serve":
        settings.data_file = args.data
        uvicorn.run("src.api.app:app", host=args.host, port=args.port, log_level=settings.log_level.lower())
        return 0

    try:
        snap = JsonFileStore(args.data).snapshot()
    except StoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "month":
        print_month(snap, args.year, args.month)
    elif args.command == "year":
        print_year(snap, args.year)
    elif args.command == "projection":
        print_projection(snap, args.year, args.month, args.years)
    elif args.command == "schedule":
        return 0 if print_schedule(snap, args.loan_id) else 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
