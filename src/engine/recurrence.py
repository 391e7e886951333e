"""Recurring transaction projection.

Pure functions: stored transactions in, per-month occurrences out. No I/O.
Occurrences are never materialized; each month is derived from the anchor.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date
from typing import Iterable

from src.models.event import LifeEvent
from src.models.transaction import RecurrenceType, Transaction


def month_start(year: int, month: int) -> date:
    return date(year, month, 1)


def month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def resolve_day(year: int, month: int, day: int) -> date:
    """Date for (year, month, day), clamped to the last day of the month.

    An anchor on the 31st resolves to the 30th in April and to the 28th or
    29th in February.
    """
    last = month_end(year, month)
    return last if day >= last.day else date(year, month, day)


def add_months(year: int, month: int, n: int) -> tuple[int, int]:
    """(year, month) shifted by n months, rolling over year boundaries."""
    index = year * 12 + (month - 1) + n
    return index // 12, index % 12 + 1


def within_calendar(start_year: int, start_month: int, count: int) -> bool:
    """True if `count` months from (start_year, start_month) stay in years 1..9999."""
    end_year, _ = add_months(start_year, start_month, max(count, 1) - 1)
    return MINYEAR <= start_year and end_year <= MAXYEAR


def months_between(start: date, year: int, month: int) -> int:
    """1-indexed month number of (year, month) counted from start's month.

    The start month itself is 1. Zero or negative means the target precedes it.
    """
    return (year - start.year) * 12 + (month - start.month) + 1


def _in_window(txn: Transaction, candidate: date) -> bool:
    if candidate < txn.date:
        return False
    if txn.recurrence_end_date is not None and candidate > txn.recurrence_end_date:
        return False
    return True


def occurrence_date(txn: Transaction, year: int, month: int) -> date | None:
    """Resolved date of txn in (year, month), or None if it does not occur."""
    if not txn.is_recurring:
        if txn.date.year == year and txn.date.month == month:
            return txn.date
        return None

    if txn.recurrence is RecurrenceType.YEARLY and txn.date.month != month:
        return None

    candidate = resolve_day(year, month, txn.date.day)
    return candidate if _in_window(txn, candidate) else None


def occurrences_in_month(
    transactions: Iterable[Transaction], year: int, month: int
) -> list[Transaction]:
    """Transactions that materialize in (year, month), sorted by resolved date.

    Recurring transactions are returned as copies carrying the resolved date.
    The sort is stable, so same-day occurrences keep their input order.
    """
    result: list[Transaction] = []
    for txn in transactions:
        resolved = occurrence_date(txn, year, month)
        if resolved is None:
            continue
        result.append(txn if resolved == txn.date else txn.on(resolved))
    result.sort(key=lambda t: t.date)
    return result


def events_in_month(events: Iterable[LifeEvent], year: int, month: int) -> list[LifeEvent]:
    """Life events dated within (year, month), sorted by date."""
    first, last = month_start(year, month), month_end(year, month)
    matched = [e for e in events if first <= e.date <= last]
    matched.sort(key=lambda e: e.date)
    return matched
