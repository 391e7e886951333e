"""Timeline routes: month, year and multi-year projections."""

from datetime import MAXYEAR, MINYEAR
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from src.api.deps import get_store, load_snapshot
from src.api.schemas import (
    HorizonSummaryResponse,
    LifeEventResponse,
    LoanPaymentResponse,
    MonthSummaryResponse,
    NetWorthResponse,
    OccurrenceResponse,
    YearSummaryResponse,
)
from src.config import settings
from src.data.store import SnapshotStore
from src.engine.aggregator import (
    horizon_summary,
    month_summary,
    multi_month_summaries,
    net_worth,
    year_summary,
)
from src.engine.amortization import loan_payments_for_month
from src.engine.recurrence import events_in_month, occurrences_in_month, within_calendar

router = APIRouter(prefix="/api/v1", tags=["timeline"])

Year = Annotated[int, Path(ge=MINYEAR, le=MAXYEAR)]
Month = Annotated[int, Path(ge=1, le=12)]
StartYear = Annotated[int, Query(ge=MINYEAR, le=MAXYEAR)]


def _check_range(start_year: int, start_month: int, count: int) -> None:
    if not within_calendar(start_year, start_month, count):
        raise HTTPException(
            status_code=422,
            detail=f"{count} months from {start_year}-{start_month:02d} runs past year {MAXYEAR}",
        )


@router.get("/months/{year}/{month}", response_model=MonthSummaryResponse)
def get_month_summary(year: Year, month: Month, store: SnapshotStore = Depends(get_store)):
    """Income, expense (including loan interest) and balance for one month."""
    snap = load_snapshot(store)
    return MonthSummaryResponse.model_validate(
        month_summary(snap.transactions, snap.loans, year, month)
    )


@router.get("/months/{year}/{month}/transactions", response_model=list[OccurrenceResponse])
def get_month_transactions(year: Year, month: Month, store: SnapshotStore = Depends(get_store)):
    """Transactions realized in the month, recurring ones resolved to their date."""
    snap = load_snapshot(store)
    return [
        OccurrenceResponse.model_validate(t)
        for t in occurrences_in_month(snap.transactions, year, month)
    ]


@router.get("/months/{year}/{month}/loan-payments", response_model=list[LoanPaymentResponse])
def get_month_loan_payments(year: Year, month: Month, store: SnapshotStore = Depends(get_store)):
    snap = load_snapshot(store)
    return [
        LoanPaymentResponse.model_validate(p)
        for p in loan_payments_for_month(snap.loans, year, month)
    ]


@router.get("/months/{year}/{month}/events", response_model=list[LifeEventResponse])
def get_month_events(year: Year, month: Month, store: SnapshotStore = Depends(get_store)):
    snap = load_snapshot(store)
    return [LifeEventResponse.model_validate(e) for e in events_in_month(snap.events, year, month)]


@router.get("/summaries", response_model=list[MonthSummaryResponse])
def get_summaries(
    start_year: StartYear,
    start_month: int = Query(..., ge=1, le=12),
    count: int = Query(12, ge=1, le=settings.max_projection_months),
    store: SnapshotStore = Depends(get_store),
):
    """Consecutive month summaries, e.g. 12 for a year view or 360 for 30 years."""
    _check_range(start_year, start_month, count)
    snap = load_snapshot(store)
    return [
        MonthSummaryResponse.model_validate(s)
        for s in multi_month_summaries(snap.transactions, snap.loans, start_year, start_month, count)
    ]


@router.get("/years/{year}", response_model=YearSummaryResponse)
def get_year_summary(year: Year, store: SnapshotStore = Depends(get_store)):
    snap = load_snapshot(store)
    return YearSummaryResponse.model_validate(year_summary(snap.transactions, snap.loans, year))


@router.get("/projection", response_model=HorizonSummaryResponse)
def get_projection(
    start_year: StartYear,
    start_month: int = Query(1, ge=1, le=12),
    years: int = Query(
        settings.default_horizon_years, ge=1, le=settings.max_projection_months // 12
    ),
    store: SnapshotStore = Depends(get_store),
):
    """Multi-year outlook with per-year rollups."""
    _check_range(start_year, start_month, years * 12)
    snap = load_snapshot(store)
    return HorizonSummaryResponse.model_validate(
        horizon_summary(snap.transactions, snap.loans, start_year, start_month, years)
    )


@router.get("/net-worth/{year}/{month}", response_model=NetWorthResponse)
def get_net_worth(year: Year, month: Month, store: SnapshotStore = Depends(get_store)):
    snap = load_snapshot(store)
    return NetWorthResponse.model_validate(net_worth(snap.assets, snap.loans, year, month))
