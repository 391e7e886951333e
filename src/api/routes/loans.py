"""Loan routes: single-month lookups and full repayment schedules."""

from datetime import MAXYEAR, MINYEAR
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Path

from src.api.deps import get_store, load_snapshot
from src.api.schemas import (
    LoanPaymentLookupResponse,
    LoanPaymentResponse,
    LoanScheduleResponse,
    LoanYearResponse,
)
from src.data.store import SnapshotStore
from src.engine.amortization import payment_for_month, payment_schedule, yearly_loan_summary
from src.models.loan import Loan

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def _find_loan(store: SnapshotStore, loan_id: str) -> Loan:
    loan = load_snapshot(store).get_loan(loan_id)
    if loan is None:
        raise HTTPException(status_code=404, detail=f"Loan {loan_id} not found")
    return loan


@router.get("/{loan_id}/payments/{year}/{month}", response_model=LoanPaymentLookupResponse)
def get_loan_payment(
    loan_id: str,
    year: int = Path(..., ge=MINYEAR, le=MAXYEAR),
    month: int = Path(..., ge=1, le=12),
    store: SnapshotStore = Depends(get_store),
):
    """Payment due in the month; `payment` is null before the start or after maturity."""
    loan = _find_loan(store, loan_id)
    payment = payment_for_month(loan, year, month)
    return LoanPaymentLookupResponse(
        loan_id=loan.id,
        year=year,
        month=month,
        payment=LoanPaymentResponse.model_validate(payment) if payment is not None else None,
    )


@router.get("/{loan_id}/schedule", response_model=LoanScheduleResponse)
def get_loan_schedule(loan_id: str, store: SnapshotStore = Depends(get_store)):
    loan = _find_loan(store, loan_id)
    payments = payment_schedule(loan)
    return LoanScheduleResponse(
        loan_id=loan.id,
        loan_name=loan.name,
        first_payment=payments[0].total_payment,
        total_interest=sum((p.interest for p in payments), Decimal("0")),
        yearly=[LoanYearResponse(**{**y, "year": int(y["year"])}) for y in yearly_loan_summary(loan)],
        payments=[LoanPaymentResponse.model_validate(p) for p in payments],
    )
