"""Pydantic schemas for API response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from src.models.event import EventCategory, EventColor
from src.models.transaction import Category, RecurrenceType, TransactionType

_FROM_ENGINE = {"from_attributes": True}


class MonthSummaryResponse(BaseModel):
    model_config = _FROM_ENGINE

    year: int
    month: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    loan_interest: Decimal
    loan_principal: Decimal


class YearSummaryResponse(BaseModel):
    model_config = _FROM_ENGINE

    year: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    loan_interest: Decimal
    loan_principal: Decimal
    months: list[MonthSummaryResponse]


class HorizonSummaryResponse(BaseModel):
    model_config = _FROM_ENGINE

    start_year: int
    start_month: int
    months: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    yearly: list[YearSummaryResponse]


class OccurrenceResponse(BaseModel):
    model_config = _FROM_ENGINE

    id: str
    title: str
    amount: Decimal
    type: TransactionType
    category: Category
    date: date
    recurrence: RecurrenceType
    memo: str | None = None


class LoanPaymentResponse(BaseModel):
    model_config = _FROM_ENGINE

    loan_id: str
    loan_name: str
    date: date
    month_number: int
    principal: Decimal
    interest: Decimal
    total_payment: Decimal
    remaining_principal: Decimal


class LoanPaymentLookupResponse(BaseModel):
    """`payment` is null when the loan has nothing due that month."""
    loan_id: str
    year: int
    month: int
    payment: LoanPaymentResponse | None = None


class LoanYearResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class LoanScheduleResponse(BaseModel):
    loan_id: str
    loan_name: str
    first_payment: Decimal  # Installment #1 total
    total_interest: Decimal
    yearly: list[LoanYearResponse]
    payments: list[LoanPaymentResponse]


class LifeEventResponse(BaseModel):
    model_config = _FROM_ENGINE

    id: str
    title: str
    date: date
    category: EventCategory
    description: str | None = None
    is_important: bool
    color: EventColor


class NetWorthResponse(BaseModel):
    model_config = _FROM_ENGINE

    year: int
    month: int
    total_assets: Decimal
    total_loan_balance: Decimal
    net_worth: Decimal
