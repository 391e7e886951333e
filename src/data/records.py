"""Pydantic schemas for the persisted storage document.

The stored shape is flat camelCase records with ISO `YYYY-MM-DD` dates and
plain numbers. Validation here is the boundary check; the engine assumes
every entity it receives has passed it.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from src.models.asset import Asset, AssetCategory
from src.models.event import EventCategory, EventColor, LifeEvent
from src.models.loan import Loan, RepaymentType
from src.models.transaction import Category, RecurrenceType, Transaction, TransactionType

_RECORD_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class TransactionRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    title: str
    amount: Decimal = Field(..., gt=0)
    type: TransactionType
    category: Category
    date: date
    recurrence: RecurrenceType = RecurrenceType.ONCE
    recurrence_end_date: date | None = None
    memo: str | None = None
    created_at: str | None = None

    @model_validator(mode="after")
    def validate_category(self) -> "TransactionRecord":
        """Income categories and expense categories are disjoint."""
        if self.category.transaction_type is not self.type:
            raise ValueError(
                f"category {self.category.value!r} does not match type {self.type.value!r}"
            )
        if self.recurrence_end_date is not None and self.recurrence_end_date < self.date:
            raise ValueError("recurrenceEndDate precedes the anchor date")
        return self

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            title=self.title,
            amount=self.amount,
            type=self.type,
            category=self.category,
            date=self.date,
            recurrence=self.recurrence,
            recurrence_end_date=self.recurrence_end_date,
            memo=self.memo,
            created_at=self.created_at,
        )


class LoanRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    name: str
    principal: Decimal = Field(..., gt=0)
    interest_rate: Decimal = Field(..., ge=0, description="Annual nominal rate in percent")
    repayment_type: RepaymentType
    term_months: int = Field(..., ge=1)
    start_date: date
    payment_day: int = Field(1, ge=1, le=28)
    memo: str | None = None
    created_at: str | None = None

    def to_domain(self) -> Loan:
        return Loan(
            id=self.id,
            name=self.name,
            principal=self.principal,
            interest_rate=self.interest_rate,
            repayment_type=self.repayment_type,
            term_months=self.term_months,
            start_date=self.start_date,
            payment_day=self.payment_day,
            memo=self.memo,
            created_at=self.created_at,
        )


class LifeEventRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    title: str
    date: date
    category: EventCategory = EventCategory.OTHER
    description: str | None = None
    is_important: bool = False
    color: EventColor = EventColor.BLUE
    created_at: str | None = None

    def to_domain(self) -> LifeEvent:
        return LifeEvent(
            id=self.id,
            title=self.title,
            date=self.date,
            category=self.category,
            description=self.description,
            is_important=self.is_important,
            color=self.color,
            created_at=self.created_at,
        )


class AssetRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: str
    name: str
    category: AssetCategory
    current_value: Decimal = Field(..., ge=0)
    purchase_value: Decimal | None = None
    purchase_date: date | None = None
    description: str | None = None
    memo: str | None = None
    created_at: str | None = None

    def to_domain(self) -> Asset:
        return Asset(
            id=self.id,
            name=self.name,
            category=self.category,
            current_value=self.current_value,
            purchase_value=self.purchase_value,
            purchase_date=self.purchase_date,
            description=self.description,
            memo=self.memo,
            created_at=self.created_at,
        )


class SnapshotRecord(BaseModel):
    """Top-level storage document. UI state keys (currentYear etc.) are ignored."""
    model_config = _RECORD_CONFIG

    transactions: list[TransactionRecord] = Field(default_factory=list)
    loans: list[LoanRecord] = Field(default_factory=list)
    events: list[LifeEventRecord] = Field(default_factory=list)
    assets: list[AssetRecord] = Field(default_factory=list)
