"""Canonical fixtures used across engine, store and API tests.

Records are written in the persisted storage shape (camelCase keys, ISO dates,
plain numbers) and converted through the same boundary schemas the store uses.

Fixture household: 3,000,000/month salary from Jan 2024, 800,000/month rent,
one 200,000 shopping expense in March 2024, a yearly 1,200,000 insurance
premium every March through 2026, and a 120,000,000 mortgage at 4.8% over
120 months.
"""

import pytest

from src.data.records import AssetRecord, LifeEventRecord, LoanRecord, TransactionRecord
from src.data.store import Snapshot

SALARY = {
    "id": "t-salary",
    "title": "Salary",
    "amount": 3000000,
    "type": "income",
    "category": "salary",
    "date": "2024-01-01",
    "recurrence": "monthly",
    "createdAt": "2024-01-01T09:00:00.000Z",
}

RENT = {
    "id": "t-rent",
    "title": "Rent",
    "amount": 800000,
    "type": "expense",
    "category": "rent",
    "date": "2024-01-05",
    "recurrence": "monthly",
    "createdAt": "2024-01-01T09:01:00.000Z",
}

SHOPPING = {
    "id": "t-shopping",
    "title": "Laptop",
    "amount": 200000,
    "type": "expense",
    "category": "shopping",
    "date": "2024-03-12",
    "recurrence": "once",
    "createdAt": "2024-03-12T20:00:00.000Z",
}

INSURANCE = {
    "id": "t-insurance",
    "title": "Car insurance",
    "amount": 1200000,
    "type": "expense",
    "category": "insurance",
    "date": "2024-03-15",
    "recurrence": "yearly",
    "recurrenceEndDate": "2026-03-15",
    "memo": "Renews every March",
    "createdAt": "2024-03-01T10:00:00.000Z",
}

MORTGAGE = {
    "id": "l-mortgage",
    "name": "Mortgage",
    "principal": 120000000,
    "interestRate": 4.8,
    "repaymentType": "equal_principal_interest",
    "termMonths": 120,
    "startDate": "2024-01-01",
    "paymentDay": 25,
    "createdAt": "2024-01-01T09:00:00.000Z",
}

BULLET = {
    "id": "l-bullet",
    "name": "Deposit loan",
    "principal": 50000000,
    "interestRate": 6,
    "repaymentType": "bullet",
    "termMonths": 12,
    "startDate": "2024-01-01",
    "paymentDay": 10,
}

EQUAL_PRINCIPAL = {
    "id": "l-car",
    "name": "Car loan",
    "principal": 12000000,
    "interestRate": 3.6,
    "repaymentType": "equal_principal",
    "termMonths": 12,
    "startDate": "2024-01-01",
    "paymentDay": 15,
}


LOAN_RECORDS = {
    "mortgage": MORTGAGE,
    "bullet": BULLET,
    "equal_principal": EQUAL_PRINCIPAL,
}


@pytest.fixture
def make_transaction():
    """Factory: salary record with camelCase overrides, as a Transaction."""
    def _make(**overrides):
        return TransactionRecord.model_validate({**SALARY, **overrides}).to_domain()
    return _make


@pytest.fixture
def make_loan():
    """Factory: named stored loan record with camelCase overrides, as a Loan."""
    def _make(base: str = "mortgage", **overrides):
        return LoanRecord.model_validate({**LOAN_RECORDS[base], **overrides}).to_domain()
    return _make


@pytest.fixture
def salary():
    return TransactionRecord.model_validate(SALARY).to_domain()


@pytest.fixture
def household_transactions():
    return tuple(
        TransactionRecord.model_validate(r).to_domain()
        for r in (SALARY, RENT, SHOPPING, INSURANCE)
    )


@pytest.fixture
def mortgage():
    return LoanRecord.model_validate(MORTGAGE).to_domain()


@pytest.fixture
def bullet_loan():
    return LoanRecord.model_validate(BULLET).to_domain()


@pytest.fixture
def equal_principal_loan():
    return LoanRecord.model_validate(EQUAL_PRINCIPAL).to_domain()


@pytest.fixture
def household_snapshot(household_transactions, mortgage):
    return Snapshot(
        transactions=household_transactions,
        loans=(mortgage,),
        events=(
            LifeEventRecord.model_validate({
                "id": "e-move",
                "title": "Move in",
                "category": "housing",
                "date": "2024-03-20",
                "isImportant": True,
                "color": "green",
            }).to_domain(),
            LifeEventRecord.model_validate({
                "id": "e-lease",
                "title": "Lease signed",
                "category": "contract",
                "date": "2024-03-02",
            }).to_domain(),
        ),
        assets=(
            AssetRecord.model_validate({
                "id": "a-apartment",
                "name": "Apartment",
                "category": "real_estate",
                "currentValue": 300000000,
                "purchaseValue": 280000000,
                "purchaseDate": "2024-01-01",
            }).to_domain(),
            AssetRecord.model_validate({
                "id": "a-savings",
                "name": "Savings",
                "category": "savings",
                "currentValue": 20000000,
            }).to_domain(),
        ),
    )
