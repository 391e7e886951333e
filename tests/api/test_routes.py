import inspect
from decimal import Decimal

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.deps import get_store
from src.data.store import InMemoryStore, StoreError
from src.engine.amortization import payment_for_month


class BrokenStore(InMemoryStore):
    def snapshot(self):
        raise StoreError("invalid records in test.json")


@pytest.fixture
def client(household_snapshot):
    app.dependency_overrides[get_store] = lambda: InMemoryStore(household_snapshot)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _d(value) -> Decimal:
    return Decimal(str(value))


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestMonthRoutes:
    def test_month_summary(self, client, mortgage):
        body = client.get("/api/v1/months/2024/3").json()
        interest = payment_for_month(mortgage, 2024, 3).interest
        assert (body["year"], body["month"]) == (2024, 3)
        assert _d(body["total_income"]) == Decimal("3000000")
        assert _d(body["total_expense"]) == Decimal("2200000") + interest
        assert _d(body["balance"]) == _d(body["total_income"]) - _d(body["total_expense"])

    def test_invalid_month(self, client):
        assert client.get("/api/v1/months/2024/13").status_code == 422
        assert client.get("/api/v1/months/2024/0").status_code == 422

    def test_transactions_resolved(self, client):
        body = client.get("/api/v1/months/2025/6/transactions").json()
        assert [(t["id"], t["date"]) for t in body] == [
            ("t-salary", "2025-06-01"),
            ("t-rent", "2025-06-05"),
        ]
        assert body[0]["type"] == "income"
        assert body[0]["recurrence"] == "monthly"

    def test_loan_payments(self, client):
        body = client.get("/api/v1/months/2024/1/loan-payments").json()
        assert len(body) == 1
        assert body[0]["date"] == "2024-01-25"
        assert body[0]["month_number"] == 1
        assert abs(_d(body[0]["interest"]) - Decimal("480000")) <= 1

    def test_events(self, client):
        body = client.get("/api/v1/months/2024/3/events").json()
        assert [e["id"] for e in body] == ["e-lease", "e-move"]
        assert body[1]["color"] == "green"


class TestProjectionRoutes:
    def test_summaries(self, client):
        body = client.get("/api/v1/summaries", params={"start_year": 2024, "start_month": 11, "count": 24}).json()
        assert len(body) == 24
        assert (body[2]["year"], body[2]["month"]) == (2025, 1)

    def test_summaries_count_bounded(self, client):
        resp = client.get("/api/v1/summaries", params={"start_year": 2024, "start_month": 1, "count": 100000})
        assert resp.status_code == 422

    def test_summaries_past_last_year_rejected(self, client):
        resp = client.get("/api/v1/summaries", params={"start_year": 9999, "start_month": 6, "count": 12})
        assert resp.status_code == 422

    def test_summaries_ending_in_last_year(self, client):
        resp = client.get("/api/v1/summaries", params={"start_year": 9999, "start_month": 1, "count": 12})
        assert resp.status_code == 200
        assert (resp.json()[-1]["year"], resp.json()[-1]["month"]) == (9999, 12)

    def test_projection_past_last_year_rejected(self, client):
        resp = client.get("/api/v1/projection", params={"start_year": 9990, "years": 30})
        assert resp.status_code == 422

    def test_year_out_of_calendar(self, client):
        assert client.get("/api/v1/years/0").status_code == 422
        assert client.get("/api/v1/years/10000").status_code == 422
        assert client.get("/api/v1/months/0/1").status_code == 422
        assert client.get("/api/v1/net-worth/10000/1").status_code == 422
        assert client.get("/api/v1/summaries", params={"start_year": 0, "start_month": 1}).status_code == 422

    def test_year(self, client):
        body = client.get("/api/v1/years/2024").json()
        assert len(body["months"]) == 12
        assert _d(body["total_income"]) == Decimal("36000000")

    def test_projection(self, client):
        body = client.get("/api/v1/projection", params={"start_year": 2024, "years": 5}).json()
        assert body["months"] == 60
        assert [y["year"] for y in body["yearly"]] == [2024, 2025, 2026, 2027, 2028]

    def test_net_worth(self, client):
        body = client.get("/api/v1/net-worth/2023/12").json()
        assert _d(body["total_assets"]) == Decimal("320000000")
        assert _d(body["net_worth"]) == Decimal("200000000")


class TestLoanRoutes:
    def test_payment_lookup(self, client):
        body = client.get("/api/v1/loans/l-mortgage/payments/2024/2").json()
        assert body["payment"]["month_number"] == 2

    def test_not_applicable_is_null(self, client):
        resp = client.get("/api/v1/loans/l-mortgage/payments/2040/1")
        assert resp.status_code == 200
        assert resp.json()["payment"] is None

    def test_unknown_loan(self, client):
        assert client.get("/api/v1/loans/missing/payments/2024/1").status_code == 404
        assert client.get("/api/v1/loans/missing/schedule").status_code == 404

    def test_schedule(self, client):
        body = client.get("/api/v1/loans/l-mortgage/schedule").json()
        assert len(body["payments"]) == 120
        assert _d(body["payments"][-1]["remaining_principal"]) == 0
        assert _d(body["total_interest"]) == sum(_d(p["interest"]) for p in body["payments"])

    def test_schedule_yearly_rollup(self, client):
        body = client.get("/api/v1/loans/l-mortgage/schedule").json()
        assert [y["year"] for y in body["yearly"]] == list(range(2024, 2034))
        assert _d(body["yearly"][-1]["ending_balance"]) == 0
        assert sum(_d(y["interest"]) for y in body["yearly"]) == _d(body["total_interest"])

    def test_payment_year_out_of_calendar(self, client):
        assert client.get("/api/v1/loans/l-mortgage/payments/0/1").status_code == 422


class TestStoreErrors:
    def test_store_error_is_500(self):
        app.dependency_overrides[get_store] = lambda: BrokenStore()
        try:
            resp = TestClient(app).get("/api/v1/months/2024/1")
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 500
        assert "invalid records" in resp.json()["detail"]


class TestHandlers:
    def test_api_handlers_run_in_threadpool(self):
        # Plain def handlers run in the threadpool
        endpoints = [r.endpoint for r in app.routes if isinstance(r, APIRoute) and r.path.startswith("/api/")]
        assert endpoints
        assert not any(inspect.iscoroutinefunction(e) for e in endpoints)
