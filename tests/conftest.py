"""Pytest fixtures for cheque store, provider and API tests."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from src.api.endpoints.cheques import get_cheque_store
from src.api.endpoints.loans import get_loan_provider
from src.integrations.clients.mocks.cheques import MockChequeStore
from src.integrations.clients.mocks.loans import LocalLoanProvider

TEST_API_KEY = "test-key"


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    """In-memory cheque store with fixtures, no simulated latency."""
    return MockChequeStore(simulate_latency=False, clock=clock)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("API_KEYS", TEST_API_KEY)
    monkeypatch.delenv("AUTH_DISABLED", raising=False)
    from src.api.main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, store):
    app.dependency_overrides[get_cheque_store] = lambda: store
    app.dependency_overrides[get_loan_provider] = lambda: LocalLoanProvider()
    with TestClient(app, headers={"X-API-KEY": TEST_API_KEY}) as test_client:
        yield test_client
