import httpx
import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import select_loan_provider
from src.api.endpoints.loans import get_loan_provider
from src.integrations.clients.mocks.loans import LocalLoanProvider
from src.integrations.clients.real_http.loans import RemoteLoanProvider
from src.integrations.policy.response_wrappers import IntegrationResponseError
from src.utils.config_loader import load_app_config

TEST_API_KEY = "test-key"


# --------------------------------------------------------------------------- #
# Edge functions
# --------------------------------------------------------------------------- #
BROWSER_PREFLIGHT = {
    "Origin": "https://ui.example",
    "Access-Control-Request-Method": "POST",
    "Access-Control-Request-Headers": "apikey, content-type",
}


@pytest.mark.parametrize("path", ["/functions/v1/loan-schedule", "/functions/v1/loan-timeline"])
def test_loan_function_preflight_returns_function_cors_headers(app, path):
    with TestClient(app) as anonymous:
        response = anonymous.options(path, headers=BROWSER_PREFLIGHT)

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert response.headers["access-control-allow-headers"] == "authorization, x-client-info, apikey, content-type"
    assert "access-control-allow-credentials" not in response.headers


def test_loan_function_post_keeps_wildcard_origin(client):
    response = client.post(
        "/functions/v1/loan-schedule",
        json={"applicationId": "APP-2002"},
        headers={"Origin": "https://ui.example"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"


def test_api_routes_still_use_app_cors(app):
    with TestClient(app) as anonymous:
        response = anonymous.options("/api/cheques/requests", headers=BROWSER_PREFLIGHT)

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://ui.example"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_loan_schedule_function_defaults_application_id(client):
    response = client.post("/functions/v1/loan-schedule")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    body = response.json()
    assert body["applicationId"] == "APP-1001"
    assert len(body["installments"]) == 6
    assert body["installments"][1]["status"] == "OVERDUE"


def test_loan_schedule_function_ignores_non_json_body(client):
    response = client.post("/functions/v1/loan-schedule", content=b"not json")

    assert response.status_code == 200
    assert response.json()["applicationId"] == "APP-1001"


def test_loan_schedule_function_uses_requested_application(client):
    response = client.post("/functions/v1/loan-schedule", json={"applicationId": "APP-2002"})

    body = response.json()
    assert body["applicationId"] == "APP-2002"
    assert body["installments"][0]["id"] == "APP-2002-INST-1"
    assert body["installments"][1]["status"] == "PAID"


def test_loan_schedule_function_sends_integer_amounts(client):
    response = client.post("/functions/v1/loan-schedule", json={"applicationId": "APP-2002"})

    raw = response.text
    assert '"totalAmount":12000,' in raw
    assert '"amount":2000,' in raw
    assert "2000.0" not in raw


def test_loan_schedule_function_reports_failures(client):
    response = client.post("/functions/v1/loan-schedule", json={"applicationId": 1001})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to build schedule"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_loan_timeline_function(client):
    response = client.post("/functions/v1/loan-timeline", json={"applicationId": "APP-3003"})

    assert response.status_code == 200
    events = response.json()["events"]
    assert events[0]["type"] == "APPLICATION"
    assert events[-1]["installmentNumber"] == 6


# --------------------------------------------------------------------------- #
# Provider-backed routes
# --------------------------------------------------------------------------- #
def test_schedule_route_uses_local_fixtures_when_auth_disabled(app, client, monkeypatch):
    monkeypatch.setenv("AUTH_DISABLED", "true")
    provider = select_loan_provider(load_app_config())
    assert isinstance(provider, LocalLoanProvider)
    app.dependency_overrides[get_loan_provider] = lambda: provider

    response = client.get("/api/loans/APP-9/schedule")

    assert response.status_code == 200
    body = response.json()
    assert body["applicationId"] == "APP-9"
    assert body["totalAmount"] == 120000
    assert body["remainingBalance"] == 80000
    assert [it["id"] for it in body["installments"]] == ["inst-1", "inst-2", "inst-3"]


def test_timeline_route_uses_local_fixtures(client):
    response = client.get("/api/loans/APP-9/timeline")

    events = response.json()["events"]
    assert [e["type"] for e in events] == ["APPLICATION", "PREAPPROVED", "APPROVED", "DISBURSED"]
    assert events[3]["reference"] == "TXN-120000-001"


class _FailingProvider(LocalLoanProvider):
    def __init__(self, exc):
        self.exc = exc

    async def get_schedule(self, application_id):
        raise self.exc


def test_schedule_route_maps_transport_errors_to_upstream_unavailable(app, client):
    app.dependency_overrides[get_loan_provider] = lambda: _FailingProvider(httpx.ConnectError("refused"))

    response = client.get("/api/loans/APP-1/schedule")

    assert response.status_code == 503
    assert response.json()["error"] == {
        "code": "ERR_UPSTREAM_UNAVAILABLE",
        "message": "Loan service is currently unavailable",
        "module": "loans",
        "retriable": True,
    }


def test_schedule_route_maps_malformed_payload_to_bad_gateway(app, client):
    app.dependency_overrides[get_loan_provider] = lambda: _FailingProvider(IntegrationResponseError("bad shape"))

    response = client.get("/api/loans/APP-1/schedule")

    assert response.status_code == 502
    assert response.json()["error"]["retriable"] is False


# --------------------------------------------------------------------------- #
# RemoteLoanProvider
# --------------------------------------------------------------------------- #
@pytest.mark.asyncio
async def test_remote_provider_round_trips_through_edge_functions(app):
    provider = RemoteLoanProvider(
        base_url="http://testserver/functions/v1",
        api_key=TEST_API_KEY,
        transport=httpx.ASGITransport(app=app),
    )

    schedule = await provider.get_schedule("APP-1001")
    timeline = await provider.get_timeline("APP-1001")

    assert schedule.application_id == "APP-1001"
    assert len(schedule.installments) == 6
    assert schedule.total_amount == 12000
    assert timeline.events[3].type.value == "DISBURSED"


@pytest.mark.asyncio
async def test_remote_provider_raises_on_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "Failed to build schedule"}))
    provider = RemoteLoanProvider(base_url="http://loans.test", transport=transport)

    with pytest.raises(httpx.HTTPStatusError):
        await provider.get_schedule("APP-1")


@pytest.mark.asyncio
async def test_remote_provider_rejects_malformed_payload():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"totalAmount": 10}))
    provider = RemoteLoanProvider(base_url="http://loans.test", transport=transport)

    with pytest.raises(IntegrationResponseError):
        await provider.get_schedule("APP-1")


@pytest.mark.asyncio
async def test_remote_provider_keeps_fractional_amounts():
    payload = {
        "applicationId": "APP-7",
        "totalAmount": 5999.5,
        "totalPaid": 0,
        "remainingBalance": 5999.5,
        "installments": [{"id": "i-1", "dueDate": "2025-03-15T00:00:00.000Z", "amount": 5999.5, "status": "PENDING"}],
    }
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
    provider = RemoteLoanProvider(base_url="http://loans.test", transport=transport)

    schedule = await provider.get_schedule("APP-7")

    assert schedule.total_amount == 5999.5
    assert schedule.installments[0].amount == 5999.5
    assert schedule.to_wire()["totalPaid"] == 0


@pytest.mark.asyncio
async def test_remote_provider_sends_application_id_and_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = request.content
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"events": []})

    provider = RemoteLoanProvider(base_url="http://loans.test/", api_key="k-9", transport=httpx.MockTransport(handler))

    timeline = await provider.get_timeline("APP-5")

    assert seen["url"] == "http://loans.test/loan-timeline"
    assert b'"applicationId"' in seen["body"] and b"APP-5" in seen["body"]
    assert seen["auth"] == "Bearer k-9"
    assert timeline.application_id == "APP-5"
    assert timeline.events == []


@pytest.mark.asyncio
async def test_remote_provider_requires_base_url(monkeypatch):
    monkeypatch.delenv("LOAN_FUNCTIONS_URL", raising=False)
    provider = RemoteLoanProvider(base_url="")

    with pytest.raises(ValueError):
        await provider.get_schedule("APP-1")
