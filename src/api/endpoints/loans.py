"""
Loan endpoints.

- /functions/v1/loan-schedule, /functions/v1/loan-timeline: edge functions that
  synthesize a security-deposit loan (POST ``{"applicationId": ...}``), with
  explicit CORS headers and preflight handling.
- /api/loans/{application_id}/schedule|timeline: read through the configured
  LoanProvider (local fixtures or the edge functions above).
"""

import json
import logging
from typing import Any, Dict

import httpx
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.error_handler import ERR_UPSTREAM_UNAVAILABLE, ApiError
from src.integrations.clients.mocks.loan_schedule import build_loan_schedule, build_loan_timeline
from src.integrations.contracts.interfaces import LoanProvider
from src.integrations.contracts.loans import LoanLookupRequest
from src.integrations.policy.response_wrappers import IntegrationResponseError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

functions_router = APIRouter(prefix="/functions/v1", tags=["Loan Functions"])
router = APIRouter(prefix="/api/loans", tags=["Loans"])

# Will be set by main.py after import
loan_provider: LoanProvider = None


def get_loan_provider() -> LoanProvider:
    return loan_provider


def _json_response(body: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=body, status_code=status_code, headers=CORS_HEADERS)


async def _read_lookup(request: Request) -> LoanLookupRequest:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = {}
    if not isinstance(body, dict):
        body = {}
    return LoanLookupRequest(**body)


# --------------------------------------------------------------------------- #
# Edge functions
# --------------------------------------------------------------------------- #
@functions_router.options("/loan-schedule")
@functions_router.options("/loan-timeline")
async def loan_function_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@functions_router.post("/loan-schedule")
async def loan_schedule_function(request: Request):
    try:
        lookup = await _read_lookup(request)
        schedule = build_loan_schedule(lookup.application_id)
        return _json_response(schedule.to_wire())
    except Exception:
        logger.exception("[loan-schedule] error")
        return _json_response({"error": "Failed to build schedule"}, 500)


@functions_router.post("/loan-timeline")
async def loan_timeline_function(request: Request):
    try:
        lookup = await _read_lookup(request)
        timeline = build_loan_timeline(lookup.application_id)
        return _json_response(timeline.to_wire())
    except Exception:
        logger.exception("[loan-timeline] error")
        return _json_response({"error": "Failed to build timeline"}, 500)


# --------------------------------------------------------------------------- #
# Provider-backed reads
# --------------------------------------------------------------------------- #
def _upstream_error(exc: Exception) -> ApiError:
    if isinstance(exc, IntegrationResponseError):
        return ApiError(
            ERR_UPSTREAM_UNAVAILABLE,
            f"Loan service returned an invalid response: {exc}",
            status_code=502,
            module="loans",
            retriable=False,
        )
    return ApiError(
        ERR_UPSTREAM_UNAVAILABLE,
        "Loan service is currently unavailable",
        status_code=503,
        module="loans",
        retriable=True,
    )


@router.get("/{application_id}/schedule")
async def get_loan_schedule(application_id: str, provider: LoanProvider = Depends(get_loan_provider)):
    try:
        schedule = await provider.get_schedule(application_id)
    except (httpx.HTTPError, ValueError) as exc:
        raise _upstream_error(exc) from exc
    return schedule.to_wire()


@router.get("/{application_id}/timeline")
async def get_loan_timeline(application_id: str, provider: LoanProvider = Depends(get_loan_provider)):
    try:
        timeline = await provider.get_timeline(application_id)
    except (httpx.HTTPError, ValueError) as exc:
        raise _upstream_error(exc) from exc
    return timeline.to_wire()
