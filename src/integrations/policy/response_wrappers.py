from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.integrations.contracts.loans import LoanSchedule, LoanTimeline


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


def normalize_loan_schedule_response(raw: Any, *, fallback_application_id: str) -> LoanSchedule:
    data = _require_object(raw, "loan schedule")
    if "error" in data:
        raise IntegrationResponseError(f"Loan schedule function returned an error: {data['error']}", payload=data)

    payload = {**data}
    payload.setdefault("applicationId", fallback_application_id)
    if not isinstance(payload.get("installments"), list):
        raise IntegrationResponseError("Loan schedule is missing its installments list.", payload=data)

    schedule = _build_model(LoanSchedule, payload, data)
    if schedule.total_amount < 0 or schedule.total_paid < 0:
        raise IntegrationResponseError(
            f"Loan schedule amounts must be >= 0; got total={schedule.total_amount} paid={schedule.total_paid}.",
            payload=data,
        )
    return schedule


def normalize_loan_timeline_response(raw: Any, *, fallback_application_id: str) -> LoanTimeline:
    data = _require_object(raw, "loan timeline")
    if "error" in data:
        raise IntegrationResponseError(f"Loan timeline function returned an error: {data['error']}", payload=data)

    payload = {**data}
    payload.setdefault("applicationId", fallback_application_id)
    if not isinstance(payload.get("events"), list):
        raise IntegrationResponseError("Loan timeline is missing its events list.", payload=data)

    return _build_model(LoanTimeline, payload, data)


def _require_object(raw: Any, label: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise IntegrationResponseError(f"Expected a JSON object for {label} response; got {type(raw).__name__}.")
    return raw


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
