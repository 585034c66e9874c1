"""
Remote Loan Provider.

Calls the ``loan-schedule`` / ``loan-timeline`` edge functions over HTTP and
normalizes their JSON into the loan contracts.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.interfaces import LoanProvider
from src.integrations.contracts.loans import LoanSchedule, LoanTimeline
from src.integrations.policy.response_wrappers import (
    normalize_loan_schedule_response,
    normalize_loan_timeline_response,
)

logger = logging.getLogger(__name__)


class RemoteLoanProvider(LoanProvider):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("LOAN_FUNCTIONS_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("LOAN_FUNCTIONS_API_KEY", "")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def get_schedule(self, application_id: str) -> LoanSchedule:
        data = await self._invoke("loan-schedule", application_id)
        return normalize_loan_schedule_response(data, fallback_application_id=application_id)

    async def get_timeline(self, application_id: str) -> LoanTimeline:
        data = await self._invoke("loan-timeline", application_id)
        return normalize_loan_timeline_response(data, fallback_application_id=application_id)

    async def _invoke(self, function_name: str, application_id: str) -> Any:
        if not self.base_url:
            raise ValueError("LOAN_FUNCTIONS_URL is not configured.")

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["X-API-KEY"] = self.api_key

        url = f"{self.base_url}/{function_name}"
        logger.info("[LOANS] Invoking %s for application_id=%s", url, application_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, json={"applicationId": application_id}, headers=headers)
                response.raise_for_status()
                return response.json() if response.content else {}
        except httpx.HTTPStatusError as e:
            logger.error("[LOANS] %s returned %s: %s", function_name, e.response.status_code, e.response.text)
            raise
        except httpx.RequestError as e:
            logger.error("[LOANS] Request error calling %s: %s", function_name, e)
            raise
