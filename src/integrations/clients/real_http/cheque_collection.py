"""
Real Cheque Collection HTTP Client.

Purpose:
- Forwards validated cheque collection requests to the bank's pickup API
- Returns the bank reference and the scheduled pickup time

Usage:
- Selected by src/api/dependencies.py when INTEGRATIONS_MODE=real
- Called by the cheque request store via the ChequeCollectionProvider interface

Status:
- The bank API contract has not been delivered yet. ``submit`` logs the
  attempt and raises until the HTTP call below is wired up.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from src.integrations.contracts.cheques import ChequeCollectionSubmitPayload, ChequeCollectionSubmitResponse
from src.integrations.contracts.interfaces import ChequeCollectionProvider

logger = logging.getLogger(__name__)


class HttpChequeCollectionProvider(ChequeCollectionProvider):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self.base_url = (base_url or os.getenv("CHEQUE_BANK_BASE_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("CHEQUE_BANK_API_KEY", "")
        self.timeout_seconds = timeout_seconds
        if not self.base_url:
            logger.warning("Cheque bank API URL is not set.")

    async def submit(
        self,
        payload: ChequeCollectionSubmitPayload,
        *,
        correlation_id: str,
    ) -> ChequeCollectionSubmitResponse:
        logger.info(
            "[HttpChequeCollectionProvider] Submitting cheque collection request request_id=%s items=%d correlation_id=%s",
            payload.request_id,
            len(payload.items),
            correlation_id,
        )

        # TODO: POST payload.to_wire() to f"{self.base_url}/cheque-collection" with httpx once the
        # bank publishes its API (Authorization: Bearer <api_key>, X-Correlation-ID header).
        raise NotImplementedError("HTTP Cheque Collection Provider not yet implemented")
