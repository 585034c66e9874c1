"""
Mock Cheque Collection Provider.

Purpose:
- Stands in for the bank's cheque pickup API during development
- Does NOT make any network calls
- Schedules every pickup for tomorrow at 10:30 (UTC)

Swap:
Replace with clients/real_http/cheque_collection.py when the bank API is available.
"""

from __future__ import annotations

import logging
import secrets
import string
from datetime import datetime, timedelta
from typing import Callable, Optional

from src.integrations.contracts.cheques import ChequeCollectionSubmitPayload, ChequeCollectionSubmitResponse
from src.integrations.contracts.interfaces import ChequeCollectionProvider
from src.utils.timestamps import epoch_millis, to_iso, utc_now

logger = logging.getLogger(__name__)

_REF_ALPHABET = string.ascii_uppercase + string.digits


def next_pickup_slot(now: datetime) -> datetime:
    """Tomorrow at 10:30:00.000 in the timezone of ``now``."""
    tomorrow = now + timedelta(days=1)
    return tomorrow.replace(hour=10, minute=30, second=0, microsecond=0)


def generate_bank_ref(now: Optional[datetime] = None) -> str:
    token = "".join(secrets.choice(_REF_ALPHABET) for _ in range(6))
    return f"BANK-CHQ-{epoch_millis(now)}-{token}"


class MockChequeCollectionProvider(ChequeCollectionProvider):
    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock

    async def submit(
        self,
        payload: ChequeCollectionSubmitPayload,
        *,
        correlation_id: str,
    ) -> ChequeCollectionSubmitResponse:
        now = self._clock()
        response = ChequeCollectionSubmitResponse(
            bank_ref=generate_bank_ref(now),
            scheduled_at=to_iso(next_pickup_slot(now)),
        )
        logger.info(
            "[BANK MOCK] Scheduled pickup request_id=%s items=%d bank_ref=%s correlation_id=%s",
            payload.request_id,
            len(payload.items),
            response.bank_ref,
            correlation_id,
        )
        return response
