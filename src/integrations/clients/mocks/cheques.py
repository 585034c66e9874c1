"""
Cheque requests: MOCK backend.

⚠️  In-memory stand-in for the cheque collection backend. State lives in a
    plain list seeded from cheque_fixtures.py and is lost on restart.

Every operation:
- optionally sleeps to mimic network latency (see config/app_config.yml)
- honours a forced error code (X-Error-Force-Code) before touching state
- raises ApiError for 404 / 400 / upstream failures
"""

from __future__ import annotations

import asyncio
import logging
import random
import secrets
import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional

from src.error_handler import (
    ERR_UPSTREAM_UNAVAILABLE,
    ApiError,
    forced_error,
    not_found,
    validation_error,
)
from src.integrations.contracts.cheques import (
    ChequeCollectionRequest,
    ChequeCollectionStatus,
    ChequeImageMimeType,
    ChequeImageRef,
    ChequeRequesterRole,
    PickupDetails,
    UpdateChequeRequest,
    build_submit_payload,
    derive_party_ids,
    validate_submission,
)
from src.integrations.contracts.interfaces import ChequeCollectionProvider
from src.utils.config_loader import DEFAULT_DELAYS_MS
from src.utils.timestamps import epoch_millis, parse_iso, to_iso, utc_now

from .cheque_collection import MockChequeCollectionProvider
from .cheque_fixtures import FIRST_IMAGE_NUMBER, FIRST_REQUEST_NUMBER, build_seed_requests

logger = logging.getLogger(__name__)

class MockChequeStore:
    """
    Mock cheque collection backend.

    Parameters
    ----------
    provider : ChequeCollectionProvider
        Bank adapter used by ``submit``. Defaults to the in-process mock bank.
    simulate_latency : bool
        If True, each operation sleeps for its configured delay. Default True.
    delays_ms : dict
        Per-operation delay in milliseconds; missing keys fall back to the defaults.
    seed : list
        Initial requests. Defaults to the bundled fixtures.
    """

    def __init__(
        self,
        provider: Optional[ChequeCollectionProvider] = None,
        simulate_latency: bool = True,
        delays_ms: Optional[Dict[str, int]] = None,
        seed: Optional[List[ChequeCollectionRequest]] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._provider = provider or MockChequeCollectionProvider(clock=clock)
        self._simulate_latency = simulate_latency
        self._delays_ms = {**DEFAULT_DELAYS_MS, **(delays_ms or {})}
        self._clock = clock

        self._requests: List[ChequeCollectionRequest] = build_seed_requests() if seed is None else list(seed)
        self._next_request_number = FIRST_REQUEST_NUMBER
        self._next_image_number = FIRST_IMAGE_NUMBER

        logger.info(
            "[CHEQUES MOCK] Store initialised with %d requests (latency=%s, provider=%s)",
            len(self._requests),
            simulate_latency,
            type(self._provider).__name__,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _enter(self, operation: str, force_code: Optional[str]) -> None:
        if self._simulate_latency:
            delay_ms = self._delays_ms.get(operation, 0)
            logger.debug("[CHEQUES MOCK] Simulating %dms latency for %s", delay_ms, operation)
            await asyncio.sleep(delay_ms / 1000)

        error = forced_error(force_code)
        if error is not None:
            logger.info("[CHEQUES MOCK] Forcing %s on %s", error.code, operation)
            raise error

    def _index_of(self, request_id: str) -> int:
        for index, request in enumerate(self._requests):
            if request.id == request_id:
                return index
        raise not_found()

    def _now_iso(self) -> str:
        return to_iso(self._clock())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list_requests(
        self,
        role: Optional[str] = None,
        user_id: Optional[str] = None,
        force_code: Optional[str] = None,
    ) -> List[ChequeCollectionRequest]:
        await self._enter("list", force_code)
        logger.info("[CHEQUES MOCK] GET /api/cheques/requests role=%s user_id=%s", role, user_id)

        filtered = list(self._requests)
        if role:
            filtered = [r for r in filtered if r.role.value == role]
        if user_id:
            filtered = [r for r in filtered if r.requester_user_id == user_id]

        filtered.sort(key=lambda r: parse_iso(r.created_at), reverse=True)
        logger.info("[CHEQUES MOCK] Returning %d requests", len(filtered))
        return filtered

    async def get_request(self, request_id: str, force_code: Optional[str] = None) -> ChequeCollectionRequest:
        await self._enter("get", force_code)
        return self._requests[self._index_of(request_id)]

    async def create_request(
        self,
        role: ChequeRequesterRole,
        requester_user_id: str,
        force_code: Optional[str] = None,
    ) -> ChequeCollectionRequest:
        await self._enter("create", force_code)

        now = self._now_iso()
        request = ChequeCollectionRequest(
            id=f"CHQ-REQ-{self._next_request_number}",
            role=role,
            requester_user_id=requester_user_id,
            landlord_ids=[],
            property_ids=[],
            items=[],
            pickup=PickupDetails(contact_name="", contact_phone="", address_line1=""),
            status=ChequeCollectionStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
        self._next_request_number += 1
        self._requests.append(request)

        logger.info("[CHEQUES MOCK] Created new request: %s", request.id)
        return request

    async def update_request(
        self,
        request_id: str,
        changes: UpdateChequeRequest,
        force_code: Optional[str] = None,
    ) -> ChequeCollectionRequest:
        await self._enter("update", force_code)
        index = self._index_of(request_id)

        supplied = changes.model_dump(exclude_unset=True, exclude_none=True)
        merged = self._requests[index].model_copy(
            update={field: getattr(changes, field) for field in supplied}
        )
        merged.updated_at = self._now_iso()

        if changes.items is not None:
            merged.landlord_ids, merged.property_ids = derive_party_ids(changes.items)

        self._requests[index] = merged
        logger.info("[CHEQUES MOCK] Updated request %s fields=%s", request_id, sorted(supplied))
        return merged

    async def upload_image(
        self,
        request_id: str,
        item_id: Optional[str] = None,
        force_code: Optional[str] = None,
    ) -> ChequeImageRef:
        await self._enter("upload", force_code)
        index = self._index_of(request_id)

        image = ChequeImageRef(
            id=f"img-{self._next_image_number}",
            filename=f"cheque-{epoch_millis(self._clock())}.jpg",
            mime_type=ChequeImageMimeType.JPEG,
            size_bytes=random.randint(100_000, 599_999),
            hash=f"hash-{secrets.token_hex(3)}",
            url="/placeholder.svg",
        )
        self._next_image_number += 1

        if item_id:
            request = self._requests[index]
            for item in request.items:
                if item.id == item_id:
                    item.images.append(image)
                    request.updated_at = self._now_iso()
                    break
            else:
                logger.warning("[CHEQUES MOCK] Upload for unknown item %s on %s; image not attached", item_id, request_id)

        logger.info("[CHEQUES MOCK] Uploaded image %s for request %s", image.id, request_id)
        return image

    async def submit_request(
        self,
        request_id: str,
        correlation_id: Optional[str] = None,
        force_code: Optional[str] = None,
    ) -> ChequeCollectionRequest:
        await self._enter("submit", force_code)
        index = self._index_of(request_id)
        target = self._requests[index]

        errors = validate_submission(target)
        if errors:
            logger.info("[CHEQUES MOCK] Rejecting submit of %s: %s", request_id, "; ".join(errors))
            raise validation_error(errors[0])

        correlation_id = correlation_id or str(uuid.uuid4())
        payload = build_submit_payload(target)
        try:
            result = await self._provider.submit(payload, correlation_id=correlation_id)
        except ApiError:
            raise
        except Exception as exc:
            logger.error(
                "[CHEQUES MOCK] Bank provider failed for %s (correlation_id=%s): %s",
                request_id,
                correlation_id,
                exc,
            )
            raise ApiError(
                ERR_UPSTREAM_UNAVAILABLE,
                "Bank service is currently unavailable",
                status_code=503,
                retriable=True,
            ) from exc

        scheduled = target.model_copy(
            update={
                "status": ChequeCollectionStatus.SCHEDULED,
                "scheduled_at": result.scheduled_at,
                "bank_ref": result.bank_ref,
                "updated_at": self._now_iso(),
            }
        )
        self._requests[index] = scheduled

        logger.info("[CHEQUES MOCK] Request %s scheduled bank_ref=%s at %s", request_id, result.bank_ref, result.scheduled_at)
        return scheduled

    async def cancel_request(self, request_id: str, force_code: Optional[str] = None) -> ChequeCollectionRequest:
        await self._enter("cancel", force_code)
        index = self._index_of(request_id)

        cancelled = self._requests[index].model_copy(
            update={"status": ChequeCollectionStatus.CANCELLED, "updated_at": self._now_iso()}
        )
        self._requests[index] = cancelled

        logger.info("[CHEQUES MOCK] Cancelled request %s", request_id)
        return cancelled
