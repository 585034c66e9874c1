"""
Cheque collection request endpoints (mock backend).

Backed by the in-memory MockChequeStore wired in src/api/main.py.
Send ``X-Error-Force-Code`` to exercise UI error paths.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header

from src.integrations.clients.mocks.cheques import MockChequeStore
from src.integrations.contracts.cheques import CreateChequeRequest, UpdateChequeRequest

router = APIRouter(prefix="/api/cheques", tags=["Cheques"])

# Will be set by main.py after import
cheque_store: MockChequeStore = None


def get_cheque_store() -> MockChequeStore:
    return cheque_store


ForceCode = Header(default=None, alias="X-Error-Force-Code")


@router.get("/requests")
async def list_cheque_requests(
    role: Optional[str] = None,
    userId: Optional[str] = None,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    requests = await store.list_requests(role=role, user_id=userId, force_code=force_code)
    return {"requests": [r.to_wire() for r in requests]}


@router.post("/requests", status_code=201)
async def create_cheque_request(
    body: CreateChequeRequest,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    request = await store.create_request(body.role, body.requester_user_id, force_code=force_code)
    return {"request": request.to_wire()}


@router.get("/requests/{request_id}")
async def get_cheque_request(
    request_id: str,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    request = await store.get_request(request_id, force_code=force_code)
    return {"request": request.to_wire()}


@router.put("/requests/{request_id}")
async def update_cheque_request(
    request_id: str,
    body: UpdateChequeRequest,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    request = await store.update_request(request_id, body, force_code=force_code)
    return {"request": request.to_wire()}


@router.post("/requests/{request_id}/upload", status_code=201)
async def upload_cheque_image(
    request_id: str,
    itemId: Optional[str] = None,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    image = await store.upload_image(request_id, item_id=itemId, force_code=force_code)
    return {"image": image.to_wire()}


@router.post("/requests/{request_id}/submit")
async def submit_cheque_request(
    request_id: str,
    force_code: Optional[str] = ForceCode,
    correlation_id: Optional[str] = Header(default=None, alias="X-Correlation-ID"),
    store: MockChequeStore = Depends(get_cheque_store),
):
    request = await store.submit_request(request_id, correlation_id=correlation_id, force_code=force_code)
    return {
        "request": request.to_wire(),
        "scheduledAt": request.scheduled_at,
        "bankRef": request.bank_ref,
    }


@router.post("/requests/{request_id}/cancel")
async def cancel_cheque_request(
    request_id: str,
    force_code: Optional[str] = ForceCode,
    store: MockChequeStore = Depends(get_cheque_store),
):
    request = await store.cancel_request(request_id, force_code=force_code)
    return {"request": request.to_wire()}
