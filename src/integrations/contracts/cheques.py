"""
Cheque collection contracts.

Defines the structures used across the cheque collection flow:
- ChequeCollectionRequest (and its items, images and pickup details)
- the submit payload forwarded to the bank provider and its response
- the DTOs accepted by the cheque request routes

These contracts must be used by both:
- clients/mocks/cheques.py (in-memory request store)
- clients/real_http/cheque_collection.py (bank API adapter)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChequeCollectionStatus(str, Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    SCHEDULED = "SCHEDULED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class ChequeRequesterRole(str, Enum):
    PROPERTY_MANAGER = "PROPERTY_MANAGER"
    LANDLORD = "LANDLORD"
    AGENT = "AGENT"


class ChequeImageMimeType(str, Enum):
    JPEG = "image/jpeg"
    PNG = "image/png"
    PDF = "application/pdf"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class ChequeImageRef(CamelModel):
    id: str
    filename: str
    mime_type: ChequeImageMimeType
    size_bytes: int
    hash: str                                   # sha256 for real uploads
    url: Optional[str] = None                   # signed URL (mock/dev only)


class ChequeItem(CamelModel):
    id: str
    cheque_number: Optional[str] = None
    amount_aed: Optional[float] = Field(default=None, alias="amountAED")
    issuer_name: Optional[str] = None           # drawer
    bank_name: Optional[str] = None
    date: Optional[str] = None                  # ISO date
    landlord_id: str
    property_id: str
    images: List[ChequeImageRef] = Field(default_factory=list)
    notes: Optional[str] = None


class PreferredWindow(CamelModel):
    start: str
    end: str


class PickupDetails(CamelModel):
    # Drafts carry empty strings until the requester fills them in.
    contact_name: str = ""
    contact_phone: str = ""
    address_line1: str = ""
    address_line2: Optional[str] = None
    city: Optional[str] = None
    emirate: Optional[str] = None
    preferred_window: Optional[PreferredWindow] = None
    special_instructions: Optional[str] = None


class ChequeCollectionRequest(CamelModel):
    id: str                                     # CHQ-REQ-xxxx
    role: ChequeRequesterRole
    requester_user_id: str
    landlord_ids: List[str] = Field(default_factory=list)
    property_ids: List[str] = Field(default_factory=list)
    items: List[ChequeItem] = Field(default_factory=list)
    pickup: PickupDetails = Field(default_factory=PickupDetails)
    status: ChequeCollectionStatus = ChequeCollectionStatus.DRAFT
    scheduled_at: Optional[str] = None
    bank_ref: Optional[str] = None
    notes: Optional[str] = None
    created_at: str
    updated_at: str


# ---------------------------------------------------------------------------
# Bank provider payloads
# ---------------------------------------------------------------------------

class SubmitImageRef(CamelModel):
    file_id: str
    hash: str


class SubmitItem(CamelModel):
    cheque_number: Optional[str] = None
    amount_aed: Optional[float] = Field(default=None, alias="amountAED")
    issuer_name: Optional[str] = None
    bank_name: Optional[str] = None
    date: Optional[str] = None
    landlord_external_id: Optional[str] = None
    property_external_id: Optional[str] = None   # Houzez/WordPress id
    images: List[SubmitImageRef] = Field(default_factory=list)


class ChequeCollectionSubmitPayload(CamelModel):
    request_id: str
    pickup: PickupDetails
    items: List[SubmitItem]


class ChequeCollectionSubmitResponse(CamelModel):
    bank_ref: str
    scheduled_at: str


# ---------------------------------------------------------------------------
# API DTOs
# ---------------------------------------------------------------------------

class CreateChequeRequest(CamelModel):
    role: ChequeRequesterRole
    requester_user_id: str


class UpdateChequeRequest(CamelModel):
    """Partial update. Derived id sets, status and bank fields are not accepted."""

    items: Optional[List[ChequeItem]] = None
    pickup: Optional[PickupDetails] = None
    notes: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def derive_party_ids(items: List[ChequeItem]) -> Tuple[List[str], List[str]]:
    """Unique landlord and property ids referenced by ``items``, first-seen order."""
    landlord_ids = list(dict.fromkeys(item.landlord_id for item in items))
    property_ids = list(dict.fromkeys(item.property_id for item in items))
    return landlord_ids, property_ids


def validate_submission(request: ChequeCollectionRequest) -> List[str]:
    """
    Return a list of validation errors.
    Empty list means the request can be forwarded to the bank.
    """
    errors: List[str] = []

    if not request.items:
        errors.append("Request must have at least one cheque item")
    if not request.pickup.contact_name or not request.pickup.contact_phone:
        errors.append("Pickup details are incomplete")

    return errors


def build_submit_payload(request: ChequeCollectionRequest) -> ChequeCollectionSubmitPayload:
    """Project a stored request onto the shape the bank provider expects."""
    return ChequeCollectionSubmitPayload(
        request_id=request.id,
        pickup=request.pickup,
        items=[
            SubmitItem(
                cheque_number=item.cheque_number,
                amount_aed=item.amount_aed,
                issuer_name=item.issuer_name,
                bank_name=item.bank_name,
                date=item.date,
                landlord_external_id=item.landlord_id,
                property_external_id=item.property_id,
                images=[SubmitImageRef(file_id=image.id, hash=image.hash) for image in item.images],
            )
            for item in request.items
        ],
    )
