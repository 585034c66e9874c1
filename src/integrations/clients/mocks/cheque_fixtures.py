"""Seed data for the in-memory cheque request store."""

from __future__ import annotations

from typing import List

from src.integrations.contracts.cheques import (
    ChequeCollectionRequest,
    ChequeCollectionStatus,
    ChequeImageMimeType,
    ChequeImageRef,
    ChequeItem,
    ChequeRequesterRole,
    PickupDetails,
    PreferredWindow,
)

# First ids handed out after the seeded fixtures.
FIRST_REQUEST_NUMBER = 1004
FIRST_IMAGE_NUMBER = 5


def build_seed_requests() -> List[ChequeCollectionRequest]:
    """Fresh copies of the seeded requests (callers may mutate them)."""
    return [
        ChequeCollectionRequest(
            id="CHQ-REQ-1001",
            role=ChequeRequesterRole.PROPERTY_MANAGER,
            requester_user_id="pm-001",
            landlord_ids=["LL-001", "LL-002"],
            property_ids=["PROP-101", "PROP-205"],
            items=[
                ChequeItem(
                    id="item-1",
                    cheque_number="000123",
                    amount_aed=25000,
                    issuer_name="Ahmed Al Mansouri",
                    bank_name="Emirates NBD",
                    date="2024-02-01",
                    landlord_id="LL-001",
                    property_id="PROP-101",
                    images=[
                        ChequeImageRef(
                            id="img-1",
                            filename="cheque-000123-front.jpg",
                            mime_type=ChequeImageMimeType.JPEG,
                            size_bytes=245760,
                            hash="hash-a1b2c3",
                            url="/placeholder.svg",
                        ),
                        ChequeImageRef(
                            id="img-2",
                            filename="cheque-000123-back.jpg",
                            mime_type=ChequeImageMimeType.JPEG,
                            size_bytes=198432,
                            hash="hash-d4e5f6",
                            url="/placeholder.svg",
                        ),
                    ],
                ),
                ChequeItem(
                    id="item-2",
                    cheque_number="000124",
                    amount_aed=18500,
                    issuer_name="Sara Khalid",
                    bank_name="ADCB",
                    date="2024-02-05",
                    landlord_id="LL-002",
                    property_id="PROP-205",
                    images=[
                        ChequeImageRef(
                            id="img-3",
                            filename="cheque-000124.png",
                            mime_type=ChequeImageMimeType.PNG,
                            size_bytes=312004,
                            hash="hash-0f9e8d",
                            url="/placeholder.svg",
                        ),
                    ],
                ),
            ],
            pickup=PickupDetails(
                contact_name="Omar Haddad",
                contact_phone="+971501234567",
                address_line1="Office 1204, Bay Square Building 3",
                city="Dubai",
                emirate="Dubai",
                preferred_window=PreferredWindow(start="2024-02-10T09:00:00.000Z", end="2024-02-10T12:00:00.000Z"),
            ),
            status=ChequeCollectionStatus.SCHEDULED,
            scheduled_at="2024-02-10T10:30:00.000Z",
            bank_ref="BANK-CHQ-1707300000000-X7K2QP",
            created_at="2024-02-08T08:15:00.000Z",
            updated_at="2024-02-09T11:02:00.000Z",
        ),
        ChequeCollectionRequest(
            id="CHQ-REQ-1002",
            role=ChequeRequesterRole.LANDLORD,
            requester_user_id="ll-001",
            landlord_ids=["LL-001"],
            property_ids=["PROP-101"],
            items=[
                ChequeItem(
                    id="item-3",
                    cheque_number="004567",
                    amount_aed=42000,
                    issuer_name="Priya Nair",
                    bank_name="Mashreq",
                    date="2024-03-01",
                    landlord_id="LL-001",
                    property_id="PROP-101",
                    images=[
                        ChequeImageRef(
                            id="img-4",
                            filename="cheque-004567.pdf",
                            mime_type=ChequeImageMimeType.PDF,
                            size_bytes=402112,
                            hash="hash-77aa10",
                        ),
                    ],
                    notes="Post-dated, deposit on due date",
                ),
            ],
            pickup=PickupDetails(
                contact_name="Khalid Al Suwaidi",
                contact_phone="+971559876543",
                address_line1="Villa 18, Street 7, Al Barsha 2",
                city="Dubai",
                emirate="Dubai",
            ),
            status=ChequeCollectionStatus.DRAFT,
            created_at="2024-02-12T14:40:00.000Z",
            updated_at="2024-02-12T14:55:00.000Z",
        ),
        ChequeCollectionRequest(
            id="CHQ-REQ-1003",
            role=ChequeRequesterRole.AGENT,
            requester_user_id="agent-007",
            landlord_ids=[],
            property_ids=[],
            items=[],
            pickup=PickupDetails(),
            status=ChequeCollectionStatus.CANCELLED,
            created_at="2024-01-20T07:05:00.000Z",
            updated_at="2024-01-21T09:30:00.000Z",
        ),
    ]
