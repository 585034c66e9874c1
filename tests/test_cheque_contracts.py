from src.integrations.contracts.cheques import (
    ChequeCollectionRequest,
    ChequeImageRef,
    ChequeItem,
    PickupDetails,
    UpdateChequeRequest,
    build_submit_payload,
    derive_party_ids,
    validate_submission,
)


def _item(item_id, landlord_id, property_id, **extra):
    return ChequeItem(id=item_id, landlord_id=landlord_id, property_id=property_id, **extra)


def _request(**overrides):
    data = {
        "id": "CHQ-REQ-9000",
        "role": "LANDLORD",
        "requester_user_id": "ll-009",
        "created_at": "2025-01-01T00:00:00.000Z",
        "updated_at": "2025-01-01T00:00:00.000Z",
    }
    data.update(overrides)
    return ChequeCollectionRequest(**data)


def test_item_serializes_camel_case_and_omits_unset_fields():
    item = _item("item-1", "LL-1", "PROP-1", amount_aed=1500.0, cheque_number="000001")

    wire = item.to_wire()

    assert wire == {
        "id": "item-1",
        "chequeNumber": "000001",
        "amountAED": 1500.0,
        "landlordId": "LL-1",
        "propertyId": "PROP-1",
        "images": [],
    }


def test_request_accepts_camel_case_payload():
    request = ChequeCollectionRequest.model_validate(
        {
            "id": "CHQ-REQ-1",
            "role": "AGENT",
            "requesterUserId": "agent-1",
            "landlordIds": [],
            "propertyIds": [],
            "items": [{"id": "i1", "landlordId": "LL-1", "propertyId": "P-1", "images": [], "amountAED": 10}],
            "pickup": {"contactName": "A", "contactPhone": "1", "addressLine1": "Street"},
            "status": "SUBMITTED",
            "createdAt": "2025-01-01T00:00:00.000Z",
            "updatedAt": "2025-01-01T00:00:00.000Z",
        }
    )

    assert request.requester_user_id == "agent-1"
    assert request.items[0].amount_aed == 10
    assert request.pickup.address_line1 == "Street"
    assert request.status.value == "SUBMITTED"


def test_derive_party_ids_is_unique_in_first_seen_order():
    items = [
        _item("a", "LL-2", "P-9"),
        _item("b", "LL-1", "P-9"),
        _item("c", "LL-2", "P-3"),
    ]

    landlord_ids, property_ids = derive_party_ids(items)

    assert landlord_ids == ["LL-2", "LL-1"]
    assert property_ids == ["P-9", "P-3"]


def test_validate_submission_reports_missing_items_first():
    errors = validate_submission(_request())

    assert errors == ["Request must have at least one cheque item", "Pickup details are incomplete"]


def test_validate_submission_requires_contact_name_and_phone_only():
    request = _request(
        items=[_item("a", "LL-1", "P-1")],
        pickup=PickupDetails(contact_name="Mona", contact_phone="+971500000000"),
    )

    # address line is not part of the submit check
    assert validate_submission(request) == []

    request.pickup.contact_phone = ""
    assert validate_submission(request) == ["Pickup details are incomplete"]


def test_build_submit_payload_maps_items_and_images():
    image = ChequeImageRef(id="img-9", filename="c.jpg", mime_type="image/jpeg", size_bytes=10, hash="hash-x")
    request = _request(
        items=[_item("a", "LL-1", "P-1", bank_name="ADCB", images=[image])],
        pickup=PickupDetails(contact_name="Mona", contact_phone="1", address_line1="Tower 2"),
    )

    payload = build_submit_payload(request).to_wire()

    assert payload["requestId"] == "CHQ-REQ-9000"
    assert payload["pickup"]["addressLine1"] == "Tower 2"
    assert payload["items"] == [
        {
            "bankName": "ADCB",
            "landlordExternalId": "LL-1",
            "propertyExternalId": "P-1",
            "images": [{"fileId": "img-9", "hash": "hash-x"}],
        }
    ]


def test_update_dto_ignores_derived_and_status_fields():
    dto = UpdateChequeRequest.model_validate(
        {"notes": "ring bell", "landlordIds": ["LL-X"], "status": "SCHEDULED", "bankRef": "B-1"}
    )

    assert dto.model_dump(exclude_unset=True) == {"notes": "ring bell"}
