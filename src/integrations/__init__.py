"""
Integrations layer.
This package contains all code used to communicate with external systems such as:
- The bank's cheque pickup API (cheque collection submissions)
- The loan edge functions (installment schedules and timelines)

Key rule:
- Routes MUST NOT call external APIs directly.
- Routes should call integration clients (under src/integrations/clients).
- We use MOCK clients during development and swap to REAL_HTTP clients when APIs are available.

Switching implementations:
- The selection of mock vs real clients should happen in ONE place (src/api/dependencies.py).
"""

from .contracts.cheques import (
    ChequeCollectionRequest,
    ChequeCollectionStatus,
    ChequeCollectionSubmitPayload,
    ChequeCollectionSubmitResponse,
    ChequeImageRef,
    ChequeItem,
    ChequeRequesterRole,
    PickupDetails,
    build_submit_payload,
    derive_party_ids,
    validate_submission,
)
from .contracts.interfaces import ChequeCollectionProvider, LoanProvider
from .contracts.loans import (
    Installment,
    InstallmentStatus,
    LoanSchedule,
    LoanTimeline,
    TimelineEvent,
    TimelineEventType,
)

__all__ = [
    # cheques
    "ChequeCollectionRequest", "ChequeCollectionStatus", "ChequeCollectionSubmitPayload",
    "ChequeCollectionSubmitResponse", "ChequeImageRef", "ChequeItem",
    "ChequeRequesterRole", "PickupDetails",
    "build_submit_payload", "derive_party_ids", "validate_submission",
    # providers
    "ChequeCollectionProvider", "LoanProvider",
    # loans
    "Installment", "InstallmentStatus", "LoanSchedule", "LoanTimeline",
    "TimelineEvent", "TimelineEventType",
]
