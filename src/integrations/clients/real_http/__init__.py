"""
HTTP clients for the live bank and loan services.

- cheque_collection: POSTs submission payloads to the bank's pickup API
  (CHEQUE_BANK_BASE_URL / CHEQUE_BANK_API_KEY)
- loans: calls the loan-schedule and loan-timeline edge functions via httpx
  and validates the answers with response_wrappers

Each client implements the provider ABCs in contracts/interfaces.py and is
chosen by src/api/dependencies.py.
"""

from .cheque_collection import HttpChequeCollectionProvider
from .loans import RemoteLoanProvider

__all__ = ["HttpChequeCollectionProvider", "RemoteLoanProvider"]
