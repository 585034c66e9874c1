"""
In-process stand-ins for the bank and loan services.

- cheques: the in-memory cheque request store behind /api/cheques
- cheque_collection: fake bank that books tomorrow's 10:30 pickup slot
- loan_schedule: synthesized six-month security-deposit loan
- loans: canned schedule/timeline used while AUTH_DISABLED is set

Responses are built from the models in src/integrations/contracts so the
routes cannot tell a mock from the HTTP client it replaces.
"""

from .cheque_collection import MockChequeCollectionProvider
from .cheques import MockChequeStore
from .loans import LocalLoanProvider

__all__ = ["LocalLoanProvider", "MockChequeCollectionProvider", "MockChequeStore"]
