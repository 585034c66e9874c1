from abc import ABC, abstractmethod

from .cheques import ChequeCollectionSubmitPayload, ChequeCollectionSubmitResponse
from .loans import LoanSchedule, LoanTimeline


# ---------------------------------------------------------------------------
# Abstract provider interfaces
# ---------------------------------------------------------------------------

class ChequeCollectionProvider(ABC):
    """Every bank cheque-collection client must implement this interface."""

    @abstractmethod
    async def submit(
        self,
        payload: ChequeCollectionSubmitPayload,
        *,
        correlation_id: str,
    ) -> ChequeCollectionSubmitResponse:
        """Forward a collection request to the bank; return its reference and pickup time."""


class LoanProvider(ABC):
    """Source of loan schedule and timeline projections."""

    @abstractmethod
    async def get_schedule(self, application_id: str) -> LoanSchedule:
        """Return the installment schedule for an application."""

    @abstractmethod
    async def get_timeline(self, application_id: str) -> LoanTimeline:
        """Return the event timeline for an application."""
