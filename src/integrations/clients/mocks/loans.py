"""
Local Loan Provider.

Returns canned schedule/timeline data without any network call. Selected
when AUTH_DISABLED is set so the UI can run without edge-function access.
"""

from __future__ import annotations

import logging

from src.integrations.contracts.interfaces import LoanProvider
from src.integrations.contracts.loans import (
    Installment,
    InstallmentStatus,
    LoanSchedule,
    LoanTimeline,
    TimelineEvent,
    TimelineEventType,
)

logger = logging.getLogger(__name__)


class LocalLoanProvider(LoanProvider):
    async def get_schedule(self, application_id: str) -> LoanSchedule:
        logger.info("[LOANS] Auth disabled - returning mock schedule data for %s", application_id)
        return LoanSchedule(
            application_id=application_id,
            total_amount=120000,
            total_paid=40000,
            remaining_balance=80000,
            next_due_date="2024-02-15",
            overdue_flag=False,
            installments=[
                Installment(
                    id="inst-1",
                    amount=10000,
                    due_date="2024-01-15",
                    status=InstallmentStatus.PAID,
                    paid_at="2024-01-14",
                ),
                Installment(id="inst-2", amount=10000, due_date="2024-02-15", status=InstallmentStatus.PENDING),
                Installment(id="inst-3", amount=10000, due_date="2024-03-15", status=InstallmentStatus.PENDING),
            ],
        )

    async def get_timeline(self, application_id: str) -> LoanTimeline:
        logger.info("[LOANS] Auth disabled - returning mock timeline data for %s", application_id)
        return LoanTimeline(
            application_id=application_id,
            events=[
                TimelineEvent(
                    id="evt-1",
                    type=TimelineEventType.APPLICATION,
                    label="Application Submitted",
                    date="2023-12-01",
                    note="Loan application submitted for processing",
                ),
                TimelineEvent(
                    id="evt-2",
                    type=TimelineEventType.PREAPPROVED,
                    label="Pre-approved",
                    date="2023-12-05",
                    note="Initial approval based on documents",
                ),
                TimelineEvent(
                    id="evt-3",
                    type=TimelineEventType.APPROVED,
                    label="Loan Approved",
                    date="2023-12-10",
                    note="Final approval completed",
                ),
                TimelineEvent(
                    id="evt-4",
                    type=TimelineEventType.DISBURSED,
                    label="Amount Disbursed",
                    date="2023-12-15",
                    amount=120000,
                    reference="TXN-120000-001",
                    note="Loan amount disbursed to landlord",
                ),
            ],
        )
