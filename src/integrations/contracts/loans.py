"""
Loan contracts: read-only projections of a loan application.

- LoanSchedule: aggregate amounts plus the ordered installment list
- LoanTimeline: ordered event log (application → disbursement → installments)

Used by clients/mocks/loans.py, clients/real_http/loans.py and the
edge-function endpoints that generate schedules.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from .cheques import CamelModel

# Whole AED amounts stay integers on the wire; remote payloads may carry fractions.
Money = Union[int, float]


class InstallmentStatus(str, Enum):
    PAID = "PAID"
    PENDING = "PENDING"
    OVERDUE = "OVERDUE"


class TimelineEventType(str, Enum):
    APPLICATION = "APPLICATION"
    PREAPPROVED = "PREAPPROVED"
    APPROVED = "APPROVED"
    DISBURSED = "DISBURSED"
    INSTALLMENT = "INSTALLMENT"


class Installment(CamelModel):
    id: str
    due_date: str
    amount: Money
    status: InstallmentStatus
    paid_at: Optional[str] = None


class LoanSchedule(CamelModel):
    application_id: str
    total_amount: Money
    total_paid: Money
    remaining_balance: Money
    next_due_date: Optional[str] = None
    overdue_flag: bool = False
    installments: List[Installment] = Field(default_factory=list)


class TimelineEvent(CamelModel):
    id: str
    type: TimelineEventType
    label: str
    date: str
    note: Optional[str] = None
    amount: Optional[Money] = None
    reference: Optional[str] = None
    installment_number: Optional[int] = None
    status: Optional[InstallmentStatus] = None


class LoanTimeline(CamelModel):
    application_id: str
    events: List[TimelineEvent] = Field(default_factory=list)


class LoanLookupRequest(CamelModel):
    """Body accepted by the loan edge functions."""

    application_id: str = "APP-1001"
