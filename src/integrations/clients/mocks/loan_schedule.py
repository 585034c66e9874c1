"""Security-deposit loan schedule and timeline builders (served by the loan edge functions)."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from src.integrations.contracts.loans import (
    Installment,
    InstallmentStatus,
    LoanSchedule,
    LoanTimeline,
    TimelineEvent,
    TimelineEventType,
)
from src.utils.timestamps import to_iso, utc_now

# Typical security deposit loan: 10% of annual rent (120k) = 12k AED over six months.
LOAN_PRINCIPAL_AED = 12000
LOAN_TERM_MONTHS = 6
LOAN_START = (2025, 3, 15)

# Application id fragment whose second installment is shown overdue in demos.
OVERDUE_DEMO_MARKER = "1001"


def _add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    return value.replace(year=value.year + month_index // 12, month=month_index % 12 + 1)


def _loan_start(now: datetime) -> datetime:
    year, month, day = LOAN_START
    return now.replace(year=year, month=month, day=day)


def build_loan_schedule(application_id: str, now: Optional[datetime] = None) -> LoanSchedule:
    now = now or utc_now()
    start = _loan_start(now)
    amount = round(LOAN_PRINCIPAL_AED / LOAN_TERM_MONTHS)

    installments: List[Installment] = []
    for i in range(LOAN_TERM_MONTHS):
        due_date = _add_months(start, i)
        status = InstallmentStatus.PENDING
        paid_at: Optional[datetime] = None

        if due_date < now:
            if i == 0:
                status = InstallmentStatus.PAID
                paid_at = due_date + timedelta(days=1)
            elif i == 1 and OVERDUE_DEMO_MARKER in application_id:
                status = InstallmentStatus.OVERDUE
            elif i == 1:
                status = InstallmentStatus.PAID
                paid_at = due_date + timedelta(days=3)
            else:
                status = InstallmentStatus.OVERDUE

        installments.append(
            Installment(
                id=f"{application_id}-INST-{i + 1}",
                due_date=to_iso(due_date),
                amount=amount,
                status=status,
                paid_at=to_iso(paid_at) if paid_at else None,
            )
        )

    total_amount = sum(it.amount for it in installments)
    total_paid = sum(it.amount for it in installments if it.status == InstallmentStatus.PAID)
    next_due = next((it for it in installments if it.status != InstallmentStatus.PAID), None)

    return LoanSchedule(
        application_id=application_id,
        total_amount=total_amount,
        total_paid=total_paid,
        remaining_balance=total_amount - total_paid,
        next_due_date=next_due.due_date if next_due else None,
        overdue_flag=any(it.status == InstallmentStatus.OVERDUE for it in installments),
        installments=installments,
    )


def build_loan_timeline(application_id: str, now: Optional[datetime] = None) -> LoanTimeline:
    now = now or utc_now()
    start = _loan_start(now)
    schedule = build_loan_schedule(application_id, now)

    events: List[TimelineEvent] = [
        TimelineEvent(
            id="evt-1",
            type=TimelineEventType.APPLICATION,
            label="Application Submitted",
            date=to_iso(start - timedelta(days=23)),
            note="Loan application submitted for processing",
        ),
        TimelineEvent(
            id="evt-2",
            type=TimelineEventType.PREAPPROVED,
            label="Pre-approved",
            date=to_iso(start - timedelta(days=18)),
            note="Initial approval based on documents",
        ),
        TimelineEvent(
            id="evt-3",
            type=TimelineEventType.APPROVED,
            label="Loan Approved",
            date=to_iso(start - timedelta(days=10)),
            note="Final approval completed",
        ),
        TimelineEvent(
            id="evt-4",
            type=TimelineEventType.DISBURSED,
            label="Amount Disbursed",
            date=to_iso(start - timedelta(days=5)),
            amount=LOAN_PRINCIPAL_AED,
            reference=f"TXN-{application_id}-001",
            note="Security deposit disbursed to landlord",
        ),
    ]

    for number, installment in enumerate(schedule.installments, start=1):
        events.append(
            TimelineEvent(
                id=f"evt-inst-{number}",
                type=TimelineEventType.INSTALLMENT,
                label=f"Installment {number} of {LOAN_TERM_MONTHS}",
                date=installment.paid_at or installment.due_date,
                amount=installment.amount,
                installment_number=number,
                status=installment.status,
            )
        )

    return LoanTimeline(application_id=application_id, events=events)
