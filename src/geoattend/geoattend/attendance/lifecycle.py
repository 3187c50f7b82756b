"""Transition guards for the work-log lifecycle.

    NoRecord -> CheckedIn -> CheckedOut
    NoRecord -> LeavePending -> LeaveApproved | LeaveRejected

CheckedIn may also be advanced to CheckedOut by an administrative correction.
Every other state is terminal.
"""

from __future__ import annotations

from typing import Optional

from ..core.enums import RejectionReason, WorkLogState
from ..core.exceptions import OperationRejected
from .model import WorkLog

_WRONG_STATE_MESSAGES = {
    WorkLogState.NO_RECORD: "You have not checked in today",
    WorkLogState.CHECKED_IN: "This record is still waiting for a check-out",
    WorkLogState.CHECKED_OUT: "You already completed today's attendance",
    WorkLogState.LEAVE_PENDING: "A leave request for this day is waiting for approval",
    WorkLogState.LEAVE_APPROVED: "A leave request for this day has already been approved",
    WorkLogState.LEAVE_REJECTED: "A leave request for this day has already been rejected",
}


def state_of(record: Optional[WorkLog]) -> WorkLogState:
    return record.state if record else WorkLogState.NO_RECORD


def require_no_record(record: Optional[WorkLog]) -> None:
    """Uniqueness guard: one work-log per (employee, date)."""
    if record is None:
        return
    if record.state == WorkLogState.CHECKED_OUT:
        message = "You already completed today's attendance"
    elif record.state == WorkLogState.CHECKED_IN:
        message = "You have already checked in today"
    else:
        message = "A leave request already exists for this day"
    raise OperationRejected(RejectionReason.DUPLICATE_RECORD, message)


def require_state(record: Optional[WorkLog], expected: WorkLogState) -> WorkLog:
    current = state_of(record)
    if current != expected:
        raise OperationRejected(RejectionReason.WRONG_STATE, _WRONG_STATE_MESSAGES[current])
    assert record is not None
    return record


def require_checked_in(record: Optional[WorkLog]) -> WorkLog:
    """Guard shared by check-out and correction: open record with a usable check-in."""
    record = require_state(record, WorkLogState.CHECKED_IN)
    if record.check_in_time is None:
        raise OperationRejected(RejectionReason.WRONG_STATE, "Cannot check out without a valid check-in time")
    return record
