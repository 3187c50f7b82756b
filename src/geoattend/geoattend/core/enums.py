from __future__ import annotations

from enum import Enum


class WorkLogStatus(str, Enum):
    """Categorical status stored on every work-log."""

    ON_TIME = "On-Time"
    LATE = "Late"
    ON_LEAVE = "On-Leave"
    SICK = "Sick"
    ABSENT = "Absent"

    @property
    def is_leave(self) -> bool:
        return self in LEAVE_STATUSES


LEAVE_STATUSES = frozenset({WorkLogStatus.ON_LEAVE, WorkLogStatus.SICK})


class LeaveApprovalStatus(str, Enum):
    NOT_APPLICABLE = "n/a"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveDecision(str, Enum):
    """Administrator outcome for a pending leave record."""

    APPROVED = "approved"
    REJECTED = "rejected"


class WorkLogState(str, Enum):
    """Lifecycle position of a (employee, date) slot."""

    NO_RECORD = "no-record"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    LEAVE_PENDING = "leave-pending"
    LEAVE_APPROVED = "leave-approved"
    LEAVE_REJECTED = "leave-rejected"


class RejectionReason(str, Enum):
    DUPLICATE_RECORD = "duplicate-record"
    OUT_OF_RANGE = "out-of-range"
    WINDOW_CLOSED = "window-closed"
    INVALID_TIME_ORDER = "invalid-time-order"
    WRONG_STATE = "wrong-state"
    NOT_CONFIGURED = "not-configured"


class ReportKind(str, Enum):
    RECAP = "recap"
    LATENESS = "lateness"
    WORK_HOURS = "work-hours"
    LEAVE = "leave"
