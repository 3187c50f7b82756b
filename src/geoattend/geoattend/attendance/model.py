from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..core.enums import LeaveApprovalStatus, WorkLogState, WorkLogStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: the attendance record of one employee on one calendar day."""

    work_log_id: int
    employee_id: int
    work_date: date
    status: WorkLogStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    check_in_latitude: Optional[float] = None
    check_in_longitude: Optional[float] = None
    check_out_latitude: Optional[float] = None
    check_out_longitude: Optional[float] = None
    check_in_photo_url: Optional[str] = None
    check_out_photo_url: Optional[str] = None
    duration_hours: float = 0.0
    leave_note: Optional[str] = None
    leave_approval_status: LeaveApprovalStatus = LeaveApprovalStatus.NOT_APPLICABLE
    correction_note: Optional[str] = None

    def __post_init__(self):
        if self.check_out_time is not None:
            if self.check_in_time is None:
                raise ValidationError("Check-out time requires a check-in time")
            if self.check_out_time < self.check_in_time:
                raise ValidationError("Check-out time cannot be earlier than check-in time")
        if self.duration_hours < 0:
            raise ValidationError("Duration cannot be negative")

    @property
    def date_key(self) -> str:
        return format_iso_date(self.work_date)

    @property
    def state(self) -> WorkLogState:
        if self.leave_approval_status == LeaveApprovalStatus.PENDING:
            return WorkLogState.LEAVE_PENDING
        if self.leave_approval_status == LeaveApprovalStatus.APPROVED:
            return WorkLogState.LEAVE_APPROVED
        if self.leave_approval_status == LeaveApprovalStatus.REJECTED:
            return WorkLogState.LEAVE_REJECTED
        if self.check_out_time is not None:
            return WorkLogState.CHECKED_OUT
        return WorkLogState.CHECKED_IN

    @property
    def is_approved_leave(self) -> bool:
        return self.status.is_leave and self.leave_approval_status == LeaveApprovalStatus.APPROVED

    @property
    def is_rejected_leave(self) -> bool:
        return self.leave_approval_status == LeaveApprovalStatus.REJECTED

    def to_dict(self) -> dict:
        def _ts(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat(timespec="seconds") if value else None

        return {
            "work_log_id": self.work_log_id,
            "employee_id": self.employee_id,
            "date": self.date_key,
            "status": self.status.value,
            "state": self.state.value,
            "check_in_time": _ts(self.check_in_time),
            "check_out_time": _ts(self.check_out_time),
            "check_in_latitude": self.check_in_latitude,
            "check_in_longitude": self.check_in_longitude,
            "check_out_latitude": self.check_out_latitude,
            "check_out_longitude": self.check_out_longitude,
            "check_in_photo_url": self.check_in_photo_url,
            "check_out_photo_url": self.check_out_photo_url,
            "duration_hours": self.duration_hours,
            "leave_note": self.leave_note,
            "leave_approval_status": self.leave_approval_status.value,
            "correction_note": self.correction_note,
        }
