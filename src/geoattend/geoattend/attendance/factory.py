from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.enums import LeaveDecision, RejectionReason, WorkLogStatus
from ..core.exceptions import OperationRejected, ValidationError
from ..settings.model import OfficeSettings
from .strategies.base import StatusStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.leave_strategy import LeaveApprovedStrategy, LeaveRejectedStrategy, LeaveRequestStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class StatusClassifierFactory:
    """Factory Pattern: choose the status strategy for an action.

    Settings are always passed in explicitly so several configurations can be
    evaluated side by side.
    """

    def late_boundary(self, *, today: date, settings: OfficeSettings) -> datetime:
        if settings.work_start is None:
            raise OperationRejected(RejectionReason.NOT_CONFIGURED, "The administrator has not configured work hours yet.")
        return datetime.combine(today, settings.work_start) + timedelta(minutes=int(settings.late_tolerance_minutes))

    def for_checkin(self, *, now: datetime, today: date, settings: OfficeSettings) -> StatusStrategy:
        if not settings.has_work_hours:
            raise OperationRejected(RejectionReason.NOT_CONFIGURED, "The administrator has not configured work hours yet.")

        work_end = datetime.combine(today, settings.work_end)
        if now > work_end:
            raise OperationRejected(RejectionReason.WINDOW_CLOSED, "Attendance window closed for today")

        if now <= self.late_boundary(today=today, settings=settings):
            return OnTimeStrategy()
        return LateStrategy()

    def for_leave_request(self, *, leave_type: WorkLogStatus) -> StatusStrategy:
        return LeaveRequestStrategy(leave_type)

    def for_leave_decision(self, *, decision: LeaveDecision) -> StatusStrategy:
        if decision == LeaveDecision.APPROVED:
            return LeaveApprovedStrategy()
        if decision == LeaveDecision.REJECTED:
            return LeaveRejectedStrategy()
        raise ValidationError("Decision must be approved or rejected")

    def is_early_checkout(self, *, now: datetime, today: date, settings: OfficeSettings) -> bool:
        if settings.work_end is None:
            return False
        return now < datetime.combine(today, settings.work_end)
