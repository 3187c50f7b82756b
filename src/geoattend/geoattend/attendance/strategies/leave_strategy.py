from __future__ import annotations

from typing import Optional

from ...core.enums import LeaveApprovalStatus, WorkLogStatus
from ...core.exceptions import ValidationError
from ..model import WorkLog
from .base import StatusDecision, StatusStrategy


class LeaveRequestStrategy(StatusStrategy):
    """New leave/sick request: the requested type verbatim, awaiting approval."""

    def __init__(self, leave_type: WorkLogStatus):
        if not leave_type.is_leave:
            raise ValidationError("Leave type must be On-Leave or Sick")
        self._leave_type = leave_type

    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        return StatusDecision(status=self._leave_type, leave_approval_status=LeaveApprovalStatus.PENDING)


class LeaveApprovedStrategy(StatusStrategy):
    """Approval keeps the requested type; the day now counts as excused presence."""

    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        if current is None:
            raise ValidationError("Approval requires an existing leave record")
        return StatusDecision(status=current.status, leave_approval_status=LeaveApprovalStatus.APPROVED)


class LeaveRejectedStrategy(StatusStrategy):
    """Rejected leave converts the day into an absence."""

    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        return StatusDecision(status=WorkLogStatus.ABSENT, leave_approval_status=LeaveApprovalStatus.REJECTED)
