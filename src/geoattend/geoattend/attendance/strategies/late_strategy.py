from __future__ import annotations

from typing import Optional

from ...core.enums import LeaveApprovalStatus, WorkLogStatus
from ..model import WorkLog
from .base import StatusDecision, StatusStrategy


class LateStrategy(StatusStrategy):
    """Late check-in."""

    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        return StatusDecision(status=WorkLogStatus.LATE, leave_approval_status=LeaveApprovalStatus.NOT_APPLICABLE)
