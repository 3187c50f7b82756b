from __future__ import annotations

from typing import Optional

from ...core.enums import LeaveApprovalStatus, WorkLogStatus
from ..model import WorkLog
from .base import StatusDecision, StatusStrategy


class OnTimeStrategy(StatusStrategy):
    """Check-in at or before work start + late tolerance."""

    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        return StatusDecision(status=WorkLogStatus.ON_TIME, leave_approval_status=LeaveApprovalStatus.NOT_APPLICABLE)
