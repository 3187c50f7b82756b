from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import LeaveApprovalStatus, WorkLogStatus
from ..model import WorkLog


@dataclass(frozen=True)
class StatusDecision:
    status: WorkLogStatus
    leave_approval_status: LeaveApprovalStatus


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a work-log status."""

    @abstractmethod
    def decide(self, current: Optional[WorkLog] = None) -> StatusDecision:
        raise NotImplementedError
