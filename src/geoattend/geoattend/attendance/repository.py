from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveApprovalStatus, WorkLogStatus
from .model import WorkLog


class WorkLogRepository(Protocol):
    def get_by_id(self, work_log_id: int) -> Optional[WorkLog]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[WorkLog]:
        raise NotImplementedError

    def create_check_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: WorkLogStatus,
        check_in_time: datetime,
        latitude: float,
        longitude: float,
        photo_url: Optional[str],
    ) -> int:
        """Create-if-absent: raise OperationRejected(duplicate-record) when the slot is taken."""

        raise NotImplementedError

    def create_leave(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: WorkLogStatus,
        leave_note: str,
    ) -> int:
        """Create-if-absent, same contract as create_check_in."""

        raise NotImplementedError

    def update_check_out(
        self,
        *,
        work_log_id: int,
        check_out_time: datetime,
        duration_hours: float,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        photo_url: Optional[str] = None,
        correction_note: Optional[str] = None,
    ) -> bool:
        """Only applies while the record is checked in and not yet checked out."""

        raise NotImplementedError

    def update_leave_decision(
        self,
        *,
        work_log_id: int,
        status: WorkLogStatus,
        leave_approval_status: LeaveApprovalStatus,
    ) -> bool:
        """Only applies while the leave is still pending."""

        raise NotImplementedError

    def list_between(self, start_date: date, end_date: date) -> Sequence[WorkLog]:
        raise NotImplementedError

    def list_recent(self, *, limit: int, employee_id: Optional[int] = None) -> Sequence[WorkLog]:
        raise NotImplementedError

    def list_pending_leaves(self) -> Sequence[WorkLog]:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
