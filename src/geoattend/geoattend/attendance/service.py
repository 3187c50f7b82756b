from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, Optional, Sequence, Union

from ..common.datetime_utils import hours_between, now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_CORRECTION_NOTE, DEFAULT_HISTORY_LIMIT
from ..core.enums import LeaveDecision, RejectionReason, WorkLogState, WorkLogStatus
from ..core.exceptions import NotFoundError, OperationRejected, ValidationError
from ..employees.repository import EmployeeRepository
from ..geofence import evaluator
from ..geofence.evaluator import Coordinates, GeofenceResult
from ..settings.model import OfficeSettings
from ..settings.repository import SettingsRepository
from ..settings.service import SettingsService
from . import lifecycle
from .factory import StatusClassifierFactory
from .model import WorkLog
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    work_log: WorkLog
    geofence: GeofenceResult


@dataclass(frozen=True)
class CheckOutResult:
    work_log: WorkLog
    geofence: GeofenceResult
    early: bool


class AttendanceService:
    """Work-log state machine: check-in, check-out, leave and admin corrections.

    Every mutation re-reads the current record, applies its guard and then
    relies on the repository's conditional write, so a concurrent writer that
    slipped in between is rejected instead of overwritten.
    """

    def __init__(
        self,
        work_logs: WorkLogRepository,
        employees: EmployeeRepository,
        settings: SettingsRepository,
        *,
        classifier: StatusClassifierFactory | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._work_logs = work_logs
        self._employees = employees
        self._settings = SettingsService(settings)
        self._classifier = classifier or StatusClassifierFactory()
        self._clock = clock or now_local

    def _require_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

    def _require_work_log(self, work_log_id: int) -> WorkLog:
        record = self._work_logs.get_by_id(int(work_log_id))
        if not record:
            raise NotFoundError("Work log not found")
        return record

    def _reload(self, work_log_id: int) -> WorkLog:
        return self._require_work_log(work_log_id)

    @staticmethod
    def _admit(position: Coordinates, settings: OfficeSettings, *, employee_id: int, action: str) -> GeofenceResult:
        result = evaluator.evaluate(position, settings.anchor, settings.radius_m)
        if not result.admitted:
            logger.warning(
                "%s rejected for employee %s: %.1fm from office (radius %.1fm)",
                action,
                employee_id,
                result.distance_m,
                result.radius_m,
            )
            raise OperationRejected(
                RejectionReason.OUT_OF_RANGE,
                f"You are out of range: {result.distance_m:.0f} m from the office (allowed {result.radius_m:.0f} m)",
            )
        return result

    def request_check_in(
        self,
        employee_id: int,
        *,
        position: Coordinates,
        photo_url: Optional[str] = None,
        now: datetime | None = None,
    ) -> CheckInResult:
        now = now or self._clock()
        today = now.date()

        self._require_employee(employee_id)
        settings = self._settings.require_work_hours()

        lifecycle.require_no_record(self._work_logs.get_for_employee_and_date(employee_id, today))

        strategy = self._classifier.for_checkin(now=now, today=today, settings=settings)
        geofence = self._admit(position, settings, employee_id=employee_id, action="Check-in")
        decision = strategy.decide()

        work_log_id = self._work_logs.create_check_in(
            employee_id=int(employee_id),
            work_date=today,
            status=decision.status,
            check_in_time=now,
            latitude=position.latitude,
            longitude=position.longitude,
            photo_url=photo_url,
        )
        logger.info("Employee %s checked in at %s (%s)", employee_id, now.isoformat(), decision.status.value)
        return CheckInResult(work_log=self._reload(work_log_id), geofence=geofence)

    def request_check_out(
        self,
        employee_id: int,
        *,
        position: Coordinates,
        photo_url: Optional[str] = None,
        now: datetime | None = None,
    ) -> CheckOutResult:
        now = now or self._clock()
        today = now.date()

        self._require_employee(employee_id)
        settings = self._settings.require_settings()
        record = lifecycle.require_checked_in(self._work_logs.get_for_employee_and_date(employee_id, today))
        if now < record.check_in_time:
            raise OperationRejected(RejectionReason.INVALID_TIME_ORDER, "Check-out time cannot be earlier than check-in time")

        geofence = self._admit(position, settings, employee_id=employee_id, action="Check-out")
        early = self._classifier.is_early_checkout(now=now, today=today, settings=settings)

        ok = self._work_logs.update_check_out(
            work_log_id=record.work_log_id,
            check_out_time=now,
            duration_hours=hours_between(record.check_in_time, now),
            latitude=position.latitude,
            longitude=position.longitude,
            photo_url=photo_url,
        )
        if not ok:
            raise OperationRejected(RejectionReason.WRONG_STATE, "You already completed today's attendance")

        logger.info("Employee %s checked out at %s%s", employee_id, now.isoformat(), " (early)" if early else "")
        return CheckOutResult(work_log=self._reload(record.work_log_id), geofence=geofence, early=early)

    def request_leave(
        self,
        employee_id: int,
        *,
        leave_type: Union[WorkLogStatus, str],
        note: str,
        work_date: date | None = None,
        now: datetime | None = None,
    ) -> WorkLog:
        work_date = work_date or (now or self._clock()).date()
        try:
            leave_type = WorkLogStatus(leave_type)
        except ValueError:
            raise ValidationError("Leave type must be On-Leave or Sick")
        note = require_non_empty(note, "Leave note")

        self._require_employee(employee_id)
        strategy = self._classifier.for_leave_request(leave_type=leave_type)
        lifecycle.require_no_record(self._work_logs.get_for_employee_and_date(employee_id, work_date))
        decision = strategy.decide()

        work_log_id = self._work_logs.create_leave(
            employee_id=int(employee_id),
            work_date=work_date,
            status=decision.status,
            leave_note=note,
        )
        logger.info("Employee %s requested %s for %s", employee_id, leave_type.value, work_date.isoformat())
        return self._reload(work_log_id)

    def decide_leave(self, work_log_id: int, decision: Union[LeaveDecision, str]) -> WorkLog:
        try:
            decision = LeaveDecision(decision)
        except ValueError:
            raise ValidationError("Decision must be approved or rejected")

        record = lifecycle.require_state(self._require_work_log(work_log_id), WorkLogState.LEAVE_PENDING)
        outcome = self._classifier.for_leave_decision(decision=decision).decide(record)

        ok = self._work_logs.update_leave_decision(
            work_log_id=record.work_log_id,
            status=outcome.status,
            leave_approval_status=outcome.leave_approval_status,
        )
        if not ok:
            raise OperationRejected(RejectionReason.WRONG_STATE, "This leave request has already been decided")

        logger.info("Leave %s for employee %s %s", record.work_log_id, record.employee_id, decision.value)
        return self._reload(record.work_log_id)

    def correct_check_out(
        self,
        work_log_id: int,
        *,
        check_out_time: Union[datetime, time],
        note: Optional[str] = None,
    ) -> WorkLog:
        if note is not None and not isinstance(note, str):
            raise ValidationError("Correction note must be text")
        record = lifecycle.require_checked_in(self._require_work_log(work_log_id))

        if isinstance(check_out_time, time):
            check_out_time = datetime.combine(record.work_date, check_out_time)
        if check_out_time < record.check_in_time:
            raise OperationRejected(RejectionReason.INVALID_TIME_ORDER, "Check-out time cannot be earlier than check-in time")

        ok = self._work_logs.update_check_out(
            work_log_id=record.work_log_id,
            check_out_time=check_out_time,
            duration_hours=hours_between(record.check_in_time, check_out_time),
            photo_url=None,
            correction_note=(note or "").strip() or DEFAULT_CORRECTION_NOTE,
        )
        if not ok:
            raise OperationRejected(RejectionReason.WRONG_STATE, "This record has already been checked out")

        logger.info("Work log %s corrected: check-out %s", record.work_log_id, check_out_time.isoformat())
        return self._reload(record.work_log_id)

    def get_today_record(self, employee_id: int, *, now: datetime | None = None) -> Optional[WorkLog]:
        today = (now or self._clock()).date()
        return self._work_logs.get_for_employee_and_date(int(employee_id), today)

    def get_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[WorkLog]:
        return self._work_logs.list_recent(limit=limit, employee_id=int(employee_id))

    def reset_activity(self) -> int:
        """Administrative bulk reset: delete every work-log."""
        deleted = self._work_logs.delete_all()
        logger.warning("Activity reset: %s work logs deleted", deleted)
        return deleted
