from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

from ..attendance.repository import WorkLogRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_RECENT_LOG_LIMIT, WEEKLY_WINDOW_DAYS
from ..core.enums import ReportKind
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from . import aggregation
from .calculator.base import WorkHoursCalculator
from .calculator.standard_calculator import StandardWorkHoursCalculator
from .model import DashboardData, RangeReport


class ReportService:
    """Loads a read-only snapshot and hands it to the aggregation functions."""

    def __init__(
        self,
        employees: EmployeeRepository,
        work_logs: WorkLogRepository,
        *,
        calculator: Optional[WorkHoursCalculator] = None,
        clock: Callable[[], datetime] | None = None,
        recent_limit: int = DEFAULT_RECENT_LOG_LIMIT,
    ):
        self._employees = employees
        self._work_logs = work_logs
        self._calculator = calculator or StandardWorkHoursCalculator()
        self._clock = clock or now_local
        self._recent_limit = int(recent_limit)

    def today(self) -> date:
        return self._clock().date()

    def build_dashboard(self, *, today: date | None = None) -> DashboardData:
        today = today or self.today()
        employees = list(self._employees.list_all())
        logs = list(self._work_logs.list_between(today - timedelta(days=WEEKLY_WINDOW_DAYS - 1), today))

        return DashboardData(
            summary=aggregation.daily_summary(employees, logs, today, calculator=self._calculator),
            weekly=aggregation.weekly_series(employees, logs, today),
            recent_logs=list(self._work_logs.list_recent(limit=self._recent_limit)),
            pending_leave_requests=list(self._work_logs.list_pending_leaves()),
        )

    def default_period(self) -> tuple[date, date]:
        """First day of the current month through today."""
        today = self.today()
        return today.replace(day=1), today

    def build_report(self, kind: Union[ReportKind, str], *, start: date, end: date | None = None) -> RangeReport:
        try:
            kind = ReportKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown report: {kind}")

        end = end or start
        if end < start:
            raise ValidationError("End date must be on or after start date")

        employees = list(self._employees.list_all())
        logs = list(self._work_logs.list_between(start, end))

        if kind == ReportKind.RECAP:
            rows = aggregation.attendance_recap(employees, logs, start, end)
        elif kind == ReportKind.LATENESS:
            rows = aggregation.lateness_report(employees, logs, start, end)
        elif kind == ReportKind.WORK_HOURS:
            rows = aggregation.work_hours_report(employees, logs, start, end, calculator=self._calculator)
        else:
            rows = aggregation.leave_report(employees, logs, start, end)

        return RangeReport(kind=kind, start=start, end=end, rows=rows)
