"""Aggregation engine.

Pure functions over a snapshot ``(employees, logs)``: the caller owns the
refresh cadence and may discard a result at any time. Absence is never stored
for a no-show day; it is the complement of the roster against the employees
that have an on-time, late or approved-leave log on that day.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence

from ..attendance.model import WorkLog
from ..common.datetime_utils import format_iso_date
from ..core.constants import WEEKDAY_ABBREVIATIONS, WEEKLY_WINDOW_DAYS
from ..core.enums import WorkLogStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from .calculator.base import WorkHoursCalculator
from .calculator.standard_calculator import StandardWorkHoursCalculator
from .model import ChartPoint, DailySummary, LogRow, RecapRow, WorkHoursRow


@dataclass
class DayTally:
    on_time: int = 0
    late: int = 0
    on_leave: int = 0
    present_ids: set = field(default_factory=set)

    def add(self, log: WorkLog) -> None:
        if log.status == WorkLogStatus.ON_TIME:
            self.on_time += 1
        elif log.status == WorkLogStatus.LATE:
            self.late += 1
        elif log.is_approved_leave:
            self.on_leave += 1
        else:
            return
        self.present_ids.add(log.employee_id)

    def absent(self, total_employees: int) -> int:
        return max(0, total_employees - len(self.present_ids))


def percentage(value: int, total: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if total == 0:
        return 0
    return int(math.floor(value * 100 / total + 0.5))


def tally_day(logs: Iterable[WorkLog], day: date, roster_ids: set) -> DayTally:
    tally = DayTally()
    for log in logs:
        if log.work_date == day and log.employee_id in roster_ids:
            tally.add(log)
    return tally


def daily_summary(
    employees: Sequence[Employee],
    logs: Sequence[WorkLog],
    today: date,
    *,
    calculator: Optional[WorkHoursCalculator] = None,
) -> DailySummary:
    if not employees:
        return DailySummary()

    calculator = calculator or StandardWorkHoursCalculator()
    roster_ids = {e.employee_id for e in employees}
    total = len(employees)
    todays_logs = [log for log in logs if log.work_date == today and log.employee_id in roster_ids]

    tally = tally_day(todays_logs, today, roster_ids)
    absent = tally.absent(total)
    present_today = tally.on_time + tally.late

    work_hours = sum(calculator.worked_hours(log) for log in todays_logs)
    overtime = sum(calculator.overtime_hours(log) for log in todays_logs)

    return DailySummary(
        total_employees=total,
        on_time=tally.on_time,
        late=tally.late,
        on_leave=tally.on_leave,
        absent=absent,
        on_time_percentage=percentage(tally.on_time, present_today),
        late_percentage=percentage(tally.late, present_today),
        absent_percentage=percentage(absent, total),
        total_work_hours_today=round(work_hours, 2),
        total_overtime_hours_today=round(overtime, 2),
    )


def weekly_series(employees: Sequence[Employee], logs: Sequence[WorkLog], today: date) -> list[ChartPoint]:
    """Trailing 7 days including ``today``, oldest first."""
    if not employees:
        return []

    roster_ids = {e.employee_id for e in employees}
    total = len(employees)
    points = []
    for offset in range(WEEKLY_WINDOW_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        tally = tally_day(logs, day, roster_ids)
        points.append(
            ChartPoint(
                date=format_iso_date(day),
                day=WEEKDAY_ABBREVIATIONS[day.weekday()],
                on_time=tally.on_time,
                late=tally.late,
                on_leave=tally.on_leave,
                absent=tally.absent(total),
            )
        )
    return points


def filter_range(logs: Iterable[WorkLog], start: date, end: Optional[date] = None) -> list[WorkLog]:
    """Logs dated within [start, end] inclusive; a missing end means a single day."""
    end = end or start
    if end < start:
        raise ValidationError("End date must be on or after start date")
    return [log for log in logs if start <= log.work_date <= end]


def _names(employees: Sequence[Employee]) -> dict[int, str]:
    return {e.employee_id: e.name for e in employees}


def _fmt_time(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value else None


def _log_row(log: WorkLog, names: dict[int, str]) -> LogRow:
    return LogRow(
        date=log.date_key,
        employee_id=log.employee_id,
        employee_name=names.get(log.employee_id, "Unknown"),
        status=log.status.value,
        check_in=_fmt_time(log.check_in_time),
        check_out=_fmt_time(log.check_out_time),
        duration_hours=log.duration_hours,
        leave_note=log.leave_note,
        leave_approval_status=log.leave_approval_status.value,
    )


def _sorted(logs: Iterable[WorkLog]) -> list[WorkLog]:
    return sorted(logs, key=lambda log: (log.work_date, log.employee_id))


def attendance_recap(
    employees: Sequence[Employee],
    logs: Sequence[WorkLog],
    start: date,
    end: Optional[date] = None,
) -> list[RecapRow]:
    """One row per roster employee, zero counts included."""
    counts = {e.employee_id: {"present": 0, "late": 0, "leave": 0, "absent": 0} for e in employees}

    for log in filter_range(logs, start, end):
        c = counts.get(log.employee_id)
        if c is None:
            continue
        if log.status == WorkLogStatus.ON_TIME:
            c["present"] += 1
        elif log.status == WorkLogStatus.LATE:
            c["late"] += 1
        elif log.is_approved_leave:
            c["leave"] += 1
        elif log.status == WorkLogStatus.ABSENT or log.is_rejected_leave:
            c["absent"] += 1

    return [RecapRow(employee_id=e.employee_id, employee_name=e.name, **counts[e.employee_id]) for e in employees]


def lateness_report(
    employees: Sequence[Employee],
    logs: Sequence[WorkLog],
    start: date,
    end: Optional[date] = None,
) -> list[LogRow]:
    names = _names(employees)
    return [_log_row(log, names) for log in _sorted(filter_range(logs, start, end)) if log.status == WorkLogStatus.LATE]


def work_hours_report(
    employees: Sequence[Employee],
    logs: Sequence[WorkLog],
    start: date,
    end: Optional[date] = None,
    *,
    calculator: Optional[WorkHoursCalculator] = None,
) -> list[WorkHoursRow]:
    """Per-employee total and overtime hours; employees without worked hours are omitted."""
    calculator = calculator or StandardWorkHoursCalculator()
    totals: dict[int, list[float]] = {}

    for log in filter_range(logs, start, end):
        worked = calculator.worked_hours(log)
        if worked <= 0:
            continue
        t = totals.setdefault(log.employee_id, [0.0, 0.0])
        t[0] += worked
        t[1] += calculator.overtime_hours(log)

    rows = []
    for e in employees:
        t = totals.get(e.employee_id)
        if not t:
            continue
        rows.append(
            WorkHoursRow(
                employee_id=e.employee_id,
                employee_name=e.name,
                total_hours=round(t[0], 2),
                overtime_hours=round(t[1], 2),
            )
        )
    return rows


def leave_report(
    employees: Sequence[Employee],
    logs: Sequence[WorkLog],
    start: date,
    end: Optional[date] = None,
) -> list[LogRow]:
    names = _names(employees)
    return [_log_row(log, names) for log in _sorted(filter_range(logs, start, end)) if log.is_approved_leave]
