from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.geoattend.geoattend.attendance.model import WorkLog
from src.geoattend.geoattend.core.enums import LeaveApprovalStatus, WorkLogStatus
from src.geoattend.geoattend.core.exceptions import ValidationError
from src.geoattend.geoattend.employees.model import Employee
from src.geoattend.geoattend.reports.aggregation import (
    attendance_recap,
    daily_summary,
    filter_range,
    lateness_report,
    leave_report,
    percentage,
    weekly_series,
    work_hours_report,
)

TODAY = date(2026, 3, 4)  # Wednesday


def _worked(log_id, employee_id, day, status, hours=None):
    check_in = datetime.combine(day, time(8, 0))
    check_out = check_in + timedelta(hours=hours) if hours is not None else None
    return WorkLog(
        work_log_id=log_id,
        employee_id=employee_id,
        work_date=day,
        status=status,
        check_in_time=check_in,
        check_out_time=check_out,
        duration_hours=hours or 0.0,
    )


def _leave(log_id, employee_id, day, status, approval):
    return WorkLog(
        work_log_id=log_id,
        employee_id=employee_id,
        work_date=day,
        status=status,
        leave_note="note",
        leave_approval_status=approval,
    )


@pytest.fixture
def today_logs():
    return [
        _worked(1, 1, TODAY, WorkLogStatus.ON_TIME, hours=9.5),
        _worked(2, 2, TODAY, WorkLogStatus.ON_TIME),
        _worked(3, 3, TODAY, WorkLogStatus.LATE, hours=7.0),
        _leave(4, 4, TODAY, WorkLogStatus.ON_LEAVE, LeaveApprovalStatus.APPROVED),
    ]


def test_summary_counts_and_absence_by_complement(roster, today_logs):
    summary = daily_summary(roster, today_logs, TODAY)

    assert summary.total_employees == 5
    assert (summary.on_time, summary.late, summary.on_leave, summary.absent) == (2, 1, 1, 1)
    assert summary.on_time + summary.late + summary.on_leave + summary.absent == summary.total_employees


def test_summary_percentages(roster, today_logs):
    summary = daily_summary(roster, today_logs, TODAY)

    assert summary.on_time_percentage == 67
    assert summary.late_percentage == 33
    assert summary.absent_percentage == 20


def test_summary_hours_and_overtime(roster, today_logs):
    summary = daily_summary(roster, today_logs, TODAY)

    assert summary.total_work_hours_today == 16.5
    assert summary.total_overtime_hours_today == 1.5


def test_pending_and_rejected_leave_count_as_absent(roster):
    logs = [
        _leave(1, 1, TODAY, WorkLogStatus.SICK, LeaveApprovalStatus.PENDING),
        _leave(2, 2, TODAY, WorkLogStatus.ABSENT, LeaveApprovalStatus.REJECTED),
    ]

    summary = daily_summary(roster, logs, TODAY)

    assert summary.on_leave == 0
    assert summary.absent == 5


def test_empty_roster_gives_zero_summary():
    summary = daily_summary([], [], TODAY)

    assert summary.total_employees == 0
    assert summary.absent_percentage == 0


def test_no_one_present_avoids_division_by_zero(roster):
    summary = daily_summary(roster, [], TODAY)

    assert summary.on_time_percentage == 0
    assert summary.late_percentage == 0
    assert summary.absent_percentage == 100


def test_logs_of_removed_employees_are_ignored(roster):
    summary = daily_summary(roster, [_worked(1, 42, TODAY, WorkLogStatus.ON_TIME)], TODAY)

    assert summary.on_time == 0
    assert summary.absent == 5


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13
    assert percentage(1, 200) == 1
    assert percentage(0, 0) == 0


def test_weekly_series_covers_trailing_seven_days(roster, today_logs):
    yesterday = TODAY - timedelta(days=1)
    logs = today_logs + [_worked(10, 1, yesterday, WorkLogStatus.LATE)]

    series = weekly_series(roster, logs, TODAY)

    assert len(series) == 7
    assert series[0].date == "2026-02-26"
    assert series[-1].date == "2026-03-04"
    assert series[-1].day == "Wed"
    assert (series[-1].on_time, series[-1].late, series[-1].on_leave, series[-1].absent) == (2, 1, 1, 1)
    assert (series[-2].late, series[-2].absent) == (1, 4)
    assert series[0].absent == 5


def test_weekly_series_point_keys(roster):
    point = weekly_series(roster, [], TODAY)[0].to_dict()

    assert set(point) == {"date", "day", "On-Time", "Late", "On-Leave", "Absent"}


def test_weekly_series_empty_roster():
    assert weekly_series([], [], TODAY) == []


def test_filter_range_is_inclusive():
    logs = [_worked(i, 1, TODAY + timedelta(days=i), WorkLogStatus.ON_TIME) for i in range(-2, 3)]

    assert len(filter_range(logs, TODAY - timedelta(days=1), TODAY + timedelta(days=1))) == 3
    assert len(filter_range(logs, TODAY)) == 1


def test_filter_range_rejects_inverted_range():
    with pytest.raises(ValidationError):
        filter_range([], TODAY, TODAY - timedelta(days=1))


def test_recap_counts_per_employee(roster):
    logs = [
        _worked(1, 1, TODAY, WorkLogStatus.ON_TIME),
        _worked(2, 1, TODAY - timedelta(days=1), WorkLogStatus.LATE),
        _leave(3, 2, TODAY, WorkLogStatus.SICK, LeaveApprovalStatus.APPROVED),
        _leave(4, 2, TODAY - timedelta(days=1), WorkLogStatus.ABSENT, LeaveApprovalStatus.REJECTED),
        _leave(5, 3, TODAY, WorkLogStatus.ON_LEAVE, LeaveApprovalStatus.PENDING),
    ]

    rows = {r.employee_id: r for r in attendance_recap(roster, logs, TODAY - timedelta(days=1), TODAY)}

    assert len(rows) == 5
    assert (rows[1].present, rows[1].late, rows[1].leave, rows[1].absent) == (1, 1, 0, 0)
    assert (rows[2].present, rows[2].late, rows[2].leave, rows[2].absent) == (0, 0, 1, 1)
    assert (rows[3].present, rows[3].late, rows[3].leave, rows[3].absent) == (0, 0, 0, 0)


def test_lateness_report_lists_late_logs_in_date_order(roster):
    logs = [
        _worked(1, 2, TODAY, WorkLogStatus.LATE, hours=8),
        _worked(2, 1, TODAY - timedelta(days=2), WorkLogStatus.LATE),
        _worked(3, 3, TODAY, WorkLogStatus.ON_TIME),
    ]

    rows = lateness_report(roster, logs, TODAY - timedelta(days=7), TODAY)

    assert [(r.date, r.employee_name) for r in rows] == [("2026-03-02", "Employee 1"), ("2026-03-04", "Employee 2")]
    assert rows[1].check_in == "08:00:00"
    assert rows[1].check_out == "16:00:00"


def test_work_hours_report_totals_and_overtime(roster):
    logs = [
        _worked(1, 1, TODAY, WorkLogStatus.ON_TIME, hours=9.25),
        _worked(2, 1, TODAY - timedelta(days=1), WorkLogStatus.ON_TIME, hours=7.5),
        _worked(3, 2, TODAY, WorkLogStatus.LATE),
    ]

    rows = work_hours_report(roster, logs, TODAY - timedelta(days=1), TODAY)

    assert len(rows) == 1
    assert rows[0].employee_id == 1
    assert rows[0].total_hours == 16.75
    assert rows[0].overtime_hours == 1.25


def test_leave_report_only_approved_leave(roster):
    logs = [
        _leave(1, 1, TODAY, WorkLogStatus.SICK, LeaveApprovalStatus.APPROVED),
        _leave(2, 2, TODAY, WorkLogStatus.ON_LEAVE, LeaveApprovalStatus.PENDING),
        _leave(3, 3, TODAY, WorkLogStatus.ABSENT, LeaveApprovalStatus.REJECTED),
    ]

    rows = leave_report(roster, logs, TODAY)

    assert [(r.employee_id, r.status) for r in rows] == [(1, "Sick")]
    assert rows[0].leave_note == "note"


def test_reports_name_unknown_employees():
    rows = lateness_report([Employee(1, "A", "a@x.io")], [_worked(1, 9, TODAY, WorkLogStatus.LATE)], TODAY)

    assert rows[0].employee_name == "Unknown"
