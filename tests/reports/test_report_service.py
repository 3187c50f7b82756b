from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.geoattend.geoattend.attendance.model import WorkLog
from src.geoattend.geoattend.core.enums import LeaveApprovalStatus, ReportKind, WorkLogStatus
from src.geoattend.geoattend.core.exceptions import ValidationError
from src.geoattend.geoattend.reports.service import ReportService


@pytest.fixture
def service(employees_repo, work_logs_repo, fixed_now):
    return ReportService(employees_repo, work_logs_repo, clock=lambda: fixed_now)


def _checked_in(log_id, employee_id, day, status=WorkLogStatus.ON_TIME):
    return WorkLog(
        work_log_id=log_id,
        employee_id=employee_id,
        work_date=day,
        status=status,
        check_in_time=datetime.combine(day, time(8, 0)),
    )


def test_dashboard_bundles_summary_weekly_recent_and_pending(service, work_logs_repo, today):
    for i in range(1, 8):
        work_logs_repo.add(_checked_in(i, 1, today - timedelta(days=i)))
    work_logs_repo.add(_checked_in(20, 2, today, WorkLogStatus.LATE))
    work_logs_repo.add(
        WorkLog(
            work_log_id=21,
            employee_id=3,
            work_date=today,
            status=WorkLogStatus.SICK,
            leave_note="Flu",
            leave_approval_status=LeaveApprovalStatus.PENDING,
        )
    )

    data = service.build_dashboard()

    assert data.summary.late == 1
    assert data.summary.absent == 4
    assert len(data.weekly) == 7
    assert data.weekly[-2].on_time == 1
    assert len(data.recent_logs) == 5
    assert data.recent_logs[0].work_date == today
    assert [log.work_log_id for log in data.pending_leave_requests] == [21]

    payload = data.to_dict()
    assert payload["summary"]["late"] == 1
    assert payload["recent_logs"][0]["date"] == today.isoformat()


def test_default_period_is_month_to_date(service, today):
    assert service.default_period() == (date(2026, 3, 1), today)


def test_build_report_dispatches_by_kind(service, work_logs_repo, today):
    work_logs_repo.add(_checked_in(1, 2, today, WorkLogStatus.LATE))

    report = service.build_report("lateness", start=today)

    assert report.kind == ReportKind.LATENESS
    assert report.end == today
    assert [r.employee_id for r in report.rows] == [2]
    assert report.to_dict()["rows"][0]["employee_name"] == "Employee 2"


def test_recap_report_lists_every_employee(service, today):
    report = service.build_report(ReportKind.RECAP, start=today.replace(day=1), end=today)

    assert len(report.rows) == 5


def test_unknown_report_kind(service, today):
    with pytest.raises(ValidationError):
        service.build_report("payroll", start=today)


def test_inverted_period_rejected(service, today):
    with pytest.raises(ValidationError):
        service.build_report("leave", start=today, end=today - timedelta(days=1))
