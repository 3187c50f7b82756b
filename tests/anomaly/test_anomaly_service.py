from __future__ import annotations

from datetime import date, timedelta

import pytest

from src.geoattend.geoattend.anomaly.analyzer import BaselineShiftAnalyzer
from src.geoattend.geoattend.anomaly.model import AnomalyResult, AttendanceRecord
from src.geoattend.geoattend.anomaly.service import NOT_ENOUGH_DATA, AnomalyService
from src.geoattend.geoattend.attendance.model import WorkLog
from src.geoattend.geoattend.core.enums import LeaveApprovalStatus, WorkLogStatus
from src.geoattend.geoattend.core.exceptions import NotFoundError

START = date(2026, 2, 2)


class RecordingAnalyzer:
    def __init__(self, result=None, error=None):
        self.calls = []
        self._result = result or AnomalyResult(anomaly_detected=False, anomaly_description="ok")
        self._error = error

    def detect(self, employee_id, records):
        self.calls.append((employee_id, list(records)))
        if self._error:
            raise self._error
        return self._result


def _seed(repo, employee_id, statuses):
    for i, status in enumerate(statuses):
        repo.add(
            WorkLog(
                work_log_id=100 + i,
                employee_id=employee_id,
                work_date=START + timedelta(days=i),
                status=status,
                leave_approval_status=(
                    LeaveApprovalStatus.REJECTED if status == WorkLogStatus.ABSENT else LeaveApprovalStatus.NOT_APPLICABLE
                ),
            )
        )


def test_fewer_than_five_logs_skips_analysis(work_logs_repo, employees_repo):
    _seed(work_logs_repo, 1, [WorkLogStatus.LATE] * 4)
    analyzer = RecordingAnalyzer()

    result = AnomalyService(work_logs_repo, employees_repo, analyzer).analyze(1)

    assert result.to_dict() == {"anomalyDetected": False, "anomalyDescription": NOT_ENOUGH_DATA}
    assert analyzer.calls == []


def test_records_are_passed_oldest_first(work_logs_repo, employees_repo):
    _seed(work_logs_repo, 1, [WorkLogStatus.ON_TIME, WorkLogStatus.LATE] * 3)
    analyzer = RecordingAnalyzer()

    AnomalyService(work_logs_repo, employees_repo, analyzer).analyze(1)

    employee_id, records = analyzer.calls[0]
    assert employee_id == 1
    assert records[0] == AttendanceRecord(timestamp="2026-02-02", status="On-Time")
    assert [r.timestamp for r in records] == sorted(r.timestamp for r in records)


def test_analyzer_failure_becomes_error_text(work_logs_repo, employees_repo):
    _seed(work_logs_repo, 1, [WorkLogStatus.ON_TIME] * 5)
    analyzer = RecordingAnalyzer(error=RuntimeError("quota exceeded"))

    result = AnomalyService(work_logs_repo, employees_repo, analyzer).analyze(1)

    assert result.error == "An unexpected error occurred: quota exceeded"
    assert result.to_dict() == {"error": "An unexpected error occurred: quota exceeded"}


def test_missing_analyzer_is_reported(work_logs_repo, employees_repo):
    _seed(work_logs_repo, 1, [WorkLogStatus.ON_TIME] * 5)

    result = AnomalyService(work_logs_repo, employees_repo).analyze(1)

    assert result.error


def test_unknown_employee(work_logs_repo, employees_repo):
    with pytest.raises(NotFoundError):
        AnomalyService(work_logs_repo, employees_repo, RecordingAnalyzer()).analyze(99)


def test_baseline_shift_detects_rising_lateness():
    records = [AttendanceRecord(f"2026-02-{d:02d}", "On-Time") for d in range(1, 6)]
    records += [AttendanceRecord(f"2026-02-{d:02d}", "Late") for d in range(6, 11)]

    result = BaselineShiftAnalyzer().detect(7, records)

    assert result.anomaly_detected is True
    assert "late arrivals" in result.anomaly_description


def test_baseline_shift_steady_history():
    records = [AttendanceRecord(f"2026-02-{d:02d}", "On-Time") for d in range(1, 11)]

    result = BaselineShiftAnalyzer().detect(7, records)

    assert result.anomaly_detected is False
