from __future__ import annotations

import sys
from dataclasses import replace
from datetime import date, datetime, time
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.geoattend.geoattend.attendance.model import WorkLog  # noqa: E402
from src.geoattend.geoattend.core.enums import LeaveApprovalStatus, RejectionReason  # noqa: E402
from src.geoattend.geoattend.core.exceptions import OperationRejected  # noqa: E402
from src.geoattend.geoattend.employees.model import Employee  # noqa: E402
from src.geoattend.geoattend.settings.model import OfficeSettings  # noqa: E402

OFFICE_LAT = -6.930917
OFFICE_LON = 107.534083


class FakeEmployeesRepo:
    def __init__(self, employees=()):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1
        for e in employees:
            self._rows[e.employee_id] = e
            self._next_id = max(self._next_id, e.employee_id + 1)

    def get_by_id(self, employee_id):
        return self._rows.get(int(employee_id))

    def get_by_email(self, email):
        return next((e for e in self._rows.values() if e.email == email), None)

    def list_all(self):
        return sorted(self._rows.values(), key=lambda e: e.name)

    def create(self, *, name, email, position, avatar_url):
        employee_id = self._next_id
        self._next_id += 1
        self._rows[employee_id] = Employee(employee_id, name, email, position, avatar_url)
        return employee_id

    def update(self, *, employee_id, name, email, position, avatar_url):
        if int(employee_id) not in self._rows:
            return False
        self._rows[int(employee_id)] = Employee(int(employee_id), name, email, position, avatar_url)
        return True

    def delete_by_id(self, employee_id):
        return self._rows.pop(int(employee_id), None) is not None


class FakeSettingsRepo:
    def __init__(self, settings=None):
        self.settings = settings

    def get(self):
        return self.settings

    def save(self, settings):
        self.settings = settings


class FakeWorkLogsRepo:
    """Mirrors the MySQL adapter: unique (employee, date) and conditional updates."""

    def __init__(self, logs=()):
        self._rows: dict[int, WorkLog] = {}
        self._next_id = 1
        for log in logs:
            self.add(log)

    def add(self, log: WorkLog) -> WorkLog:
        self._rows[log.work_log_id] = log
        self._next_id = max(self._next_id, log.work_log_id + 1)
        return log

    def _insert(self, **fields) -> int:
        if self.get_for_employee_and_date(fields["employee_id"], fields["work_date"]):
            raise OperationRejected(RejectionReason.DUPLICATE_RECORD, "A record already exists for this day")
        work_log_id = self._next_id
        self._next_id += 1
        self._rows[work_log_id] = WorkLog(work_log_id=work_log_id, **fields)
        return work_log_id

    def get_by_id(self, work_log_id):
        return self._rows.get(int(work_log_id))

    def get_for_employee_and_date(self, employee_id, work_date):
        return next(
            (r for r in self._rows.values() if r.employee_id == int(employee_id) and r.work_date == work_date),
            None,
        )

    def create_check_in(self, *, employee_id, work_date, status, check_in_time, latitude, longitude, photo_url):
        return self._insert(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            check_in_time=check_in_time,
            check_in_latitude=latitude,
            check_in_longitude=longitude,
            check_in_photo_url=photo_url,
        )

    def create_leave(self, *, employee_id, work_date, status, leave_note):
        return self._insert(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            leave_note=leave_note,
            leave_approval_status=LeaveApprovalStatus.PENDING,
        )

    def update_check_out(
        self,
        *,
        work_log_id,
        check_out_time,
        duration_hours,
        latitude=None,
        longitude=None,
        photo_url=None,
        correction_note=None,
    ):
        r = self._rows.get(int(work_log_id))
        if not r or r.check_in_time is None or r.check_out_time is not None:
            return False
        self._rows[r.work_log_id] = replace(
            r,
            check_out_time=check_out_time,
            duration_hours=duration_hours,
            check_out_latitude=latitude,
            check_out_longitude=longitude,
            check_out_photo_url=photo_url,
            correction_note=correction_note,
        )
        return True

    def update_leave_decision(self, *, work_log_id, status, leave_approval_status):
        r = self._rows.get(int(work_log_id))
        if not r or r.leave_approval_status != LeaveApprovalStatus.PENDING:
            return False
        self._rows[r.work_log_id] = replace(r, status=status, leave_approval_status=leave_approval_status)
        return True

    def list_between(self, start_date, end_date):
        rows = [r for r in self._rows.values() if start_date <= r.work_date <= end_date]
        return sorted(rows, key=lambda r: (r.work_date, r.employee_id))

    def list_recent(self, *, limit, employee_id=None):
        rows = [r for r in self._rows.values() if employee_id is None or r.employee_id == int(employee_id)]
        rows.sort(key=lambda r: (r.work_date, r.work_log_id), reverse=True)
        return rows[: int(limit)]

    def list_pending_leaves(self):
        rows = [r for r in self._rows.values() if r.leave_approval_status == LeaveApprovalStatus.PENDING]
        return sorted(rows, key=lambda r: (r.work_date, r.work_log_id))

    def delete_all(self):
        deleted = len(self._rows)
        self._rows.clear()
        return deleted


@pytest.fixture
def today() -> date:
    return date(2026, 3, 4)


@pytest.fixture
def fixed_now(today) -> datetime:
    return datetime.combine(today, time(8, 10))


@pytest.fixture
def office_settings() -> OfficeSettings:
    return OfficeSettings(
        latitude=OFFICE_LAT,
        longitude=OFFICE_LON,
        radius_m=50,
        work_start=time(8, 0),
        work_end=time(17, 0),
        late_tolerance_minutes=15,
    )


@pytest.fixture
def roster() -> list[Employee]:
    return [Employee(i, f"Employee {i}", f"employee{i}@example.com") for i in range(1, 6)]


@pytest.fixture
def employees_repo(roster) -> FakeEmployeesRepo:
    return FakeEmployeesRepo(roster)


@pytest.fixture
def settings_repo(office_settings) -> FakeSettingsRepo:
    return FakeSettingsRepo(office_settings)


@pytest.fixture
def work_logs_repo() -> FakeWorkLogsRepo:
    return FakeWorkLogsRepo()
