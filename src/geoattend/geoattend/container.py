from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Optional

from .anomaly.analyzer import BaselineShiftAnalyzer
from .anomaly.service import AnomalyService
from .attendance.factory import StatusClassifierFactory
from .attendance.mysql_worklog_repository import MySQLWorkLogRepository
from .attendance.repository import WorkLogRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_RECENT_LOG_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.calculator.standard_calculator import StandardWorkHoursCalculator
from .reports.service import ReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    settings_repo: SettingsRepository
    work_logs_repo: WorkLogRepository

    employee_service: EmployeeService
    settings_service: SettingsService
    attendance_service: AttendanceService
    report_service: ReportService
    anomaly_service: AnomalyService

    history_limit: int = DEFAULT_HISTORY_LIMIT


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    settings_repo: SettingsRepository,
    work_logs_repo: WorkLogRepository,
    conn: Optional[DatabaseConnection] = None,
    clock=None,
    recent_log_limit: int = DEFAULT_RECENT_LOG_LIMIT,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    """Build the services on top of already-constructed repositories."""
    clock = clock or now_local
    calculator = StandardWorkHoursCalculator()

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        settings_repo=settings_repo,
        work_logs_repo=work_logs_repo,
        employee_service=EmployeeService(employees_repo),
        settings_service=SettingsService(settings_repo),
        attendance_service=AttendanceService(
            work_logs_repo,
            employees_repo,
            settings_repo,
            classifier=StatusClassifierFactory(),
            clock=clock,
        ),
        report_service=ReportService(
            employees_repo,
            work_logs_repo,
            calculator=calculator,
            clock=clock,
            recent_limit=recent_log_limit,
        ),
        anomaly_service=AnomalyService(
            work_logs_repo,
            employees_repo,
            BaselineShiftAnalyzer(),
            history_limit=history_limit,
        ),
        history_limit=int(history_limit),
    )


def build_container(
    *,
    db_config: dict,
    office_timezone: Optional[str] = None,
    recent_log_limit: int = DEFAULT_RECENT_LOG_LIMIT,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        work_logs_repo=MySQLWorkLogRepository(conn),
        conn=conn,
        clock=partial(now_local, office_timezone),
        recent_log_limit=recent_log_limit,
        history_limit=history_limit,
    )
