from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Optional

from ..attendance.model import WorkLog
from ..core.enums import ReportKind


@dataclass(frozen=True)
class DailySummary:
    total_employees: int = 0
    on_time: int = 0
    late: int = 0
    on_leave: int = 0
    absent: int = 0
    on_time_percentage: int = 0
    late_percentage: int = 0
    absent_percentage: int = 0
    total_work_hours_today: float = 0.0
    total_overtime_hours_today: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ChartPoint:
    """One day of the trailing weekly chart."""

    date: str
    day: str
    on_time: int
    late: int
    on_leave: int
    absent: int

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "day": self.day,
            "On-Time": self.on_time,
            "Late": self.late,
            "On-Leave": self.on_leave,
            "Absent": self.absent,
        }


@dataclass(frozen=True)
class RecapRow:
    employee_id: int
    employee_name: str
    present: int = 0
    late: int = 0
    leave: int = 0
    absent: int = 0


@dataclass(frozen=True)
class WorkHoursRow:
    employee_id: int
    employee_name: str
    total_hours: float
    overtime_hours: float


@dataclass(frozen=True)
class LogRow:
    """Per-log row used by the lateness and leave reports."""

    date: str
    employee_id: int
    employee_name: str
    status: str
    check_in: Optional[str]
    check_out: Optional[str]
    duration_hours: float
    leave_note: Optional[str]
    leave_approval_status: str


@dataclass(frozen=True)
class RangeReport:
    kind: ReportKind
    start: date
    end: date
    rows: list = field(default_factory=list)

    def row_dicts(self) -> list[dict]:
        return [asdict(r) for r in self.rows]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "rows": self.row_dicts(),
        }


@dataclass(frozen=True)
class DashboardData:
    summary: DailySummary
    weekly: list[ChartPoint]
    recent_logs: list[WorkLog]
    pending_leave_requests: list[WorkLog]

    def to_dict(self) -> dict:
        return {
            "summary": self.summary.to_dict(),
            "weekly": [p.to_dict() for p in self.weekly],
            "recent_logs": [log.to_dict() for log in self.recent_logs],
            "pending_leave_requests": [log.to_dict() for log in self.pending_leave_requests],
        }
