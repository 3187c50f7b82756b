from __future__ import annotations

from ...attendance.model import WorkLog
from ...core.constants import STANDARD_WORKDAY_HOURS
from .base import WorkHoursCalculator


class StandardWorkHoursCalculator(WorkHoursCalculator):
    """Standard rule: stored duration, overtime is anything beyond the standard day."""

    def __init__(self, standard_hours: float = STANDARD_WORKDAY_HOURS):
        self._standard_hours = float(standard_hours)

    def worked_hours(self, log: WorkLog) -> float:
        return max(float(log.duration_hours or 0), 0.0)

    def overtime_hours(self, log: WorkLog) -> float:
        return max(self.worked_hours(log) - self._standard_hours, 0.0)
