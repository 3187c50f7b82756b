from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import WorkLogRepository
from ..core.constants import DEFAULT_HISTORY_LIMIT, MIN_ANOMALY_RECORDS
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .analyzer import AnomalyAnalyzer
from .model import AnomalyResult, AttendanceRecord

logger = logging.getLogger(__name__)

NOT_ENOUGH_DATA = (
    f"Not enough data for analysis (requires at least {MIN_ANOMALY_RECORDS} work logs)."
)


class AnomalyService:
    """Gatekeeper around the anomaly-analysis collaborator.

    The result is advisory: failures are returned as an error string and never
    touch the work-log state machine.
    """

    def __init__(
        self,
        work_logs: WorkLogRepository,
        employees: EmployeeRepository,
        analyzer: Optional[AnomalyAnalyzer] = None,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._work_logs = work_logs
        self._employees = employees
        self._analyzer = analyzer
        self._history_limit = int(history_limit)

    def analyze(self, employee_id: int) -> AnomalyResult:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

        logs = list(self._work_logs.list_recent(limit=self._history_limit, employee_id=int(employee_id)))
        if len(logs) < MIN_ANOMALY_RECORDS:
            return AnomalyResult(anomaly_detected=False, anomaly_description=NOT_ENOUGH_DATA)

        if self._analyzer is None:
            return AnomalyResult(error="Anomaly analysis is not configured")

        records = [
            AttendanceRecord(timestamp=log.date_key, status=log.status.value)
            for log in sorted(logs, key=lambda log: log.work_date)
        ]
        try:
            return self._analyzer.detect(int(employee_id), records)
        except Exception as e:
            logger.exception("Anomaly analysis failed for employee %s", employee_id)
            return AnomalyResult(error=f"An unexpected error occurred: {e}")
