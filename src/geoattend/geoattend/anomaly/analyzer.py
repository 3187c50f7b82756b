from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import WorkLogStatus
from .model import AnomalyResult, AttendanceRecord


class AnomalyAnalyzer(Protocol):
    """Advisory pattern detector; never writes to the attendance store."""

    def detect(self, employee_id: int, records: Sequence[AttendanceRecord]) -> AnomalyResult:
        raise NotImplementedError


def _rate(records: Sequence[AttendanceRecord], statuses: set[str]) -> float:
    if not records:
        return 0.0
    return sum(1 for r in records if r.status in statuses) / len(records)


class BaselineShiftAnalyzer:
    """Compares the older half of the history with the recent half.

    A rise in the late or absent rate of at least ``threshold`` (0..1) between
    the two halves is reported as an anomaly.
    """

    _LATE = {WorkLogStatus.LATE.value}
    _ABSENT = {WorkLogStatus.ABSENT.value}

    def __init__(self, *, threshold: float = 0.3):
        self._threshold = float(threshold)

    def detect(self, employee_id: int, records: Sequence[AttendanceRecord]) -> AnomalyResult:
        middle = len(records) // 2
        baseline, recent = records[:middle], records[middle:]

        findings = []
        for label, statuses in (("late arrivals", self._LATE), ("absences", self._ABSENT)):
            before = _rate(baseline, statuses)
            after = _rate(recent, statuses)
            if after - before >= self._threshold:
                findings.append(f"{label} rose from {before:.0%} to {after:.0%} of recent work logs")

        if not findings:
            return AnomalyResult(
                anomaly_detected=False,
                anomaly_description="No unusual attendance pattern detected.",
            )
        return AnomalyResult(
            anomaly_detected=True,
            anomaly_description=f"Employee {employee_id}: " + "; ".join(findings) + ".",
        )
