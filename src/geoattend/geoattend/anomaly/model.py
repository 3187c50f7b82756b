from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    timestamp: str
    status: str


@dataclass(frozen=True)
class AnomalyResult:
    anomaly_detected: bool = False
    anomaly_description: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {
            "anomalyDetected": self.anomaly_detected,
            "anomalyDescription": self.anomaly_description,
        }
