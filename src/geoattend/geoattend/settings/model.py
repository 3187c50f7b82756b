from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..common.datetime_utils import format_hhmm
from ..geofence.evaluator import Coordinates


@dataclass(frozen=True)
class OfficeSettings:
    """Singleton office configuration: geofence anchor and the work-hours window."""

    latitude: float
    longitude: float
    radius_m: float
    work_start: Optional[time]
    work_end: Optional[time]
    late_tolerance_minutes: int = 0

    @property
    def anchor(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    @property
    def has_work_hours(self) -> bool:
        return self.work_start is not None and self.work_end is not None

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius_m": self.radius_m,
            "work_start": format_hhmm(self.work_start),
            "work_end": format_hhmm(self.work_end),
            "late_tolerance_minutes": self.late_tolerance_minutes,
        }
