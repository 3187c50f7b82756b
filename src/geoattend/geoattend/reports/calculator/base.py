from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import WorkLog


class WorkHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked/overtime hours)."""

    @abstractmethod
    def worked_hours(self, log: WorkLog) -> float:
        raise NotImplementedError

    @abstractmethod
    def overtime_hours(self, log: WorkLog) -> float:
        raise NotImplementedError
