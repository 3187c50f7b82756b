from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee referenced by every work-log."""

    employee_id: int
    name: str
    email: str
    position: Optional[str] = None
    avatar_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "position": self.position,
            "avatar_url": self.avatar_url,
        }
