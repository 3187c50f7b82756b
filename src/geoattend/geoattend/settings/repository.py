from __future__ import annotations

from typing import Optional, Protocol

from .model import OfficeSettings


class SettingsRepository(Protocol):
    """Singleton office-settings document."""

    def get(self) -> Optional[OfficeSettings]:
        raise NotImplementedError

    def save(self, settings: OfficeSettings) -> None:
        raise NotImplementedError
