from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_in_range, require_non_negative
from ..core.enums import RejectionReason
from ..core.exceptions import OperationRejected, ValidationError
from .model import OfficeSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def build_settings(
    *,
    latitude: Any,
    longitude: Any,
    radius_m: Any,
    work_start: Optional[str],
    work_end: Optional[str],
    late_tolerance_minutes: Any,
) -> OfficeSettings:
    """Validate raw admin input into an OfficeSettings value."""

    lat = require_in_range(latitude, "Latitude", -90.0, 90.0)
    lon = require_in_range(longitude, "Longitude", -180.0, 180.0)
    radius = require_non_negative(radius_m, "Radius")
    tolerance = require_non_negative(late_tolerance_minutes, "Late tolerance")
    if tolerance != int(tolerance):
        raise ValidationError("Late tolerance must be a whole number of minutes")

    if not work_start or not work_end:
        raise ValidationError("Work start and work end are required")
    try:
        start = parse_hhmm(work_start)
        end = parse_hhmm(work_end)
    except ValueError:
        raise ValidationError("Invalid time (HH:MM)")
    if start >= end:
        raise ValidationError("Work start must be before work end")

    return OfficeSettings(
        latitude=lat,
        longitude=lon,
        radius_m=radius,
        work_start=start,
        work_end=end,
        late_tolerance_minutes=int(tolerance),
    )


class SettingsService:
    """Use case: read and administer the office settings document."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> Optional[OfficeSettings]:
        return self._settings.get()

    def require_settings(self) -> OfficeSettings:
        settings = self._settings.get()
        if not settings:
            raise OperationRejected(
                RejectionReason.NOT_CONFIGURED,
                "Office location has not been configured. Contact your administrator.",
            )
        return settings

    def require_work_hours(self) -> OfficeSettings:
        settings = self.require_settings()
        if not settings.has_work_hours:
            raise OperationRejected(
                RejectionReason.NOT_CONFIGURED,
                "The administrator has not configured work hours yet.",
            )
        return settings

    def update_settings(self, **raw: Any) -> OfficeSettings:
        settings = build_settings(**raw)
        self._settings.save(settings)
        logger.info(
            "Office settings updated: radius=%sm window=%s-%s tolerance=%smin",
            settings.radius_m,
            settings.work_start,
            settings.work_end,
            settings.late_tolerance_minutes,
        )
        return settings
