from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, to_time_of_day
from .model import OfficeSettings
from .repository import SettingsRepository

SETTINGS_ROW_ID = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[OfficeSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT latitude, longitude, radius_m, work_start, work_end, late_tolerance_minutes
                FROM office_settings
                WHERE settings_id=%s
                """,
                (SETTINGS_ROW_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return OfficeSettings(
                latitude=float(r["latitude"]),
                longitude=float(r["longitude"]),
                radius_m=float(r["radius_m"]),
                work_start=to_time_of_day(r.get("work_start")),
                work_end=to_time_of_day(r.get("work_end")),
                late_tolerance_minutes=int(r.get("late_tolerance_minutes") or 0),
            )

    def save(self, settings: OfficeSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO office_settings(
                    settings_id, latitude, longitude, radius_m, work_start, work_end, late_tolerance_minutes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    latitude=VALUES(latitude),
                    longitude=VALUES(longitude),
                    radius_m=VALUES(radius_m),
                    work_start=VALUES(work_start),
                    work_end=VALUES(work_end),
                    late_tolerance_minutes=VALUES(late_tolerance_minutes)
                """,
                (
                    SETTINGS_ROW_ID,
                    settings.latitude,
                    settings.longitude,
                    settings.radius_m,
                    settings.work_start,
                    settings.work_end,
                    int(settings.late_tolerance_minutes),
                ),
            )
