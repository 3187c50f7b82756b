from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import LeaveApprovalStatus, RejectionReason, WorkLogStatus
from ..core.exceptions import OperationRejected
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkLog
from .repository import WorkLogRepository

_COLUMNS = """
    work_log_id, employee_id, work_date, status,
    check_in_time, check_out_time,
    check_in_latitude, check_in_longitude, check_out_latitude, check_out_longitude,
    check_in_photo_url, check_out_photo_url,
    duration_hours, leave_note, leave_approval_status, correction_note
"""


def _opt_float(value) -> Optional[float]:
    return float(value) if value is not None else None


def _to_work_log(r: dict) -> WorkLog:
    return WorkLog(
        work_log_id=int(r["work_log_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        status=WorkLogStatus(r["status"]),
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        check_in_latitude=_opt_float(r.get("check_in_latitude")),
        check_in_longitude=_opt_float(r.get("check_in_longitude")),
        check_out_latitude=_opt_float(r.get("check_out_latitude")),
        check_out_longitude=_opt_float(r.get("check_out_longitude")),
        check_in_photo_url=r.get("check_in_photo_url"),
        check_out_photo_url=r.get("check_out_photo_url"),
        duration_hours=float(r.get("duration_hours") or 0),
        leave_note=r.get("leave_note"),
        leave_approval_status=LeaveApprovalStatus(r["leave_approval_status"]),
        correction_note=r.get("correction_note"),
    )


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, work_log_id: int) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_logs WHERE work_log_id=%s", (int(work_log_id),))
            r = fetchone(cur)
            return _to_work_log(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM work_logs WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_work_log(r) if r else None

    def _insert_if_absent(self, sql: str, params: tuple) -> int:
        # uq_work_logs_employee_date makes the insert itself the uniqueness check.
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(sql, params)
            except mysql.connector.IntegrityError as exc:
                if exc.errno != errorcode.ER_DUP_ENTRY:
                    raise
                raise OperationRejected(
                    RejectionReason.DUPLICATE_RECORD,
                    "A work log already exists for this employee today",
                )
            return int(cur.lastrowid)

    def create_check_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: WorkLogStatus,
        check_in_time: datetime,
        latitude: float,
        longitude: float,
        photo_url: Optional[str],
    ) -> int:
        return self._insert_if_absent(
            """
            INSERT INTO work_logs(
                employee_id, work_date, status, check_in_time,
                check_in_latitude, check_in_longitude, check_in_photo_url,
                duration_hours, leave_approval_status
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,0,%s)
            """,
            (
                int(employee_id),
                work_date,
                status.value,
                check_in_time,
                latitude,
                longitude,
                photo_url,
                LeaveApprovalStatus.NOT_APPLICABLE.value,
            ),
        )

    def create_leave(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: WorkLogStatus,
        leave_note: str,
    ) -> int:
        return self._insert_if_absent(
            """
            INSERT INTO work_logs(employee_id, work_date, status, leave_note, duration_hours, leave_approval_status)
            VALUES(%s,%s,%s,%s,0,%s)
            """,
            (int(employee_id), work_date, status.value, leave_note, LeaveApprovalStatus.PENDING.value),
        )

    def update_check_out(
        self,
        *,
        work_log_id: int,
        check_out_time: datetime,
        duration_hours: float,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        photo_url: Optional[str] = None,
        correction_note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET check_out_time=%s, duration_hours=%s,
                    check_out_latitude=%s, check_out_longitude=%s,
                    check_out_photo_url=%s, correction_note=%s
                WHERE work_log_id=%s
                  AND check_in_time IS NOT NULL
                  AND check_out_time IS NULL
                """,
                (
                    check_out_time,
                    duration_hours,
                    latitude,
                    longitude,
                    photo_url,
                    correction_note,
                    int(work_log_id),
                ),
            )
            return cur.rowcount > 0

    def update_leave_decision(
        self,
        *,
        work_log_id: int,
        status: WorkLogStatus,
        leave_approval_status: LeaveApprovalStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_logs
                SET status=%s, leave_approval_status=%s
                WHERE work_log_id=%s AND leave_approval_status=%s
                """,
                (status.value, leave_approval_status.value, int(work_log_id), LeaveApprovalStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_between(self, start_date: date, end_date: date) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_logs
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, employee_id ASC
                """,
                (start_date, end_date),
            )
            return [_to_work_log(r) for r in fetchall(cur)]

    def list_recent(self, *, limit: int, employee_id: Optional[int] = None) -> Sequence[WorkLog]:
        where = ""
        params: list[object] = []
        if employee_id is not None:
            where = "WHERE employee_id=%s"
            params.append(int(employee_id))
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_logs
                {where}
                ORDER BY work_date DESC, work_log_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_work_log(r) for r in fetchall(cur)]

    def list_pending_leaves(self) -> Sequence[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_logs
                WHERE leave_approval_status=%s
                ORDER BY work_date ASC, work_log_id ASC
                """,
                (LeaveApprovalStatus.PENDING.value,),
            )
            return [_to_work_log(r) for r in fetchall(cur)]

    def delete_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs")
            return int(cur.rowcount)
