from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    """Attendance table with UNIQUE (session_id, student_id).

    The unique index is what makes `create` an atomic insert-if-absent.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_session_and_student(self, session_id: str, student_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory, collection="attendance") as (_, cur):
            cur.execute(
                """
                SELECT id, session_id, student_id, student_name, marked_at
                FROM attendance
                WHERE session_id=%s AND student_id=%s
                """,
                (session_id, student_id),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                id=r["id"],
                session_id=r["session_id"],
                student_id=r["student_id"],
                student_name=r.get("student_name"),
                marked_at=from_db_datetime(r["marked_at"]),
            )

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory, collection="attendance") as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, session_id, student_id, student_name, marked_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    record.id,
                    record.session_id,
                    record.student_id,
                    record.student_name,
                    to_db_datetime(record.marked_at),
                ),
            )
        return record

    def list_for_session(self, session_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, collection="attendance") as (_, cur):
            cur.execute(
                """
                SELECT id, session_id, student_id, student_name, marked_at
                FROM attendance
                WHERE session_id=%s
                ORDER BY marked_at ASC
                """,
                (session_id,),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    id=r["id"],
                    session_id=r["session_id"],
                    student_id=r["student_id"],
                    student_name=r.get("student_name"),
                    marked_at=from_db_datetime(r["marked_at"]),
                )
                for r in rows
            ]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, collection="attendance") as (_, cur):
            cur.execute(
                """
                SELECT id, session_id, student_id, student_name, marked_at
                FROM attendance
                ORDER BY marked_at ASC
                """
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    id=r["id"],
                    session_id=r["session_id"],
                    student_id=r["student_id"],
                    student_name=r.get("student_name"),
                    marked_at=from_db_datetime(r["marked_at"]),
                )
                for r in rows
            ]
