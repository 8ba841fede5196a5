from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import LectureSession
from .repository import SessionRepository

_COLUMNS = "id, instructor_id, course_name, lecture_title, duration, qr_code, created_at, expires_at, active"


def _row_to_session(r: dict) -> LectureSession:
    return LectureSession(
        id=r["id"],
        instructor_id=r["instructor_id"],
        course_name=r.get("course_name"),
        lecture_title=r.get("lecture_title"),
        duration=int(r["duration"]),
        qr_code=r["qr_code"],
        created_at=from_db_datetime(r["created_at"]),
        expires_at=from_db_datetime(r["expires_at"]),
        active=bool(r.get("active", True)),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_token(self, qr_code: str) -> Optional[LectureSession]:
        with db_cursor(self._conn_factory, collection="sessions") as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM sessions WHERE qr_code=%s", (qr_code,))
            row = fetchone(cur)
            return _row_to_session(row) if row else None

    def get_by_id_and_token(self, session_id: str, qr_code: str) -> Optional[LectureSession]:
        with db_cursor(self._conn_factory, collection="sessions") as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM sessions WHERE id=%s AND qr_code=%s",
                (session_id, qr_code),
            )
            row = fetchone(cur)
            return _row_to_session(row) if row else None

    def create(self, session: LectureSession) -> LectureSession:
        with db_cursor(self._conn_factory, collection="sessions") as (_, cur):
            cur.execute(
                f"""
                INSERT INTO sessions({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    session.id,
                    session.instructor_id,
                    session.course_name,
                    session.lecture_title,
                    int(session.duration),
                    session.qr_code,
                    to_db_datetime(session.created_at),
                    to_db_datetime(session.expires_at),
                    1 if session.active else 0,
                ),
            )
        return session

    def list_by_instructor(self, instructor_id: str) -> Sequence[LectureSession]:
        with db_cursor(self._conn_factory, collection="sessions") as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM sessions
                WHERE instructor_id=%s
                ORDER BY created_at ASC
                """,
                (instructor_id,),
            )
            return [_row_to_session(r) for r in fetchall(cur)]
