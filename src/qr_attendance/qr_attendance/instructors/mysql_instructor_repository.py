from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, from_db_datetime, to_db_datetime
from .model import Instructor
from .repository import InstructorRepository


class MySQLInstructorRepository(InstructorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, instructor_id: str) -> Optional[Instructor]:
        with db_cursor(self._conn_factory, collection="instructors") as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash, name, email, created_at
                FROM instructors
                WHERE id=%s
                """,
                (instructor_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Instructor(
                id=row["id"],
                username=row["username"],
                password_hash=row["password_hash"],
                name=row.get("name"),
                email=row.get("email"),
                created_at=from_db_datetime(row["created_at"]),
            )

    def get_by_username(self, username: str) -> Optional[Instructor]:
        with db_cursor(self._conn_factory, collection="instructors") as (_, cur):
            cur.execute(
                """
                SELECT id, username, password_hash, name, email, created_at
                FROM instructors
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Instructor(
                id=row["id"],
                username=row["username"],
                password_hash=row["password_hash"],
                name=row.get("name"),
                email=row.get("email"),
                created_at=from_db_datetime(row["created_at"]),
            )

    def create(self, instructor: Instructor) -> Instructor:
        with db_cursor(self._conn_factory, collection="instructors") as (_, cur):
            cur.execute(
                """
                INSERT INTO instructors(id, username, password_hash, name, email, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    instructor.id,
                    instructor.username,
                    instructor.password_hash,
                    instructor.name,
                    instructor.email,
                    to_db_datetime(instructor.created_at),
                ),
            )
        return instructor
