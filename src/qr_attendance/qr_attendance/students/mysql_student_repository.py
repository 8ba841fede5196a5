from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Student
from .repository import StudentRepository

_COLUMNS = "id, student_id, name, email, phone, department, year, registered_at"


def _row_to_student(r: dict) -> Student:
    return Student(
        id=r["id"],
        student_id=r["student_id"],
        name=r.get("name"),
        email=r.get("email"),
        phone=r.get("phone"),
        department=r.get("department"),
        year=r.get("year"),
        registered_at=from_db_datetime(r["registered_at"]),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory, collection="students") as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (student_id,))
            row = fetchone(cur)
            return _row_to_student(row) if row else None

    def create(self, student: Student) -> Student:
        with db_cursor(self._conn_factory, collection="students") as (_, cur):
            cur.execute(
                f"""
                INSERT INTO students({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    student.id,
                    student.student_id,
                    student.name,
                    student.email,
                    student.phone,
                    student.department,
                    student.year,
                    to_db_datetime(student.registered_at),
                ),
            )
        return student

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory, collection="students") as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY registered_at ASC")
            return [_row_to_student(r) for r in fetchall(cur)]
