from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from loguru import logger

from ..common.datetime_utils import now_utc, truncate_to_millis
from ..common.identifiers import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import MAX_ID_LENGTH, MAX_PHONE_LENGTH, MAX_TEXT_LENGTH, MAX_YEAR_LENGTH
from ..core.exceptions import AlreadyRegisteredError, DuplicateKeyError, StudentNotRegisteredError
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: student self-registration and lookup."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def register(
        self,
        *,
        student_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        department: Optional[str] = None,
        year: Any = None,
        now: Optional[datetime] = None,
    ) -> Student:
        student_id = require_non_empty(student_id, "studentId", max_length=MAX_ID_LENGTH)

        if self._students.get_by_student_id(student_id):
            raise AlreadyRegisteredError(f"Student {student_id} is already registered")

        student = Student(
            id=new_id(),
            student_id=student_id,
            name=optional_text(name, "name", max_length=MAX_TEXT_LENGTH),
            email=optional_text(email, "email", max_length=MAX_TEXT_LENGTH),
            phone=optional_text(phone, "phone", max_length=MAX_PHONE_LENGTH),
            department=optional_text(department, "department", max_length=MAX_TEXT_LENGTH),
            year=optional_text(year, "year", max_length=MAX_YEAR_LENGTH),
            registered_at=truncate_to_millis(now or now_utc()),
        )
        try:
            self._students.create(student)
        except DuplicateKeyError:
            # Lost a race with a concurrent registration of the same id.
            raise AlreadyRegisteredError(f"Student {student_id} is already registered") from None

        logger.info("Registered student {} ({})", student.student_id, student.name)
        return student

    def get(self, student_id: str) -> Student:
        student = self._students.get_by_student_id(student_id)
        if not student:
            raise StudentNotRegisteredError(f"Student {student_id} is not registered")
        return student
