from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_store import InMemoryCollection
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self):
        self._rows: InMemoryCollection[Student] = InMemoryCollection(
            "students",
            {"id": lambda s: s.id, "student_id": lambda s: s.student_id},
        )

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        return self._rows.get("student_id", student_id)

    def create(self, student: Student) -> Student:
        return self._rows.insert(student)

    def list_all(self) -> Sequence[Student]:
        return self._rows.all()
