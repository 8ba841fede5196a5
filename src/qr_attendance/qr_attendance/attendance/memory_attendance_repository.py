from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_store import InMemoryCollection
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._rows: InMemoryCollection[AttendanceRecord] = InMemoryCollection(
            "attendance",
            {
                "id": lambda a: a.id,
                "session_student": lambda a: (a.session_id, a.student_id),
            },
        )

    def get_for_session_and_student(self, session_id: str, student_id: str) -> Optional[AttendanceRecord]:
        return self._rows.get("session_student", (session_id, student_id))

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        return self._rows.insert(record)

    def list_for_session(self, session_id: str) -> Sequence[AttendanceRecord]:
        return self._rows.find(lambda a: a.session_id == session_id)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._rows.all()
