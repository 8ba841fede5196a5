from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance mark for one session.

    `student_name` is copied from the student at mark time and never re-joined.
    """

    id: str
    session_id: str
    student_id: str
    student_name: Optional[str]
    marked_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "markedAt": to_iso(self.marked_at),
        }
