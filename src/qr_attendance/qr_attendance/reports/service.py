from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..sessions.model import LectureSession
from ..sessions.repository import SessionRepository


@dataclass(frozen=True)
class SessionReport:
    session: LectureSession
    attendees: List[AttendanceRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = self.session.to_dict()
        data["attendees"] = [a.to_dict() for a in self.attendees]
        return data


class ReportService:
    """Read-model: an instructor's sessions, each with its attendance records."""

    def __init__(self, sessions: SessionRepository, attendance: AttendanceRepository):
        self._sessions = sessions
        self._attendance = attendance

    def instructor_report(self, instructor_id: str) -> List[SessionReport]:
        sessions = self._sessions.list_by_instructor(instructor_id)
        all_attendance = self._attendance.list_all()

        # Fine at classroom scale (sessions x attendance).
        return [
            SessionReport(
                session=s,
                attendees=[a for a in all_attendance if a.session_id == s.id],
            )
            for s in sessions
        ]
