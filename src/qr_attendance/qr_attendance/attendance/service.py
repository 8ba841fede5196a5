from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from loguru import logger

from ..common.datetime_utils import now_utc, truncate_to_millis
from ..common.identifiers import new_id
from ..common.validators import require_non_empty
from ..core.exceptions import (
    AlreadyMarkedError,
    DuplicateKeyError,
    SessionExpiredError,
    SessionNotFoundError,
    StudentNotRegisteredError,
)
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        sessions: SessionRepository,
        students: StudentRepository,
    ):
        self._attendance = attendance
        self._sessions = sessions
        self._students = students

    def mark_attendance(
        self,
        *,
        session_id: str,
        student_id: str,
        token: str,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Record that `student_id` attended `session_id`, authorised by the session's join token.

        Checks run in a fixed order: session (id and token must match the same
        session), expiry, student registration, duplicate mark.
        """
        now = now or now_utc()
        session_id = require_non_empty(session_id, "sessionId")
        student_id = require_non_empty(student_id, "studentId")
        token = require_non_empty(token, "qrCode")

        session = self._sessions.get_by_id_and_token(session_id, token)
        if not session:
            raise SessionNotFoundError("Session not found")
        if session.is_expired(now):
            logger.warning("Rejected mark for {} on session {}: expired", student_id, session_id)
            raise SessionExpiredError("Session has expired")

        student = self._students.get_by_student_id(student_id)
        if not student:
            raise StudentNotRegisteredError(f"Student {student_id} is not registered")

        if self._attendance.get_for_session_and_student(session_id, student_id):
            logger.warning("Rejected mark for {} on session {}: already marked", student_id, session_id)
            raise AlreadyMarkedError("Attendance already marked")

        record = AttendanceRecord(
            id=new_id(),
            session_id=session_id,
            student_id=student_id,
            student_name=student.name,
            marked_at=truncate_to_millis(now),
        )
        try:
            self._attendance.create(record)
        except DuplicateKeyError:
            # A concurrent request for the same pair won the insert.
            logger.warning("Rejected mark for {} on session {}: already marked", student_id, session_id)
            raise AlreadyMarkedError("Attendance already marked") from None

        logger.info("Marked {} present in session {}", student_id, session_id)
        return record

    def get_by_session(self, session_id: str) -> Sequence[AttendanceRecord]:
        return list(self._attendance.list_for_session(session_id))
