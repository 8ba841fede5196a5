from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional, Sequence

from loguru import logger

from ..common.datetime_utils import now_utc, truncate_to_millis
from ..common.identifiers import new_id
from ..common.validators import check_max_length, optional_int, optional_text
from ..core.constants import (
    DEFAULT_SESSION_DURATION_MINUTES,
    MAX_ID_LENGTH,
    MAX_INT_COLUMN,
    MAX_TEXT_LENGTH,
    MIN_INT_COLUMN,
)
from ..core.exceptions import SessionExpiredError, SessionNotFoundError, ValidationError
from .model import LectureSession
from .repository import SessionRepository


class SessionService:
    """Use case: instructors open timed lecture sessions; clients resolve them by join token."""

    def __init__(self, sessions: SessionRepository):
        self._sessions = sessions

    def create_session(
        self,
        *,
        instructor_id: str,
        course_name: Optional[str] = None,
        lecture_title: Optional[str] = None,
        duration: Any = None,
        now: Optional[datetime] = None,
    ) -> LectureSession:
        # instructor_id is a back-reference only; it is not checked against the instructor store.
        instructor_id = str(instructor_id) if instructor_id is not None else ""
        check_max_length(instructor_id, "instructorId", MAX_ID_LENGTH)
        minutes = optional_int(duration, "duration") or DEFAULT_SESSION_DURATION_MINUTES
        if not MIN_INT_COLUMN <= minutes <= MAX_INT_COLUMN:
            raise ValidationError("duration is out of range")
        created_at = truncate_to_millis(now or now_utc())
        try:
            expires_at = created_at + timedelta(minutes=minutes)
        except OverflowError:
            raise ValidationError("duration is out of range") from None

        session = LectureSession(
            id=new_id(),
            instructor_id=instructor_id,
            course_name=optional_text(course_name, "courseName", max_length=MAX_TEXT_LENGTH),
            lecture_title=optional_text(lecture_title, "lectureTitle", max_length=MAX_TEXT_LENGTH),
            duration=minutes,
            qr_code=new_id(),
            created_at=created_at,
            expires_at=expires_at,
            active=True,
        )
        self._sessions.create(session)

        logger.info(
            "Created session {} for instructor {} ({} min, expires {})",
            session.id,
            session.instructor_id,
            minutes,
            session.expires_at.isoformat(),
        )
        return session

    def get_by_token(self, token: str, *, now: Optional[datetime] = None) -> LectureSession:
        session = self._sessions.get_by_token(token)
        if not session:
            raise SessionNotFoundError("Session not found")
        if session.is_expired(now or now_utc()):
            raise SessionExpiredError("Session has expired")
        return session

    def list_by_instructor(self, instructor_id: str) -> Sequence[LectureSession]:
        return list(self._sessions.list_by_instructor(instructor_id))
