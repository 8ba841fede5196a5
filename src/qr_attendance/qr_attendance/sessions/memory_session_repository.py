from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_store import InMemoryCollection
from .model import LectureSession
from .repository import SessionRepository


class InMemorySessionRepository(SessionRepository):
    def __init__(self):
        self._rows: InMemoryCollection[LectureSession] = InMemoryCollection(
            "sessions",
            {"id": lambda s: s.id, "qr_code": lambda s: s.qr_code},
        )

    def get_by_token(self, qr_code: str) -> Optional[LectureSession]:
        return self._rows.get("qr_code", qr_code)

    def get_by_id_and_token(self, session_id: str, qr_code: str) -> Optional[LectureSession]:
        session = self._rows.get("id", session_id)
        if session and session.qr_code == qr_code:
            return session
        return None

    def create(self, session: LectureSession) -> LectureSession:
        return self._rows.insert(session)

    def list_by_instructor(self, instructor_id: str) -> Sequence[LectureSession]:
        return self._rows.find(lambda s: s.instructor_id == instructor_id)
