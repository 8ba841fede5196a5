from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LectureSession


class SessionRepository(Protocol):
    def get_by_token(self, qr_code: str) -> Optional[LectureSession]:
        raise NotImplementedError

    def get_by_id_and_token(self, session_id: str, qr_code: str) -> Optional[LectureSession]:
        """Both values must belong to the same session."""

        raise NotImplementedError

    def create(self, session: LectureSession) -> LectureSession:
        """Insert-if-absent; raises DuplicateKeyError when id or qr_code is taken."""

        raise NotImplementedError

    def list_by_instructor(self, instructor_id: str) -> Sequence[LectureSession]:
        raise NotImplementedError
