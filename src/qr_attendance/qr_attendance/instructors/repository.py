from __future__ import annotations

from typing import Optional, Protocol

from .model import Instructor


class InstructorRepository(Protocol):
    def get_by_id(self, instructor_id: str) -> Optional[Instructor]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Instructor]:
        raise NotImplementedError

    def create(self, instructor: Instructor) -> Instructor:
        """Insert-if-absent; raises DuplicateKeyError when username is taken."""

        raise NotImplementedError
