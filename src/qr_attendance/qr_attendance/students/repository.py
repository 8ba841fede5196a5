from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service layer depends on this interface, not on a concrete backend.
    """

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, student: Student) -> Student:
        """Insert-if-absent; raises DuplicateKeyError when student_id is taken."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError
