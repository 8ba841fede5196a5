from __future__ import annotations

from typing import Optional

from ..database.memory_store import InMemoryCollection
from .model import Instructor
from .repository import InstructorRepository


class InMemoryInstructorRepository(InstructorRepository):
    def __init__(self):
        self._rows: InMemoryCollection[Instructor] = InMemoryCollection(
            "instructors",
            {"id": lambda i: i.id, "username": lambda i: i.username},
        )

    def get_by_id(self, instructor_id: str) -> Optional[Instructor]:
        return self._rows.get("id", instructor_id)

    def get_by_username(self, username: str) -> Optional[Instructor]:
        return self._rows.get("username", username)

    def create(self, instructor: Instructor) -> Instructor:
        return self._rows.insert(instructor)

    def __len__(self) -> int:
        return len(self._rows)
