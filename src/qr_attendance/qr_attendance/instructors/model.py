from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Instructor:
    """Domain entity: an instructor account.

    Note: plain data object (no DB access). `password_hash` never leaves the service layer.
    """

    id: str
    username: str
    password_hash: str
    name: Optional[str]
    email: Optional[str]
    created_at: datetime

    def profile(self) -> "InstructorProfile":
        return InstructorProfile(id=self.id, name=self.name, username=self.username)


@dataclass(frozen=True)
class InstructorProfile:
    """Public fields returned after login."""

    id: str
    name: Optional[str]
    username: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "username": self.username}
