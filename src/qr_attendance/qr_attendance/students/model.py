from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student.

    `id` is the generated record id; `student_id` is the externally assigned
    (university) identifier and is unique across the store.
    """

    id: str
    student_id: str
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    department: Optional[str]
    year: Optional[str]
    registered_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "department": self.department,
            "year": self.year,
            "registeredAt": to_iso(self.registered_at),
        }
