from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import ensure_utc, to_iso


@dataclass(frozen=True)
class LectureSession:
    """Domain entity: a timed lecture session students can join by QR code.

    `qr_code` is the one-time join token embedded in the QR image. Expiry is
    evaluated lazily by `is_expired`; `active` is never flipped by the system.
    """

    id: str
    instructor_id: str
    course_name: Optional[str]
    lecture_title: Optional[str]
    duration: int
    qr_code: str
    created_at: datetime
    expires_at: datetime
    active: bool = True

    def is_expired(self, now: datetime) -> bool:
        # Still valid at the exact expiry instant.
        return ensure_utc(now) > ensure_utc(self.expires_at)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "instructorId": self.instructor_id,
            "courseName": self.course_name,
            "lectureTitle": self.lecture_title,
            "duration": self.duration,
            "qrCode": self.qr_code,
            "createdAt": to_iso(self.created_at),
            "expiresAt": to_iso(self.expires_at),
            "active": self.active,
        }
