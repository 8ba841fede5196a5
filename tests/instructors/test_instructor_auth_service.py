from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.qr_attendance.qr_attendance.core.exceptions import (
    DuplicateKeyError,
    InstructorNotFoundError,
    InvalidCredentialError,
    ValidationError,
)
from src.qr_attendance.qr_attendance.instructors.memory_instructor_repository import InMemoryInstructorRepository
from src.qr_attendance.qr_attendance.instructors.model import Instructor, InstructorProfile
from src.qr_attendance.qr_attendance.instructors.service import InstructorAuthService


def test_first_login_creates_instructor(fixed_now):
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    profile = svc.login_or_register(username="salem", password="pw-1", name="Dr. Salem", email="s@x.edu", now=fixed_now)

    assert isinstance(profile, InstructorProfile)
    assert profile.username == "salem"
    assert profile.name == "Dr. Salem"
    assert set(profile.to_dict()) == {"id", "name", "username"}

    stored = repo.get_by_username("salem")
    assert stored.id == profile.id
    assert stored.created_at == fixed_now
    assert stored.password_hash != "pw-1"


def test_second_login_with_same_password_returns_same_instructor():
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    first = svc.login_or_register(username="salem", password="pw-1", name="Dr. Salem")
    second = svc.login_or_register(username="salem", password="pw-1", name="ignored on login")

    assert second == first
    assert len(repo) == 1


def test_wrong_password_raises_and_does_not_mutate_store():
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)
    svc.login_or_register(username="salem", password="pw-1", name="Dr. Salem")
    before = repo.get_by_username("salem")

    with pytest.raises(InvalidCredentialError):
        svc.login_or_register(username="salem", password="pw-2", name="Attacker")

    assert len(repo) == 1
    assert repo.get_by_username("salem") == before


def test_username_and_password_required():
    svc = InstructorAuthService(InMemoryInstructorRepository())
    with pytest.raises(ValidationError):
        svc.login_or_register(username="", password="pw")
    with pytest.raises(ValidationError):
        svc.login_or_register(username="salem", password="")


@pytest.mark.parametrize("password", [12345, ["pw"], True])
def test_non_string_password_is_a_validation_error(password):
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    with pytest.raises(ValidationError):
        svc.login_or_register(username="salem", password=password)
    assert len(repo) == 0


def test_username_is_matched_exactly():
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    plain = svc.login_or_register(username="salem", password="pw-1")
    padded = svc.login_or_register(username="salem ", password="pw-2")

    assert padded.id != plain.id
    assert padded.username == "salem "
    assert len(repo) == 2


def test_overlong_username_is_rejected():
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    with pytest.raises(ValidationError):
        svc.login_or_register(username="u" * 129, password="pw-1")
    assert len(repo) == 0


def test_created_at_drops_sub_millisecond_precision(fixed_now):
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)

    svc.login_or_register(username="salem", password="pw-1", now=fixed_now.replace(microsecond=999999))

    assert repo.get_by_username("salem").created_at == fixed_now.replace(microsecond=999000)


def test_corrupted_hash_is_rejected():
    repo = InMemoryInstructorRepository()
    repo.create(
        Instructor(
            id="i-1",
            username="legacy",
            password_hash="CHANGE_ME",
            name="Legacy",
            email=None,
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )
    )
    svc = InstructorAuthService(repo)

    with pytest.raises(InvalidCredentialError):
        svc.login_or_register(username="legacy", password="CHANGE_ME")


class RacingInstructors:
    """First lookup misses; the insert then loses to a concurrent registration."""

    def __init__(self, winner: Instructor):
        self._winner = winner
        self._lookups = 0

    def get_by_id(self, instructor_id: str) -> Optional[Instructor]:
        return self._winner if instructor_id == self._winner.id else None

    def get_by_username(self, username: str) -> Optional[Instructor]:
        self._lookups += 1
        return None if self._lookups == 1 else self._winner

    def create(self, instructor: Instructor) -> Instructor:
        raise DuplicateKeyError("instructors", "username")


def _winner(password: str) -> Instructor:
    return Instructor(
        id="i-winner",
        username="salem",
        password_hash=generate_password_hash(password),
        name="Winner",
        email=None,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def test_registration_race_authenticates_against_winner():
    svc = InstructorAuthService(RacingInstructors(_winner("pw-1")))
    profile = svc.login_or_register(username="salem", password="pw-1")
    assert profile.id == "i-winner"


def test_registration_race_with_other_password_is_rejected():
    svc = InstructorAuthService(RacingInstructors(_winner("pw-1")))
    with pytest.raises(InvalidCredentialError):
        svc.login_or_register(username="salem", password="pw-2")


def test_get_profile():
    repo = InMemoryInstructorRepository()
    svc = InstructorAuthService(repo)
    created = svc.login_or_register(username="salem", password="pw-1", name="Dr. Salem")

    assert svc.get_profile(created.id) == created
    with pytest.raises(InstructorNotFoundError):
        svc.get_profile("missing")
