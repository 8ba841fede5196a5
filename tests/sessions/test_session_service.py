from __future__ import annotations

from datetime import timedelta

import pytest

from src.qr_attendance.qr_attendance.core.exceptions import SessionExpiredError, SessionNotFoundError, ValidationError
from src.qr_attendance.qr_attendance.sessions.memory_session_repository import InMemorySessionRepository
from src.qr_attendance.qr_attendance.sessions.service import SessionService


@pytest.fixture
def svc():
    return SessionService(InMemorySessionRepository())


def test_create_session_defaults_to_sixty_minutes(svc, fixed_now):
    session = svc.create_session(instructor_id="i-1", course_name="CS101", lecture_title="Intro", now=fixed_now)

    assert session.duration == 60
    assert session.created_at == fixed_now
    assert session.expires_at == fixed_now + timedelta(minutes=60)
    assert session.active is True
    assert session.qr_code and session.qr_code != session.id


@pytest.mark.parametrize("duration", [None, 0, ""])
def test_falsy_duration_falls_back_to_default(svc, fixed_now, duration):
    session = svc.create_session(instructor_id="i-1", duration=duration, now=fixed_now)
    assert session.duration == 60


def test_duration_from_string(svc, fixed_now):
    session = svc.create_session(instructor_id="i-1", duration="15", now=fixed_now)
    assert session.expires_at == fixed_now + timedelta(minutes=15)


@pytest.mark.parametrize("duration", [1500, "2000", -5])
def test_any_whole_number_duration_is_accepted(svc, fixed_now, duration):
    session = svc.create_session(instructor_id="i-1", duration=duration, now=fixed_now)

    assert session.duration == int(duration)
    assert session.expires_at == fixed_now + timedelta(minutes=int(duration))


@pytest.mark.parametrize("duration", ["abc", 1.5, True, 10 ** 12])
def test_invalid_duration_rejected(svc, fixed_now, duration):
    with pytest.raises(ValidationError):
        svc.create_session(instructor_id="i-1", duration=duration, now=fixed_now)


def test_join_tokens_are_unique(svc, fixed_now):
    tokens = {svc.create_session(instructor_id="i-1", now=fixed_now).qr_code for _ in range(50)}
    assert len(tokens) == 50


def test_instructor_id_is_not_validated(svc, fixed_now):
    session = svc.create_session(instructor_id="nobody", now=fixed_now)
    assert session.instructor_id == "nobody"


def test_get_by_token_valid_until_exact_expiry(svc, fixed_now):
    session = svc.create_session(instructor_id="i-1", duration=10, now=fixed_now)

    assert svc.get_by_token(session.qr_code, now=fixed_now) == session
    assert svc.get_by_token(session.qr_code, now=session.expires_at) == session

    with pytest.raises(SessionExpiredError):
        svc.get_by_token(session.qr_code, now=session.expires_at + timedelta(microseconds=1))


def test_get_by_unknown_token_raises(svc, fixed_now):
    svc.create_session(instructor_id="i-1", now=fixed_now)
    with pytest.raises(SessionNotFoundError):
        svc.get_by_token("not-a-token", now=fixed_now)


def test_expiry_is_lazy(svc, fixed_now):
    session = svc.create_session(instructor_id="i-1", duration=1, now=fixed_now)

    with pytest.raises(SessionExpiredError):
        svc.get_by_token(session.qr_code, now=fixed_now + timedelta(hours=2))

    listed = svc.list_by_instructor("i-1")
    assert listed == [session]
    assert listed[0].active is True


def test_list_by_instructor_filters_and_keeps_insertion_order(svc, fixed_now):
    a = svc.create_session(instructor_id="i-1", lecture_title="A", now=fixed_now)
    svc.create_session(instructor_id="i-2", lecture_title="other", now=fixed_now)
    b = svc.create_session(instructor_id="i-1", lecture_title="B", now=fixed_now)

    assert [s.id for s in svc.list_by_instructor("i-1")] == [a.id, b.id]
    assert svc.list_by_instructor("i-3") == []


def test_created_at_is_stored_at_millisecond_precision(svc, fixed_now):
    now = fixed_now.replace(microsecond=123456)
    session = svc.create_session(instructor_id="i-1", duration=10, now=now)

    assert session.created_at == fixed_now.replace(microsecond=123000)
    assert session.expires_at == session.created_at + timedelta(minutes=10)


def test_overlong_fields_are_rejected(svc, fixed_now):
    with pytest.raises(ValidationError):
        svc.create_session(instructor_id="i" * 65, now=fixed_now)
    with pytest.raises(ValidationError):
        svc.create_session(instructor_id="i-1", course_name="c" * 256, now=fixed_now)

    assert svc.list_by_instructor("i-1") == []
