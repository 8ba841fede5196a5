from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.qr_attendance.qr_attendance.container import build_container
from src.qr_attendance.qr_attendance.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def container():
    return build_container(storage_backend="memory")


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
