from __future__ import annotations

import pytest

from src.qr_attendance.qr_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.qr_attendance.qr_attendance.container import build_container
from src.qr_attendance.qr_attendance.students.memory_student_repository import InMemoryStudentRepository


def test_memory_backend():
    container = build_container(storage_backend="memory")
    assert container.storage_backend == "memory"
    assert container.conn is None
    assert isinstance(container.students_repo, InMemoryStudentRepository)


def test_mysql_backend_wires_mysql_repositories_without_connecting():
    container = build_container(
        storage_backend="MySQL",
        db_config={"host": "db", "port": 3306, "user": "u", "password": "p", "database": "qr"},
    )
    assert container.storage_backend == "mysql"
    assert container.conn.config.host == "db"
    assert isinstance(container.attendance_repo, MySQLAttendanceRepository)


def test_mysql_backend_requires_db_config():
    with pytest.raises(ValueError):
        build_container(storage_backend="mysql", db_config=None)


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        build_container(storage_backend="mongo")


def test_settings_module_selection(monkeypatch):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"
