from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .instructors.memory_instructor_repository import InMemoryInstructorRepository
from .instructors.mysql_instructor_repository import MySQLInstructorRepository
from .instructors.repository import InstructorRepository
from .instructors.service import InstructorAuthService
from .reports.service import ReportService
from .sessions.memory_session_repository import InMemorySessionRepository
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService

STORAGE_MEMORY = "memory"
STORAGE_MYSQL = "mysql"


@dataclass(frozen=True)
class Container:
    storage_backend: str
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository
    instructors_repo: InstructorRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository

    student_service: StudentService
    instructor_service: InstructorAuthService
    session_service: SessionService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, storage_backend: str = STORAGE_MEMORY, db_config: Optional[dict] = None) -> Container:
    """Wire repositories and services for one record-store backend.

    The backend is chosen once here. A MySQL backend that later becomes
    unreachable raises StorageUnavailableError; it never falls back to memory.
    """
    backend = (storage_backend or STORAGE_MEMORY).strip().lower()
    conn: Optional[DatabaseConnection] = None

    if backend == STORAGE_MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required when STORAGE_BACKEND=mysql")
        conn = DatabaseConnection(DBConfig.from_mapping(db_config))
        students_repo = MySQLStudentRepository(conn)
        instructors_repo = MySQLInstructorRepository(conn)
        sessions_repo = MySQLSessionRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
    elif backend == STORAGE_MEMORY:
        logger.warning("STORAGE_BACKEND=memory: records are kept in process and lost on restart")
        students_repo = InMemoryStudentRepository()
        instructors_repo = InMemoryInstructorRepository()
        sessions_repo = InMemorySessionRepository()
        attendance_repo = InMemoryAttendanceRepository()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {storage_backend!r}")

    return Container(
        storage_backend=backend,
        conn=conn,
        students_repo=students_repo,
        instructors_repo=instructors_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        student_service=StudentService(students_repo),
        instructor_service=InstructorAuthService(instructors_repo),
        session_service=SessionService(sessions_repo),
        attendance_service=AttendanceService(attendance_repo, sessions_repo, students_repo),
        report_service=ReportService(sessions_repo, attendance_repo),
    )
