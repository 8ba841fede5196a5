"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

from src.qr_attendance.qr_attendance.container import build_container


def main():
    container = build_container(storage_backend="memory")

    instructor = container.instructor_service.login_or_register(
        username="dr.salem", password="s3cret", name="Dr. Salem", email="salem@example.edu"
    )
    session = container.session_service.create_session(
        instructor_id=instructor.id, course_name="CS101", lecture_title="Intro", duration=15
    )
    container.student_service.register(student_id="2024001", name="Mona Ali", department="CS", year="1")
    container.attendance_service.mark_attendance(session_id=session.id, student_id="2024001", token=session.qr_code)

    for row in container.report_service.instructor_report(instructor.id):
        print(row.to_dict())


if __name__ == "__main__":
    main()
