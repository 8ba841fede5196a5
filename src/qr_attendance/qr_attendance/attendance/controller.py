from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Student client posts the scanned QR payload together with its own student id."""
        data = json_body()
        record = container.attendance_service.mark_attendance(
            session_id=data.get("sessionId"),
            student_id=data.get("studentId"),
            token=data.get("qrCode"),
        )
        return jsonify({"success": True, "message": "Attendance marked", "attendance": record.to_dict()})

    @app.route("/api/attendance/session/<session_id>", methods=["GET"], endpoint="session_attendance")
    def session_attendance(session_id: str):
        records = container.attendance_service.get_by_session(session_id)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/instructor/<instructor_id>", methods=["GET"], endpoint="instructor_report")
    def instructor_report(instructor_id: str):
        report = container.report_service.instructor_report(instructor_id)
        return jsonify([r.to_dict() for r in report])
