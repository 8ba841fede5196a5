from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sessions/create", methods=["POST"], endpoint="create_session")
    def create_session():
        data = json_body()
        session = container.session_service.create_session(
            instructor_id=data.get("instructorId"),
            course_name=data.get("courseName"),
            lecture_title=data.get("lectureTitle"),
            duration=data.get("duration"),
        )
        return jsonify({"success": True, "message": "Session created", "session": session.to_dict()})

    @app.route("/api/sessions/qr/<token>", methods=["GET"], endpoint="session_by_token")
    def session_by_token(token: str):
        return jsonify(container.session_service.get_by_token(token).to_dict())

    @app.route("/api/sessions/instructor/<instructor_id>", methods=["GET"], endpoint="instructor_sessions")
    def instructor_sessions(instructor_id: str):
        sessions = container.session_service.list_by_instructor(instructor_id)
        return jsonify([s.to_dict() for s in sessions])
