from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/register", methods=["POST"], endpoint="register_student")
    def register_student():
        data = json_body()
        student = container.student_service.register(
            student_id=data.get("studentId"),
            name=data.get("name"),
            email=data.get("email"),
            phone=data.get("phone"),
            department=data.get("department"),
            year=data.get("year"),
        )
        return jsonify({"success": True, "message": "Registered successfully", "student": student.to_dict()})

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        return jsonify(container.student_service.get(student_id).to_dict())
