from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/instructors/login", methods=["POST"], endpoint="instructor_login")
    def instructor_login():
        data = json_body()
        profile = container.instructor_service.login_or_register(
            username=data.get("username"),
            password=data.get("password"),
            name=data.get("name"),
            email=data.get("email"),
        )
        return jsonify({"success": True, "message": "Logged in successfully", "instructor": profile.to_dict()})

    @app.route("/api/instructors/<instructor_id>", methods=["GET"], endpoint="get_instructor")
    def get_instructor(instructor_id: str):
        return jsonify(container.instructor_service.get_profile(instructor_id).to_dict())
