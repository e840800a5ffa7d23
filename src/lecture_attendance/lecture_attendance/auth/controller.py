from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/role", methods=["POST"], endpoint="auth_role")
    def auth_role():
        """Mock sign-in: store the chosen role and user id without verification."""

        data = request.get_json(silent=True) or {}
        user_id = str(data.get("user_id", "")).strip()
        role_s = str(data.get("role", "")).strip().lower()

        if not user_id:
            return jsonify({"success": False, "message": "User id is required"}), 400
        try:
            role = Role(role_s)
        except ValueError:
            return jsonify({"success": False, "message": "Unknown role"}), 400

        session.clear()
        session["user_id"] = user_id
        session["role"] = role.value

        body = {"success": True, "user_id": user_id, "role": role.value}
        if role == Role.LECTURER:
            body["courses"] = [
                {
                    "course_id": c.course_id,
                    "code": c.code,
                    "name": c.name,
                    "schedules": [
                        {
                            "schedule_id": s.schedule_id,
                            "day": s.day,
                            "time": s.time,
                            "location": s.location,
                            "duration": s.duration_minutes,
                        }
                        for s in c.schedules
                    ],
                }
                for c in container.courses.courses_for_lecturer(user_id)
            ]
        return jsonify(body), 200

    @app.route("/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return jsonify({"success": True}), 200
