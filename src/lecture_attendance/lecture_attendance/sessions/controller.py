from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file, session

from ..auth.decorators import login_required, role_required
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    manager = container.session_manager

    def _owned_session(session_id: str):
        s = manager.get_session(session_id)
        if s.issuer_id != session.get("user_id"):
            raise AuthorizationError("This session belongs to another lecturer")
        return s

    @app.route("/api/sessions", methods=["POST"], endpoint="api_create_session")
    @role_required(Role.LECTURER)
    def api_create_session():
        """Open an attendance window for one scheduled class and return its code."""
        try:
            data = request.get_json(silent=True) or {}
            course_id = str(data.get("course_id", "")).strip()
            schedule_id = str(data.get("schedule_id", "")).strip()
            if not course_id or not schedule_id:
                return jsonify({"success": False, "message": "Please choose a course and a class time"}), 400

            course = container.courses.get_course(course_id)
            if course and course.lecturer_id != session["user_id"]:
                raise AuthorizationError("You do not teach this course")

            s = manager.create_for_schedule(
                course_id=course_id,
                schedule_id=schedule_id,
                issuer_id=session["user_id"],
            )
            body = manager.to_ui(s)
            body["payload"] = manager.payload_for(s.session_id)
            return jsonify({"success": True, "session": body}), 201
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Failed to create attendance session")
            return jsonify({"success": False, "message": "System error while creating the session"}), 500

    @app.route("/api/sessions/<session_id>/stop", methods=["POST"], endpoint="api_stop_session")
    @role_required(Role.LECTURER)
    def api_stop_session(session_id: str):
        try:
            _owned_session(session_id)
            manager.stop_session(session_id)
            return jsonify({"success": True, "session": manager.to_ui(manager.get_session(session_id))}), 200
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/sessions/<session_id>", methods=["GET"], endpoint="api_get_session")
    @login_required
    def api_get_session(session_id: str):
        try:
            return jsonify({"success": True, "session": manager.to_ui(manager.get_session(session_id))}), 200
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/sessions/<session_id>/qr.png", methods=["GET"], endpoint="api_session_qr")
    @role_required(Role.LECTURER)
    def api_session_qr(session_id: str):
        """PNG of the attendance code; ?download=1 sends it as an attachment."""
        try:
            _owned_session(session_id)
            png = container.renderer.render(manager.payload_for(session_id))
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404

        download = request.args.get("download") in {"1", "true", "yes"}
        return send_file(
            io.BytesIO(png),
            mimetype="image/png",
            as_attachment=download,
            download_name=container.renderer.download_filename(session_id),
        )

    @app.route("/api/sessions/<session_id>/marks", methods=["GET"], endpoint="api_session_marks")
    @role_required(Role.LECTURER)
    def api_session_marks(session_id: str):
        try:
            _owned_session(session_id)
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, **container.attendance_service.session_summary(session_id)}), 200

    @app.route("/api/me/sessions", methods=["GET"], endpoint="api_my_sessions")
    @role_required(Role.LECTURER)
    def api_my_sessions():
        items = manager.sessions_for_issuer(session["user_id"])
        return jsonify({"success": True, "sessions": [manager.to_ui(s) for s in items]}), 200
