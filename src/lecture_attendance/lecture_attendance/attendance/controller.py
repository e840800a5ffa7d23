from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session
from PIL import UnidentifiedImageError

from ..auth.decorators import role_required
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _attempt(raw: str):
        result = service.attempt_mark(raw, session["user_id"])
        return jsonify(result.to_dict()), (200 if result.success else 400)

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="api_attendance_scan")
    @role_required(Role.STUDENT)
    def api_attendance_scan():
        """Mark attendance from a decoded QR payload sent by the scanner page."""
        try:
            data = request.get_json(silent=True) or {}
            code = str(data.get("code", "")).strip()
            if not code:
                return jsonify({"success": False, "message": "The QR code is empty"}), 400
            return _attempt(code)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to process scanned code")
            return jsonify({"success": False, "message": "System error while marking attendance"}), 500

    @app.route("/api/attendance/scan/image", methods=["POST"], endpoint="api_attendance_scan_image")
    @role_required(Role.STUDENT)
    def api_attendance_scan_image():
        """Accept an uploaded photo, decode its QR code, then mark attendance."""
        from ..scanning.decoder import decode_frame

        try:
            if "image" not in request.files:
                return jsonify({"success": False, "message": "Missing image file"}), 400

            code = decode_frame(request.files["image"].read())
            if not code:
                return jsonify({"success": False, "message": "No QR code detected in the image"}), 400
            return _attempt(code)
        except UnidentifiedImageError:
            return jsonify({"success": False, "message": "The uploaded file is not an image"}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Failed to process uploaded image")
            return jsonify({"success": False, "message": "System error while marking attendance"}), 500

    @app.route("/api/me/attendance", methods=["GET"], endpoint="api_my_attendance")
    @role_required(Role.STUDENT)
    def api_my_attendance():
        rows = service.get_history_ui(session["user_id"])
        return jsonify({"success": True, "records": rows}), 200
