from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .settings import get_settings_module
from .logging_config import configure_logging

from .container import build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .sessions.controller import register as register_sessions

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting lecture-attendance with settings=%s", settings_module)

    container = build_container(settings)
    app.extensions["lecture_attendance"] = container

    register_auth(app, container)
    register_sessions(app, container)
    register_attendance(app, container)

    return app
