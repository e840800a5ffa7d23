import os


def get_settings_module() -> str:
    # Environment is taken from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "lecture_attendance.settings.production"

    if env in {"test", "testing"}:
        return "lecture_attendance.settings.testing"

    return "lecture_attendance.settings.development"
