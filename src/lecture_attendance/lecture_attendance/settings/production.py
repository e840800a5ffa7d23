import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TOKEN_SECRET = os.getenv("TOKEN_SECRET", "")
REQUIRE_TOKEN_SECRET = True

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

QR_SIZE = int(os.getenv("QR_SIZE", "300"))
QR_MARGIN = int(os.getenv("QR_MARGIN", "2"))
QR_DARK_COLOR = os.getenv("QR_DARK_COLOR", "#000000")
QR_LIGHT_COLOR = os.getenv("QR_LIGHT_COLOR", "#FFFFFF")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
