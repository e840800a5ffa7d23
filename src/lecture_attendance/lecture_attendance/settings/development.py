import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Key for the integrity tag of attendance QR codes
TOKEN_SECRET = os.getenv("TOKEN_SECRET", "dev-token-secret")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

QR_SIZE = int(os.getenv("QR_SIZE", "300"))
QR_MARGIN = int(os.getenv("QR_MARGIN", "2"))
QR_DARK_COLOR = os.getenv("QR_DARK_COLOR", "#000000")
QR_LIGHT_COLOR = os.getenv("QR_LIGHT_COLOR", "#FFFFFF")

# Load the demo courses/lecturers on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
