SECRET_KEY = "test-secret"
TOKEN_SECRET = "test-token-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

QR_SIZE = 300
QR_MARGIN = 2
QR_DARK_COLOR = "#000000"
QR_LIGHT_COLOR = "#FFFFFF"

SEED_DEMO_DATA = True
