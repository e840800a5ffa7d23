"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_VERSION = "ATT1"
TOKEN_SEPARATOR = "|"
TOKEN_TAG_LENGTH = 32

DEFAULT_QR_SIZE = 300
DEFAULT_QR_MARGIN = 2
DEFAULT_QR_DARK = "#000000"
DEFAULT_QR_LIGHT = "#FFFFFF"

CLOSING_SOON_SECONDS = 300
DEFAULT_HISTORY_LIMIT = 50
