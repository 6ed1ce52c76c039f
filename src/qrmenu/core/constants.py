"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Slug generation
MAX_SLUG_LENGTH = 63
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_ICON_LENGTH = 32
MAX_URL_LENGTH = 1024
MAX_DESCRIPTION_LENGTH = 2000
MAX_SETTING_LENGTH = 32

# Password requirements
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Catalog defaults
DEFAULT_CATEGORY_ICON = "📋"
DEFAULT_CURRENCY = "$"
DEFAULT_THEME = "dark"
DEFAULT_OWNER_NAME = "Shop Owner"
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32

# Uploads
IMAGE_CONTENT_TYPE_PREFIX = "image/"
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
