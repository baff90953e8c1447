"""
Production settings for the Product Delete service
"""

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

# Security settings
SECURE_BROWSER_XSS_FILTER = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"
SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# CSRF settings
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
CSRF_TRUSTED_ORIGINS = [
    origin
    for origin in config("CSRF_TRUSTED_ORIGINS", default="").split(",")
    if origin
]

# Database: use base defaults (POSTGRES_*), allow optional DB_* overrides if provided
DATABASES["default"]["NAME"] = config("DB_NAME", default=DATABASES["default"]["NAME"])
DATABASES["default"]["USER"] = config("DB_USER", default=DATABASES["default"]["USER"])
DATABASES["default"]["PASSWORD"] = config(
    "DB_PASSWORD", default=DATABASES["default"]["PASSWORD"]
)
DATABASES["default"]["HOST"] = config("DB_HOST", default=DATABASES["default"]["HOST"])
DATABASES["default"]["PORT"] = config("DB_PORT", default=DATABASES["default"]["PORT"])

# Server Settings
PORT = config("PORT", default=8000, cast=int)
HOST = config("HOST", default="0.0.0.0")

# Structured logs are shipped as JSON in production
LOG_FORMAT = config("LOG_FORMAT", default="json")

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "{message}",
            "style": "{",
        },
    },
    "handlers": {
        "file": {
            "level": "INFO",
            "class": "logging.FileHandler",
            "filename": config(
                "LOG_FILE", default="/var/log/product-delete/django.log"
            ),
            "formatter": "plain",
        },
        "console": {
            "level": "INFO",
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "root": {
        "handlers": ["file", "console"],
        "level": "INFO",
    },
}
