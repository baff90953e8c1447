"""
Test settings for the Product Delete service
"""

import tempfile

from .base import *

DEBUG = False

SECRET_KEY = "django-insecure-test-key"

ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Tests own every table, including the CMS ones
DATABASE_ROUTERS = []

MEDIA_ROOT = tempfile.mkdtemp(prefix="product-delete-media-")

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

CMS_TABLE_PREFIX = "wp_"

PRODUCT_DELETE_DEFAULT_LIMIT = 10
PRODUCT_DELETE_MAX_LIMIT = 10000
PRODUCT_DELETE_API_TOKEN = ""

LOG_FORMAT = "console"
