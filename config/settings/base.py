"""
Base settings for the Product Delete service
"""

from pathlib import Path
from decouple import Config, RepositoryEnv, config as env_config

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Development settings come from .env.dev when present.
# Environment variables still win over the file.
ENVIRONMENT = env_config("ENVIRONMENT", default="development")
ENV_FILE = env_config("ENV_FILE", default=str(BASE_DIR / ".env.dev"))
if ENVIRONMENT not in ("production", "test") and Path(ENV_FILE).exists():
    config = Config(RepositoryEnv(ENV_FILE))
else:
    config = env_config

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config("SECRET_KEY", default="django-insecure-change-me-in-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config("DEBUG", default=True, cast=bool)

ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1").split(",")

# Application definition
DJANGO_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
]

THIRD_PARTY_APPS = [
    "crispy_forms",
    "crispy_bootstrap5",
]

LOCAL_APPS = [
    "apps.core.apps.CoreConfig",
    "apps.catalog.apps.CatalogConfig",
    "apps.product_delete.apps.ProductDeleteConfig",
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# Database
# The CMS database. Product and attachment tables already exist there.
DATABASES = {
    "default": {
        "ENGINE": config("DB_ENGINE", default="django.db.backends.postgresql"),
        "NAME": config("POSTGRES_DB", default="cms"),
        "USER": config("POSTGRES_USER", default="postgres"),
        "PASSWORD": config("POSTGRES_PASSWORD", default="postgres"),
        "HOST": config("DB_HOST", default="localhost"),
        "PORT": config("DB_PORT", default="5432"),
    }
}

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Authentication
LOGIN_URL = "admin:login"
LOGIN_REDIRECT_URL = "/"
LOGOUT_REDIRECT_URL = "admin:login"

# Static files (CSS, JavaScript, Images)
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# Media files
# Points at the CMS uploads directory; attachment paths are relative to it.
MEDIA_URL = "/media/"
MEDIA_ROOT = config("MEDIA_ROOT", default=str(BASE_DIR / "media"))

# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Crispy Forms
CRISPY_ALLOWED_TEMPLATE_PACKS = "bootstrap5"
CRISPY_TEMPLATE_PACK = "bootstrap5"

# Admin Settings
ADMIN_SITE_HEADER = "Product Delete Admin"
ADMIN_SITE_TITLE = "Product Delete Admin Portal"
ADMIN_INDEX_TITLE = "Product Delete Administration"

# Server Settings
PORT = config("PORT", default=8000, cast=int)
HOST = config("HOST", default="0.0.0.0")

# Structured logging
LOG_FORMAT = config("LOG_FORMAT", default="console")
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

# CMS integration
CMS_TABLE_PREFIX = config("CMS_TABLE_PREFIX", default="wp_")

# Product deletion
PRODUCT_DELETE_DEFAULT_LIMIT = config(
    "PRODUCT_DELETE_DEFAULT_LIMIT", default=10, cast=int
)
# Largest limit a request or the settings form may ask for
PRODUCT_DELETE_MAX_LIMIT = config("PRODUCT_DELETE_MAX_LIMIT", default=10000, cast=int)
# Empty token leaves the delete endpoint open
PRODUCT_DELETE_API_TOKEN = config("PRODUCT_DELETE_API_TOKEN", default="")


# Database Migration Settings
# IMPORTANT: the CMS owns its content tables. Tables for this project's own
# apps are created with `migrate --run-syncdb`.
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()


# CRITICAL: Prevent Django from creating the CMS content tables
class NoCreateTablesRouter:
    def allow_migrate(self, db, app_label, model_name=None, **hints):
        # Block the externally owned CMS tables
        if app_label in ["catalog"]:
            return False
        # Allow Django system tables and the settings record
        return True


DATABASE_ROUTERS = [NoCreateTablesRouter()]
