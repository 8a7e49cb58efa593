"""Django settings for the TicketSwift project.

Environment-specific values come from ``ticketswift.config.app_settings``.
"""

from pathlib import Path

from ticketswift.config import app_settings
from ticketswift.logging_config import build_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = app_settings.secret_key
DEBUG = app_settings.debug
ALLOWED_HOSTS = app_settings.allowed_host_list

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "accounts",
    "events",
    "bookings",
    "audit",
    "verification",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "ticketswift.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "ticketswift.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": app_settings.db_engine,
        "NAME": (
            BASE_DIR / app_settings.db_name
            if app_settings.db_engine.endswith("sqlite3")
            else app_settings.db_name
        ),
        "USER": app_settings.db_user,
        "PASSWORD": app_settings.db_password,
        "HOST": app_settings.db_host,
        "PORT": app_settings.db_port,
    }
}

if app_settings.redis_url:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.redis.RedisCache",
            "LOCATION": app_settings.redis_url,
            "TIMEOUT": app_settings.cache_ttl_seconds,
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "TIMEOUT": app_settings.cache_ttl_seconds,
        }
    }

AUTH_USER_MODEL = "accounts.User"

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator", "OPTIONS": {"min_length": 6}},
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
MEDIA_URL = "media/"
MEDIA_ROOT = BASE_DIR / "media"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "EXCEPTION_HANDLER": "common.exceptions.domain_exception_handler",
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.LimitOffsetPagination",
    "PAGE_SIZE": 50,
}

EMAIL_BACKEND = app_settings.email_backend
DEFAULT_FROM_EMAIL = app_settings.default_from_email

LOGGING = build_logging_config(app_settings.log_level, app_settings.log_json)

# Booking rules
TICKETSWIFT_MAX_TICKETS_PER_EVENT = app_settings.max_tickets_per_event
TICKETSWIFT_ID_UPLOAD_MAX_BYTES = app_settings.id_upload_max_bytes
TICKETSWIFT_CACHE_TTL = app_settings.cache_ttl_seconds

# Hosted AI screening
TICKETSWIFT_AI = {
    "BASE_URL": app_settings.ai_base_url,
    "API_KEY": app_settings.ai_api_key,
    "MODEL": app_settings.ai_model,
    "TIMEOUT": app_settings.ai_timeout_seconds,
}
