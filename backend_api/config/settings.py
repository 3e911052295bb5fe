"""
Django settings for the jumble backend.

Values come from the environment with development-friendly defaults. There
is no persistent storage: words are read from a bundled text file and games
live in memory for the lifetime of the process.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or "dev-only-insecure-key"
DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "rest_framework",
    "drf_yasg",
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

# No models are persisted; the in-memory database only satisfies contrib apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

STATIC_URL = "static/"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,
    "SECURITY_DEFINITIONS": {},
}

# Jumble game settings
JUMBLE_WORDS_FILE = Path(
    os.environ.get("JUMBLE_WORDS_FILE") or BASE_DIR / "api" / "jumble" / "resources" / "words.txt"
)
JUMBLE_DEFAULT_LENGTH = int(os.environ.get("JUMBLE_DEFAULT_LENGTH", "6"))
JUMBLE_DEFAULT_MIN_LENGTH = int(os.environ.get("JUMBLE_DEFAULT_MIN_LENGTH", "3"))
JUMBLE_SCRAMBLE_RETRIES = int(os.environ.get("JUMBLE_SCRAMBLE_RETRIES", "10"))
# Unset means system entropy; set an integer for reproducible games.
JUMBLE_RANDOM_SEED = int(os.environ["JUMBLE_RANDOM_SEED"]) if os.environ.get("JUMBLE_RANDOM_SEED") else None

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "api": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
