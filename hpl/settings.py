"""
Django settings for the hpl project.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("HPL_SECRET_KEY", "dev-only-insecure-key")

DEBUG = os.environ.get("HPL_DEBUG", "1") == "1"

ALLOWED_HOSTS = os.environ.get("HPL_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "hpl.standings_core",
    "hpl.league",
]

MIDDLEWARE = []

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("HPL_TIME_ZONE", "Asia/Kolkata")
USE_I18N = True
USE_TZ = True

# League format; see hpl.league.conf. Empty means the standard format:
# six regular matches plus a tiebreak, four regular wins decide a fixture,
# 3 points per battle won, line-ups revealed 55 minutes before start.
HPL_LEAGUE_FORMAT = {}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "hpl": {
            "handlers": ["console"],
            "level": os.environ.get("HPL_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
