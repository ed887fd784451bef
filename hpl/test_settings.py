"""
Test settings - sets DEBUG=False and keeps league logging quiet for tests
"""
from .settings import *

# Disable debug mode for tests
DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Only log errors during tests
LOGGING["loggers"]["hpl"]["level"] = "ERROR"
