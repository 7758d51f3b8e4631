"""
Development settings for the medical camp management backend.

Extends the base settings by enabling debugging, allowing all hosts and
turning up application logging.  Do not use these settings in production.
"""
from .base import *  # noqa

# Development toggles
DEBUG = True
ALLOWED_HOSTS = ["*", "127.0.0.1", "localhost"]
CSRF_TRUSTED_ORIGINS = ["http://127.0.0.1:8000", "http://localhost:8000"]
CORS_ALLOW_ALL_ORIGINS = True

for _name in ("common", "users", "camps", "registrations", "payments"):
    LOGGING["loggers"][_name]["level"] = "DEBUG"  # noqa: F405
