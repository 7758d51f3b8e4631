"""
ASGI entry point for the medical camp management backend.

Serve with any ASGI server, e.g. ``uvicorn mcms_backend.asgi:application``.
The default settings module is the development configuration.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "mcms_backend.settings.dev")

from django.conf import settings  # noqa: E402
from django.core.asgi import get_asgi_application  # noqa: E402
from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler  # noqa: E402

application = get_asgi_application()

# Serve /static/ when running under uvicorn in DEBUG mode
if settings.DEBUG:
    application = ASGIStaticFilesHandler(application)
