from django.apps import AppConfig


class RegistrationsConfig(AppConfig):
    """Configuration for the registrations app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "registrations"
