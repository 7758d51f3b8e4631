from django.apps import AppConfig


class CampsConfig(AppConfig):
    """Configuration for the camps app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "camps"
