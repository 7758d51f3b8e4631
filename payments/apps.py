from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    """Configuration for the payments app (no models)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
