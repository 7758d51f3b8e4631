"""
Django admin registration for the camps app.

`participant_count` is shown but read-only: it is maintained by the
registration workflow and the reconciliation job.
"""
from django.contrib import admin
from .models import Camp


@admin.register(Camp)
class CampAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "organizer",
        "fees",
        "date_time",
        "location",
        "participant_count",
        "created_at",
    )
    list_filter = ("location",)
    search_fields = ("name", "organizer__email", "healthcare_professional")
    readonly_fields = ("participant_count", "created_at", "updated_at")
    ordering = ("-created_at",)
