"""
Django admin registration for the registrations app.

Registrations are written once by the workflow; the admin is for
inspection only.
"""
from django.contrib import admin
from .models import Registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "camp_name",
        "user_email",
        "payment_method",
        "payment_status",
        "amount_paid",
        "registered_at",
    )
    list_filter = ("payment_method", "payment_status", "status")
    search_fields = ("user_email", "name", "email", "camp_name", "payment_intent_id")
    raw_id_fields = ("camp", "user")
    readonly_fields = ("payment_intent_id", "amount_paid", "registered_at")
    ordering = ("-registered_at",)
