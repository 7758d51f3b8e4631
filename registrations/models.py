"""
Database models for the registrations app.

A `Registration` records one participant's place in one camp.  The
database enforces that a participant registers at most once per camp
and that a settled payment intent backs at most one registration.
Rows are written once and never updated by the workflow.
"""
from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q

from camps.models import Camp


class Registration(models.Model):
    """A participant's confirmed registration for a camp."""

    METHOD_CASH = "cash"
    METHOD_CARD = "card"
    METHOD_CHOICES = [
        (METHOD_CASH, "Cash"),
        (METHOD_CARD, "Card"),
    ]

    STATUS_CONFIRMED = "confirmed"
    STATUS_CHOICES = [
        (STATUS_CONFIRMED, "Confirmed"),
    ]

    PAYMENT_PENDING = "pending"
    PAYMENT_PAID = "paid"
    PAYMENT_STATUS_CHOICES = [
        (PAYMENT_PENDING, "Pending"),
        (PAYMENT_PAID, "Paid"),
    ]

    camp = models.ForeignKey(
        Camp,
        on_delete=models.PROTECT,
        related_name="registrations",
    )
    camp_name = models.CharField(max_length=255)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="camp_registrations",
    )
    user_email = models.EmailField()
    # Contact / medical details as entered on the form
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32)
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=32)
    emergency_contact = models.CharField(max_length=255)
    medical_history = models.TextField(blank=True, default="")
    # Payment
    payment_method = models.CharField(max_length=8, choices=METHOD_CHOICES)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_CONFIRMED)
    payment_status = models.CharField(max_length=8, choices=PAYMENT_STATUS_CHOICES)
    payment_intent_id = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Verified Stripe PaymentIntent identifier (card payments only)",
    )
    amount_paid = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Amount settled by the processor, in major units",
    )
    registered_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-registered_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["camp", "user"],
                name="uniq_registration_per_camp_user",
            ),
            # one settled intent pays for exactly one registration
            models.UniqueConstraint(
                fields=["payment_intent_id"],
                condition=~Q(payment_intent_id=""),
                name="uniq_registration_payment_intent",
            ),
        ]
        indexes = [
            models.Index(fields=["user_email"], name="reg_user_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_email} -> {self.camp_id} ({self.payment_status})"
