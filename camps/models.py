"""
Models for the camps app.

A `Camp` is a medical camp published by an organizer.  Participants
register for camps through the registrations app, which is the only
writer of `participant_count`: camp CRUD never touches it.
"""

from django.db import models
from django.contrib.auth.models import User


class Camp(models.Model):
    """Represents a medical camp owned by an organizer."""
    name = models.CharField(max_length=255)
    image = models.URLField(max_length=500, blank=True)
    fees = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    date_time = models.DateTimeField(null=True, blank=True)
    location = models.CharField(max_length=255, blank=True)
    healthcare_professional = models.CharField(max_length=255, blank=True)
    target_audience = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    specialized_services = models.JSONField(default=list, blank=True)
    organizer = models.ForeignKey(User, on_delete=models.CASCADE, related_name="organized_camps")
    participant_count = models.PositiveIntegerField(default=0)
    # Meta
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["organizer"], name="camps_camp_organizer_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(fees__gte=0), name="camp_fees_non_negative"),
        ]

    @property
    def organizer_email(self) -> str:
        return self.organizer.email

    def __str__(self) -> str:
        return f"{self.name} ({self.organizer.email})"
