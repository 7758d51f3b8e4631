"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the role and
contact fields the camp platform needs.  A `OneToOneField` links each
profile to its user.  The `UserProfile` is created automatically via
signals when a new user instance is saved.
"""
from django.db import models
from django.contrib.auth.models import User


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    ROLE_ORGANIZER = "organizer"
    ROLE_PARTICIPANT = "participant"
    ROLE_CHOICES = [
        (ROLE_ORGANIZER, "Organizer"),
        (ROLE_PARTICIPANT, "Participant"),
    ]
    # Display name older clients used to mark organizer accounts
    LEGACY_ORGANIZER_DISPLAY_NAME = "Organizer"

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=ROLE_CHOICES, blank=True, default="")
    display_name = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    organization = models.CharField(max_length=255, blank=True)
    specialization = models.CharField(max_length=255, blank=True)
    experience = models.CharField(max_length=255, blank=True)
    location = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    photo_url = models.URLField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["role"], name="users_userp_role_idx"),
        ]

    def normalize_role(self) -> None:
        """
        Resolve the role once, at write time, so readers only consult `role`.
        """
        if self.role in dict(self.ROLE_CHOICES):
            return
        if self.display_name.strip() == self.LEGACY_ORGANIZER_DISPLAY_NAME:
            self.role = self.ROLE_ORGANIZER
        else:
            self.role = self.ROLE_PARTICIPANT

    def save(self, *args, **kwargs):
        self.normalize_role()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "role" not in update_fields:
            kwargs["update_fields"] = [*update_fields, "role"]
        super().save(*args, **kwargs)

    @property
    def is_organizer(self) -> bool:
        return self.role == self.ROLE_ORGANIZER

    def __str__(self) -> str:
        return f"Profile<{self.user.username}> ({self.role})"
