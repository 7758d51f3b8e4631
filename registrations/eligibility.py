"""
Who may register for a camp.

Only the normalized `UserProfile.role` is consulted; legacy display-name
markers are folded into the role when the profile is saved.
"""
from django.contrib.auth import get_user_model

from common.exceptions import Forbidden, NotFound
from users.models import UserProfile

User = get_user_model()


def can_register(user) -> bool:
    """False for organizers, True for everyone else."""
    profile = getattr(user, "profile", None)
    if profile is None:
        return True
    return profile.role != UserProfile.ROLE_ORGANIZER


def resolve_participant(user):
    """
    Reload the caller with its profile and make sure it may register.

    Raises `NotFound` if the account is gone and `Forbidden` for organizers.
    """
    try:
        record = User.objects.select_related("profile").get(pk=user.pk)
    except User.DoesNotExist:
        raise NotFound("User not found")
    if not can_register(record):
        raise Forbidden("Organizers cannot register for camps")
    return record
