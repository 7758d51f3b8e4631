"""
Camp directory accessors used by the registration workflow.

These helpers are the only sanctioned way for other apps to look up
camps and to bump a camp's participant count.
"""
from __future__ import annotations

from django.db.models import F, QuerySet

from common.exceptions import NotFound
from .models import Camp


def get_camp(camp_id: int) -> Camp:
    """Return the camp or raise `NotFound`."""
    try:
        return Camp.objects.select_related("organizer").get(pk=camp_id)
    except (Camp.DoesNotExist, ValueError, TypeError):
        raise NotFound("Camp not found")


def increment_participant_count(camp_id: int) -> None:
    """
    Add one participant in a single UPDATE evaluated by the database.

    Concurrent callers never lose an increment because the new value is
    computed from the stored row, not from an in-memory instance.
    """
    updated = Camp.objects.filter(pk=camp_id).update(participant_count=F("participant_count") + 1)
    if not updated:
        raise NotFound("Camp not found")


def list_by_organizer(email: str) -> QuerySet:
    return Camp.objects.filter(organizer__email__iexact=email).select_related("organizer")
