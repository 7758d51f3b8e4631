"""
Celery tasks for the registrations app.

`reconcile_participant_counts` is scheduled daily through
``CELERY_BEAT_SCHEDULE`` and repairs camps whose stored participant
count no longer matches their registrations.
"""
from __future__ import annotations

import logging

from celery import shared_task

from . import services

logger = logging.getLogger(__name__)


@shared_task
def reconcile_participant_counts(dry_run: bool = False) -> int:
    """Return the number of camps whose count drifted."""
    drifted = services.reconcile_participant_counts(dry_run=dry_run)
    if drifted:
        logger.warning("Participant counts reconciled for %d camp(s)", len(drifted))
    else:
        logger.info("Participant counts consistent")
    return len(drifted)
