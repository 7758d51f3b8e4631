"""
Tests for the participant count reconciliation job (service, Celery
task and management command).
"""
from io import StringIO

import pytest
from django.core.management import call_command

from camps.models import Camp
from registrations import services
from registrations.models import Registration
from registrations.tasks import reconcile_participant_counts as reconcile_task


def _register(camp, user):
    return Registration.objects.create(
        camp=camp,
        camp_name=camp.name,
        user=user,
        user_email=user.email,
        name="Pat",
        email=user.email,
        phone="555",
        age=30,
        gender="f",
        emergency_contact="Sam",
        payment_method=Registration.METHOD_CASH,
        payment_status=Registration.PAYMENT_PENDING,
    )


@pytest.fixture
def drifted_camp(camp, participant):
    _register(camp, participant)
    Camp.objects.filter(pk=camp.pk).update(participant_count=5)
    return camp


@pytest.mark.django_db
def test_reconcile_repairs_drift(drifted_camp, organizer):
    empty = Camp.objects.create(name="Empty", fees=0, organizer=organizer, participant_count=3)

    drifted = services.reconcile_participant_counts()

    assert sorted(drifted) == sorted([(drifted_camp.pk, 5, 1), (empty.pk, 3, 0)])
    drifted_camp.refresh_from_db()
    empty.refresh_from_db()
    assert drifted_camp.participant_count == 1
    assert empty.participant_count == 0


@pytest.mark.django_db
def test_reconcile_dry_run_changes_nothing(drifted_camp):
    drifted = services.reconcile_participant_counts(dry_run=True)
    assert drifted == [(drifted_camp.pk, 5, 1)]
    drifted_camp.refresh_from_db()
    assert drifted_camp.participant_count == 5


@pytest.mark.django_db
def test_reconcile_consistent(camp, participant):
    _register(camp, participant)
    Camp.objects.filter(pk=camp.pk).update(participant_count=1)
    assert services.reconcile_participant_counts() == []


@pytest.mark.django_db
def test_reconcile_task(drifted_camp):
    assert reconcile_task.delay().get() == 1
    drifted_camp.refresh_from_db()
    assert drifted_camp.participant_count == 1


@pytest.mark.django_db
def test_reconcile_command(drifted_camp):
    out = StringIO()
    call_command("reconcile_participant_counts", "--dry-run", stdout=out)
    assert f"Camp {drifted_camp.pk}: stored=5 actual=1" in out.getvalue()
    drifted_camp.refresh_from_db()
    assert drifted_camp.participant_count == 5

    out = StringIO()
    call_command("reconcile_participant_counts", stdout=out)
    assert "Fixed 1 camp(s)." in out.getvalue()
    drifted_camp.refresh_from_db()
    assert drifted_camp.participant_count == 1
