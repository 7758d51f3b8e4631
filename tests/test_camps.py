"""
API tests for the camps app.

Listing and detail are public; organizers create camps and only the
owner may update or delete one.
"""
import pytest
from django.test import Client

from camps.directory import get_camp, increment_participant_count, list_by_organizer
from camps.models import Camp
from common.exceptions import NotFound
from registrations.models import Registration

CAMP_PAYLOAD = {
    "campName": "Heart Health",
    "campFees": "25.00",
    "dateTime": "2026-12-01T09:00:00Z",
    "location": "Shelbyville",
    "healthcareProfessional": "Dr. Who",
    "targetAudience": "Seniors",
    "description": "Blood pressure checks",
    "specializedServices": "ECG, BP check",
}


@pytest.mark.django_db
def test_camp_crud(organizer_client, organizer):
    resp = organizer_client.post("/camps/", CAMP_PAYLOAD, content_type="application/json")
    assert resp.status_code == 201
    camp = resp.json()["camp"]
    assert camp["organizerEmail"] == organizer.email
    assert camp["specializedServices"] == ["ECG", "BP check"]
    assert camp["participantCount"] == 0
    camp_id = camp["id"]

    # List and detail are public
    anon = Client()
    ids = [c["id"] for c in anon.get("/camps/").json()]
    assert camp_id in ids
    assert anon.get(f"/camps/{camp_id}/").json()["campName"] == "Heart Health"

    update = organizer_client.put(
        f"/camps/{camp_id}/",
        {**CAMP_PAYLOAD, "campName": "Heart Health 2", "specializedServices": ["ECG"]},
        content_type="application/json",
    )
    assert update.status_code == 200
    assert update.json()["camp"]["campName"] == "Heart Health 2"

    delete = organizer_client.delete(f"/camps/{camp_id}/")
    assert delete.status_code == 200
    assert delete.json()["deletedCount"] == 1
    assert not Camp.objects.filter(pk=camp_id).exists()


@pytest.mark.django_db
def test_participant_count_is_read_only(organizer_client, camp):
    resp = organizer_client.patch(
        f"/camps/{camp.id}/", {"participantCount": 99}, content_type="application/json"
    )
    assert resp.status_code == 200
    camp.refresh_from_db()
    assert camp.participant_count == 0


@pytest.mark.django_db
def test_put_requires_all_descriptive_fields(organizer_client, camp):
    resp = organizer_client.put(
        f"/camps/{camp.id}/", {"campName": "x", "campFees": "1.00"}, content_type="application/json"
    )
    assert resp.status_code == 400
    assert "location" in resp.json()["fields"]


@pytest.mark.django_db
def test_participant_cannot_create_camp(auth_client):
    resp = auth_client.post("/camps/", CAMP_PAYLOAD, content_type="application/json")
    assert resp.status_code == 403


@pytest.mark.django_db
def test_negative_fees_rejected(organizer_client):
    resp = organizer_client.post(
        "/camps/", {**CAMP_PAYLOAD, "campFees": "-1"}, content_type="application/json"
    )
    assert resp.status_code == 400


@pytest.mark.django_db
def test_only_owner_can_modify(auth_client, camp):
    resp = auth_client.delete(f"/camps/{camp.id}/")
    assert resp.status_code == 403
    assert Camp.objects.filter(pk=camp.id).exists()


@pytest.mark.django_db
def test_camp_with_registrations_cannot_be_deleted(organizer_client, camp, participant):
    Registration.objects.create(
        camp=camp,
        camp_name=camp.name,
        user=participant,
        user_email=participant.email,
        name="Pat",
        email=participant.email,
        phone="555",
        age=30,
        gender="f",
        emergency_contact="Sam",
        payment_method=Registration.METHOD_CASH,
        payment_status=Registration.PAYMENT_PENDING,
    )
    resp = organizer_client.delete(f"/camps/{camp.id}/")
    assert resp.status_code == 409
    assert Camp.objects.filter(pk=camp.id).exists()


@pytest.mark.django_db
def test_mine_lists_own_camps(organizer_client, auth_client, camp):
    resp = organizer_client.get("/camps/mine/")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()] == [camp.id]
    assert auth_client.get("/camps/mine/").json() == []


@pytest.mark.django_db
def test_missing_camp_is_404(client):
    resp = client.get("/camps/424242/")
    assert resp.status_code == 404
    assert resp.json()["code"] == "not_found"


@pytest.mark.django_db
def test_directory_helpers(camp, organizer):
    assert get_camp(camp.id) == camp
    with pytest.raises(NotFound):
        get_camp(424242)
    with pytest.raises(NotFound):
        get_camp("not-a-number")

    assert list(list_by_organizer(organizer.email.upper())) == [camp]

    with pytest.raises(NotFound):
        increment_participant_count(424242)


@pytest.mark.django_db
def test_increment_is_computed_by_the_database(camp):
    stale = Camp.objects.get(pk=camp.pk)
    increment_participant_count(camp.pk)
    # A stale in-memory copy does not affect the stored value
    assert stale.participant_count == 0
    increment_participant_count(stale.pk)
    camp.refresh_from_db()
    assert camp.participant_count == 2
