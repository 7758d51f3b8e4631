"""
API tests for sign-up, login and profile endpoints.
"""
import pytest
from django.contrib.auth import get_user_model

from users.models import UserProfile

User = get_user_model()


@pytest.mark.django_db
def test_register_and_login(client):
    resp = client.post(
        "/register/",
        {"name": "Ann", "email": "Ann@Example.com", "password": "secret1", "role": "organizer"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["email"] == "ann@example.com"
    assert body["user"]["role"] == "organizer"
    assert body["access"] and body["refresh"]

    login = client.post(
        "/login/", {"email": "ann@example.com", "password": "secret1"}, content_type="application/json"
    )
    assert login.status_code == 200
    assert login.json()["user"]["role"] == "organizer"


@pytest.mark.django_db
def test_register_duplicate_email(client, participant):
    resp = client.post(
        "/register/",
        {"name": "Pat", "email": participant.email, "password": "secret1"},
        content_type="application/json",
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "User already exists"


@pytest.mark.django_db
def test_register_short_password(client):
    resp = client.post(
        "/register/",
        {"name": "Bo", "email": "bo@example.com", "password": "abc"},
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert "password" in resp.json()["fields"]
    assert not User.objects.filter(email="bo@example.com").exists()


@pytest.mark.django_db
def test_register_defaults_to_participant(client):
    resp = client.post(
        "/register/",
        {"name": "Cy", "email": "cy@example.com", "password": "secret1"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    assert User.objects.get(email="cy@example.com").profile.role == UserProfile.ROLE_PARTICIPANT


@pytest.mark.django_db
def test_login_bad_password(client, participant):
    resp = client.post(
        "/login/", {"email": participant.email, "password": "wrong"}, content_type="application/json"
    )
    assert resp.status_code == 401


@pytest.mark.django_db
def test_verify_token(auth_client, participant):
    resp = auth_client.get("/verify-token/")
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["email"] == participant.email
    assert user["role"] == "participant"


@pytest.mark.django_db
def test_user_by_email(auth_client, organizer):
    resp = auth_client.get(f"/users/{organizer.email}/")
    assert resp.status_code == 200
    assert resp.json()["role"] == "organizer"
    assert auth_client.get("/users/nobody@example.com/").status_code == 404


@pytest.mark.django_db
def test_profile_update_keeps_role(auth_client, participant):
    resp = auth_client.put(
        "/profile/",
        {"displayName": "Pat D.", "role": "organizer", "location": "Springfield"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    assert resp.json()["user"]["displayName"] == "Pat D."
    profile = UserProfile.objects.get(user=participant)
    assert profile.role == UserProfile.ROLE_PARTICIPANT
    assert profile.location == "Springfield"


@pytest.mark.django_db
def test_profile_display_name_validation(auth_client):
    resp = auth_client.put("/profile/", {"displayName": " a "}, content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Display name is required and must be at least 2 characters"


@pytest.mark.django_db
def test_role_normalized_on_save(participant):
    profile = participant.profile
    profile.role = ""
    profile.display_name = "Organizer"
    profile.save(update_fields=["display_name"])
    profile.refresh_from_db()
    assert profile.role == UserProfile.ROLE_ORGANIZER

    profile.role = ""
    profile.display_name = "Someone"
    profile.save()
    profile.refresh_from_db()
    # Empty role without the legacy marker falls back to participant
    assert profile.role == UserProfile.ROLE_PARTICIPANT


@pytest.mark.django_db
def test_index_banner(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.content == b"MCMS Server Running"


@pytest.mark.django_db
def test_register_username_collision_is_conflict(client):
    # Same username committed by a concurrent sign-up under another email
    User.objects.create_user(username="race@example.com", email="someone@example.com", password="secret1")
    resp = client.post(
        "/register/",
        {"name": "Rae", "email": "race@example.com", "password": "secret1"},
        content_type="application/json",
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "User already exists"
    assert User.objects.filter(username="race@example.com").count() == 1
