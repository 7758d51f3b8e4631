"""
Common test fixtures for the API tests.

Provides participant and organizer accounts, clients authenticated with
a JWT obtained from ``/login/``, a camp owned by the organizer and a
helper for building Stripe PaymentIntent payloads.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.test import Client
from django.utils import timezone

from camps.models import Camp
from users.models import UserProfile

User = get_user_model()

PASSWORD = "pass12345"


def make_user(email, role, name="Test User"):
    user = User.objects.create_user(
        username=email, email=email, password=PASSWORD, first_name=name
    )
    profile = user.profile
    profile.role = role
    profile.display_name = name
    profile.save()
    return user


def login(client, email):
    """Authenticate the Django test client using JWT tokens."""
    resp = client.post(
        "/login/",
        {"email": email, "password": PASSWORD},
        content_type="application/json",
    )
    assert resp.status_code == 200
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {resp.json()['access']}"
    return client


def stripe_intent(intent_id="pi_123", status="succeeded", amount=5000, currency="usd"):
    """Dict shaped like the Stripe PaymentIntent object."""
    return {
        "id": intent_id,
        "object": "payment_intent",
        "status": status,
        "amount": amount,
        "currency": currency,
        "client_secret": f"{intent_id}_secret_abc",
        "metadata": {},
    }


@pytest.fixture
def participant(db):
    return make_user("pat@example.com", UserProfile.ROLE_PARTICIPANT, name="Pat Doe")


@pytest.fixture
def organizer(db):
    return make_user("org@example.com", UserProfile.ROLE_ORGANIZER, name="Olivia Org")


@pytest.fixture
def auth_client(client, participant):
    """Client logged in as the participant."""
    return login(client, participant.email)


@pytest.fixture
def organizer_client(db, organizer):
    return login(Client(), organizer.email)


@pytest.fixture
def camp(organizer):
    return Camp.objects.create(
        name="Eye Care Camp",
        fees=Decimal("50.00"),
        date_time=timezone.now() + timedelta(days=7),
        location="Springfield",
        healthcare_professional="Dr. Smith",
        target_audience="Adults",
        description="Free eye screening",
        specialized_services=["Eye exam", "Glasses"],
        organizer=organizer,
    )


@pytest.fixture
def registration_form():
    """Registration details as the web client sends them."""
    return {
        "name": "Pat Doe",
        "email": "pat@example.com",
        "phone": "555-0100",
        "age": 34,
        "gender": "female",
        "emergencyContact": "Sam Doe 555-0199",
        "medicalHistory": "",
    }
