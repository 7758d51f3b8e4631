"""
URL configuration for the registrations app.

Include under ``registrations/`` at the project root.
"""
from django.urls import path
from .views import (
    OrganizerRegistrationsView,
    ParticipantRegistrationsView,
    RegistrationCreateView,
)

urlpatterns = [
    path("", RegistrationCreateView.as_view(), name="registration_create"),
    path("participant/", ParticipantRegistrationsView.as_view(), name="registrations_participant"),
    path("organizer/", OrganizerRegistrationsView.as_view(), name="registrations_organizer"),
]
