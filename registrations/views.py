"""
Views for the registrations app.

    POST /registrations/              -> register the caller (cash)
    GET  /registrations/participant/  -> the caller's registrations
    GET  /registrations/organizer/    -> registrations for the caller's camps

Card registrations are created by ``/api/confirm-payment/`` in the
payments app once the processor confirms the charge.
"""
import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import RegistrationSerializer

logger = logging.getLogger(__name__)


class RegistrationCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, *args, **kwargs):
        registration = services.register_cash(request.user, request.data)
        return Response(
            {
                "message": "Registration successful",
                "registrationId": registration.id,
                "success": True,
            },
            status=status.HTTP_201_CREATED,
        )


class ParticipantRegistrationsView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        registrations = services.list_for_participant(request.user)
        return Response(RegistrationSerializer(registrations, many=True).data)


class OrganizerRegistrationsView(APIView):
    """Every registration for camps the caller organizes (empty if none)."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        registrations = services.list_for_organizer_camps(request.user)
        return Response(RegistrationSerializer(registrations, many=True).data)
