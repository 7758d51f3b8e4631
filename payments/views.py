"""
Views for the payments app.

    POST /api/create-payment-intent/ -> open a Stripe PaymentIntent
    POST /api/confirm-payment/       -> verify it with Stripe and register

The client confirms the card with Stripe.js between the two calls.
Payment outcome is always re-read from Stripe; nothing the client says
about it is trusted.
"""
from __future__ import annotations

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from camps.directory import get_camp
from common.exceptions import InvalidAmount, InvalidInput
from registrations.services import confirm_card_payment
from .serializers import (
    ConfirmPaymentSerializer,
    CreatePaymentIntentSerializer,
    PaymentIntentResponseSerializer,
)
from .settlement import create_intent

logger = logging.getLogger(__name__)


class CreatePaymentIntentView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(request=CreatePaymentIntentSerializer, responses=PaymentIntentResponseSerializer)
    def post(self, request, *args, **kwargs):
        serializer = CreatePaymentIntentSerializer(data=request.data)
        if not serializer.is_valid():
            if "amount" in serializer.errors:
                raise InvalidAmount()
            raise InvalidInput(fields=serializer.errors)
        data = serializer.validated_data

        camp_name = data["campName"]
        organizer_email = request.user.email
        if data.get("campId") is not None:
            camp = get_camp(data["campId"])
            camp_name = camp.name
            organizer_email = camp.organizer_email

        intent = create_intent(
            amount=data.get("amount"),
            currency=data["currency"],
            camp_name=camp_name,
            registrant=data["registrationData"],
            organizer_email=organizer_email,
        )
        return Response({"client_secret": intent.client_secret, "payment_intent_id": intent.id})


class ConfirmPaymentView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(request=ConfirmPaymentSerializer)
    def post(self, request, *args, **kwargs):
        # Body is validated by the service, after the eligibility check
        registration, intent = confirm_card_payment(request.user, request.data)
        return Response(
            {
                "success": True,
                "message": "Payment confirmed and registration completed",
                "registrationId": registration.id,
                "paymentIntentId": intent.id,
            },
            status=status.HTTP_201_CREATED,
        )
