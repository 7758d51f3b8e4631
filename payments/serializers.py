"""
Request serializers for the payments app.

The envelopes are deliberately lenient: the settlement and registration
services decide which missing field to report first.
"""
from __future__ import annotations

from rest_framework import serializers


class CreatePaymentIntentSerializer(serializers.Serializer):
    """POST /api/create-payment-intent/ body. `amount` is in cents."""

    amount = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True, default="")
    campName = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    campId = serializers.IntegerField(required=False, allow_null=True)
    registrationData = serializers.DictField(required=False, default=dict)


class ConfirmPaymentSerializer(serializers.Serializer):
    """POST /api/confirm-payment/ body."""

    payment_intent_id = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    campId = serializers.IntegerField(required=False, allow_null=True)
    registrationData = serializers.DictField(required=False, default=dict)


class PaymentIntentResponseSerializer(serializers.Serializer):
    client_secret = serializers.CharField()
    payment_intent_id = serializers.CharField()
