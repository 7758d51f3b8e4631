"""
Serializers for the registrations app.

Input serializers validate the registration form (camelCase, as sent by
the web client).  `RegistrationSerializer` is read-only and is what the
participant and organizer listings return.
"""
from rest_framework import serializers

from .models import Registration


class RegistrationDetailsSerializer(serializers.Serializer):
    """Contact and medical details entered by the participant."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=32)
    age = serializers.IntegerField(min_value=1, max_value=150)
    gender = serializers.CharField(max_length=32)
    emergencyContact = serializers.CharField(source="emergency_contact", max_length=255)
    medicalHistory = serializers.CharField(
        source="medical_history", required=False, allow_blank=True, default=""
    )


class CashRegistrationSerializer(RegistrationDetailsSerializer):
    """POST /registrations/ body."""

    campId = serializers.IntegerField(source="camp_id")
    paymentMethod = serializers.ChoiceField(
        source="payment_method",
        choices=Registration.METHOD_CHOICES,
        required=False,
        default=Registration.METHOD_CASH,
    )

    def validate_paymentMethod(self, value):
        # card payments are only ever settled through /api/confirm-payment/
        if value != Registration.METHOD_CASH:
            raise serializers.ValidationError(
                "Card registrations must be confirmed through /api/confirm-payment/"
            )
        return value


class RegistrationSerializer(serializers.ModelSerializer):
    campId = serializers.IntegerField(source="camp_id", read_only=True)
    campName = serializers.CharField(source="camp_name", read_only=True)
    userEmail = serializers.EmailField(source="user_email", read_only=True)
    userId = serializers.IntegerField(source="user_id", read_only=True)
    emergencyContact = serializers.CharField(source="emergency_contact", read_only=True)
    medicalHistory = serializers.CharField(source="medical_history", read_only=True)
    paymentMethod = serializers.CharField(source="payment_method", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    paymentIntentId = serializers.CharField(source="payment_intent_id", read_only=True)
    amountPaid = serializers.DecimalField(
        source="amount_paid", max_digits=10, decimal_places=2, read_only=True
    )
    registrationDate = serializers.DateTimeField(source="registered_at", read_only=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "campId",
            "campName",
            "userEmail",
            "userId",
            "name",
            "email",
            "phone",
            "age",
            "gender",
            "emergencyContact",
            "medicalHistory",
            "paymentMethod",
            "status",
            "paymentStatus",
            "paymentIntentId",
            "amountPaid",
            "registrationDate",
        ]
        read_only_fields = fields
