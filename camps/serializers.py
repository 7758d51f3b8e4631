"""
Serializers for the camps app.

Field names follow the web client's camelCase vocabulary (`campName`,
`campFees`, ...).  `participantCount` is always read-only: only the
registration workflow changes it.
"""
from rest_framework import serializers

from .models import Camp


class ServicesField(serializers.ListField):
    """Accepts either a JSON list or a comma-separated string."""

    child = serializers.CharField(max_length=255)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = [s.strip() for s in data.split(",") if s.strip()]
        return super().to_internal_value(data)


class CampSerializer(serializers.ModelSerializer):
    """Serializer for Camp objects."""
    campName = serializers.CharField(source="name", max_length=255)
    campFees = serializers.DecimalField(source="fees", max_digits=10, decimal_places=2, min_value=0)
    dateTime = serializers.DateTimeField(source="date_time", required=False, allow_null=True)
    healthcareProfessional = serializers.CharField(
        source="healthcare_professional", required=False, allow_blank=True, max_length=255
    )
    targetAudience = serializers.CharField(
        source="target_audience", required=False, allow_blank=True, max_length=255
    )
    specializedServices = ServicesField(source="specialized_services", required=False)
    organizerEmail = serializers.EmailField(source="organizer.email", read_only=True)
    organizerId = serializers.IntegerField(source="organizer_id", read_only=True)
    participantCount = serializers.IntegerField(source="participant_count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    # Full replacement (PUT) must carry every descriptive field
    UPDATE_REQUIRED = (
        "dateTime",
        "location",
        "healthcareProfessional",
        "targetAudience",
        "description",
        "specializedServices",
    )

    class Meta:
        model = Camp
        fields = [
            "id",
            "campName",
            "image",
            "campFees",
            "dateTime",
            "location",
            "healthcareProfessional",
            "targetAudience",
            "description",
            "specializedServices",
            "organizerEmail",
            "organizerId",
            "participantCount",
            "createdAt",
            "updatedAt",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance is not None and not self.partial:
            for name in self.UPDATE_REQUIRED:
                field = self.fields[name]
                field.required = True
                if hasattr(field, "allow_blank"):
                    field.allow_blank = False
                if hasattr(field, "allow_null"):
                    field.allow_null = False
                if isinstance(field, serializers.ListField):
                    field.allow_empty = False
