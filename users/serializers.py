"""
Serializers for the users app.

Defines serializers for signing up with a role, email-based login that
returns JWT refresh/access tokens carrying the caller's email and role,
the public user summary and the editable profile.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import UserProfile

User = get_user_model()


def user_summary(user) -> dict:
    """Compact representation embedded in auth responses."""
    return {
        "id": user.id,
        "email": user.email,
        "name": user.first_name,
        "role": user.profile.role,
    }


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )
    role = serializers.ChoiceField(
        choices=UserProfile.ROLE_CHOICES,
        required=False,
        default=UserProfile.ROLE_PARTICIPANT,
    )

    def validate_email(self, value: str) -> str:
        return value.strip().lower()

    def validate(self, attrs):
        pseudo_user = User(username=attrs["email"], email=attrs["email"])
        try:
            validate_password(attrs["password"], user=pseudo_user)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({"password": list(exc.messages)})
        return attrs

    def create(self, validated_data):
        user = User(
            username=validated_data["email"],
            email=validated_data["email"],
            first_name=validated_data["name"],
        )
        user.set_password(validated_data["password"])
        user.save()

        profile = user.profile
        profile.role = validated_data["role"]
        profile.display_name = validated_data["name"]
        profile.save(update_fields=["role", "display_name", "updated_at"])
        return user


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Login using email + password and return SimpleJWT refresh/access tokens.
    POST body: {"email": "...", "password": "..."}
    """
    email = serializers.EmailField(write_only=True)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Remove the parent-added username field so only Email + Password remain.
        self.fields.pop(self.username_field, None)

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["email"] = user.email
        token["role"] = user.profile.role
        return token

    def validate(self, attrs):
        email = attrs.get("email")
        password = attrs.get("password")

        try:
            user = User.objects.select_related("profile").get(email__iexact=email)
        except User.DoesNotExist:
            raise AuthenticationFailed("Invalid credentials")

        if not user.is_active or not user.check_password(password):
            raise AuthenticationFailed("Invalid credentials")

        refresh = self.get_token(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
            "user": user_summary(user),
        }


class PublicUserSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source="first_name", read_only=True)
    role = serializers.CharField(source="profile.role", read_only=True)
    photoURL = serializers.URLField(source="profile.photo_url", read_only=True)

    class Meta:
        model = User
        fields = ("id", "name", "email", "role", "photoURL")
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """
    The caller's own profile.  `role` is read-only: it is fixed at sign-up.
    """
    id = serializers.IntegerField(source="user.id", read_only=True)
    name = serializers.CharField(source="user.first_name", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    displayName = serializers.CharField(source="display_name", max_length=255)
    photoURL = serializers.URLField(source="photo_url", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = UserProfile
        fields = (
            "id", "name", "displayName", "email", "role",
            "phone", "organization", "specialization", "experience",
            "location", "bio", "photoURL", "createdAt", "updatedAt",
        )
        read_only_fields = ("role",)

    def validate_displayName(self, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise serializers.ValidationError(
                "Display name is required and must be at least 2 characters"
            )
        return value
