"""
Views for the users app.

Provides sign-up, email/password login returning JWT tokens, a token
verification echo, the public user lookup by email and the caller's
own profile.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from common.exceptions import Conflict
from .models import UserProfile
from .serializers import (
    EmailTokenObtainPairSerializer,
    ProfileSerializer,
    PublicUserSerializer,
    RegisterSerializer,
    user_summary,
)

logger = logging.getLogger(__name__)

User = get_user_model()


class RegisterView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if User.objects.filter(email__iexact=serializer.validated_data["email"]).exists():
            raise Conflict("User already exists")

        try:
            with transaction.atomic():
                user = serializer.save()
        except IntegrityError:
            # a concurrent sign-up with the same email won the username insert
            raise Conflict("User already exists")
        logger.info("Registered user %s as %s", user.id, user.profile.role)

        refresh = EmailTokenObtainPairSerializer.get_token(user)
        return Response(
            {
                "message": "User registered successfully",
                "refresh": str(refresh),
                "access": str(refresh.access_token),
                "user": user_summary(user),
            },
            status=status.HTTP_201_CREATED,
        )


class EmailTokenObtainPairView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer


class VerifyTokenView(APIView):
    """Echo the claims of a valid access token."""

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        claims = request.auth
        return Response({
            "valid": True,
            "user": {
                "email": claims.get("email", request.user.email),
                "userId": request.user.id,
                "role": claims.get("role", request.user.profile.role),
            },
        })


class UserByEmailView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, email):
        user = get_object_or_404(User.objects.select_related("profile"), email__iexact=email)
        return Response(PublicUserSerializer(user).data)


class ProfileView(APIView):
    """
    GET  /profile/ -> the caller's profile
    PUT  /profile/ -> update display name and contact fields (role is immutable)
    """
    permission_classes = [permissions.IsAuthenticated]

    def _profile(self, request) -> UserProfile:
        return get_object_or_404(UserProfile.objects.select_related("user"), user=request.user)

    def get(self, request):
        return Response(ProfileSerializer(self._profile(request)).data)

    def put(self, request):
        profile = self._profile(request)
        serializer = ProfileSerializer(profile, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Profile updated for user %s", request.user.id)
        return Response({"message": "Profile updated successfully", "user": serializer.data})

