"""
Authentication and profile endpoints for the users app.

This module exposes sign-up, email + password login returning JWT
tokens, token refresh/verification, the user lookup by email and the
caller's profile.  Included at the project root, as the web client
expects (``/register/``, ``/login/``, ``/profile/``...).
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .views import (
    RegisterView,
    EmailTokenObtainPairView,
    VerifyTokenView,
    UserByEmailView,
    ProfileView,
)

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", EmailTokenObtainPairView.as_view(), name="login"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("verify-token/", VerifyTokenView.as_view(), name="verify_token"),
    path("users/<str:email>/", UserByEmailView.as_view(), name="user_by_email"),
    path("profile/", ProfileView.as_view(), name="profile"),
]
