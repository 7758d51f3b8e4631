"""
URL configuration for the medical camp management backend.

Auth, profile, camp and registration endpoints sit at the root, as the
web client expects.  Payment endpoints and the OpenAPI docs live under
``/api/``.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)

from mcms_backend.views import index

urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    # Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/", include("payments.urls")),
    path("registrations/", include("registrations.urls")),
    path("", include("camps.urls")),
    path("", include("users.urls")),
]
