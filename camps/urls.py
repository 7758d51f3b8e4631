"""
URL configuration for the camps app.

Registers the camp CRUD endpoints.  Include this module at the project
root so camps live under ``/camps/``.
"""
from rest_framework.routers import DefaultRouter
from .views import CampViewSet

router = DefaultRouter()
router.register(r"camps", CampViewSet, basename="camp")

urlpatterns = router.urls
