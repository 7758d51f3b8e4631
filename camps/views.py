"""
ViewSets for the camps app.

Anyone can list and retrieve camps.  Organizers create camps and may
update or delete only the camps they own.
"""
import logging

from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.permissions import SAFE_METHODS, AllowAny, BasePermission, IsAuthenticated
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from common.exceptions import Conflict, Forbidden
from .directory import list_by_organizer
from .models import Camp
from .serializers import CampSerializer

logger = logging.getLogger(__name__)


class IsOrganizerOwnerOrReadOnly(BasePermission):
    """
    - SAFE_METHODS (GET/HEAD/OPTIONS) are open.
    - Mutations allowed only for the camp's organizer or staff users.
    """
    message = "You can only modify your own camps"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True
        return bool(
            request.user
            and (request.user.is_staff or obj.organizer_id == request.user.id)
        )


class CampViewSet(viewsets.ModelViewSet):
    """
    Full CRUD over camps with search & ordering, plus `mine` for the
    organizer dashboard.  Lists are returned unpaginated, as the web
    client expects a plain array.
    """
    serializer_class = CampSerializer
    permission_classes = [IsOrganizerOwnerOrReadOnly]
    pagination_class = None
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ["location"]
    search_fields = ["name", "location", "healthcare_professional", "target_audience"]
    ordering_fields = ["date_time", "fees", "participant_count", "created_at"]
    ordering = ["-created_at"]

    def get_queryset(self):
        return Camp.objects.select_related("organizer")

    def get_permissions(self):
        if self.action in ["list", "retrieve"]:
            return [AllowAny()]
        return super().get_permissions()

    def perform_create(self, serializer):
        user = self.request.user
        profile = getattr(user, "profile", None)
        if not user.is_staff and not (profile and profile.is_organizer):
            raise Forbidden("Only organizers can create camps")
        camp = serializer.save(organizer=user)
        logger.info("Camp %s created by %s", camp.id, user.email)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return Response(
            {"message": "Camp created successfully", "camp": serializer.data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        response = super().update(request, *args, **kwargs)
        logger.info("Camp %s updated by %s", kwargs.get("pk"), request.user.email)
        return Response({"message": "Camp updated successfully", "camp": response.data})

    def destroy(self, request, *args, **kwargs):
        camp = self.get_object()
        camp_id = camp.id
        try:
            camp.delete()
        except ProtectedError:
            raise Conflict("Camp has registrations and cannot be deleted")
        logger.info("Camp %s deleted by %s", camp_id, request.user.email)
        return Response({"message": "Camp deleted successfully", "deletedCount": 1})

    @action(detail=False, methods=["get"], permission_classes=[IsAuthenticated], url_path="mine")
    def mine(self, request):
        """Camps owned by the caller."""
        qs = self.filter_queryset(list_by_organizer(request.user.email))
        return Response(self.get_serializer(qs, many=True).data)
