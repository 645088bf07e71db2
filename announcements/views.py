"""
announcements/views.py

Endpoints:
- /api/announcements/?debug=<bool>        (GET list of one universe; auth required)
- /api/announcements/                     (POST create; creator = caller; auth required)
- /api/announcements/{id}/                (PUT/PATCH partial update, DELETE; auth required)
- /api/announcements/active/{slug}/?debug (GET active announcements for an app; public)

Notes:
- `debug` defaults to false. Debug and production announcements are never
  returned together.
- Slugs in `apps` must name existing apps (400 otherwise).
- start_date must be strictly before end_date, also after a partial update
  that sends only one of the two (400 otherwise).
"""

from rest_framework import permissions, status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from client_apps.services import AppService

from .serializers import (
    AnnouncementCreateSerializer,
    AnnouncementSerializer,
    AnnouncementUpdateSerializer,
    DebugQuerySerializer,
)
from .services import AnnouncementService

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi


def _debug_flag(request) -> bool:
    ser = DebugQuerySerializer(data=request.query_params)
    ser.is_valid(raise_exception=True)
    return ser.validated_data["debug"]


# ----------------------------------------------------------------------------- #
# Announcements (CRUD)                                                          #
# ----------------------------------------------------------------------------- #
class AnnouncementViewSet(viewsets.ViewSet):
    """
    Announcement management for signed-in staff.

    Writes go through AnnouncementService so the date rules hold no matter
    which fields a client sends.
    """
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"

    _resp_list_ok = openapi.Response("OK", AnnouncementSerializer(many=True))
    _resp_item_ok = openapi.Response("OK", AnnouncementSerializer())

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description=(
            "Get all announcements of one universe.\n\n"
            "- `?debug=true` → debug announcements only\n"
            "- `?debug=false` (default) → production announcements only"
        ),
        query_serializer=DebugQuerySerializer,
        responses={200: _resp_list_ok, 401: "Unauthorized"},
    )
    def list(self, request):
        announcements = AnnouncementService.list(_debug_flag(request))
        return Response(AnnouncementSerializer(announcements, many=True).data)

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description=(
            "Create an announcement. The signed-in user becomes its creator.\n\n"
            "Errors:\n"
            "- 400: unknown app slug, or start_date not before end_date\n"
            "- 404: the caller has no user record"
        ),
        request_body=AnnouncementCreateSerializer,
        responses={201: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Unknown creator"},
    )
    def create(self, request):
        ser = AnnouncementCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        announcement = AnnouncementService.create(
            dict(ser.validated_data), creator_email=getattr(request.user, "email", None)
        )
        return Response(AnnouncementSerializer(announcement).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description=(
            "Update an announcement with the given ID. Only the fields sent are changed.\n\n"
            "A lone start_date is checked against the stored end_date, and a lone "
            "end_date against the stored start_date."
        ),
        request_body=AnnouncementUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found"},
    )
    def update(self, request, pk=None):
        ser = AnnouncementUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        announcement = AnnouncementService.update(int(pk), dict(ser.validated_data))
        return Response(AnnouncementSerializer(announcement).data)

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description="Partially update an announcement (same as PUT).",
        request_body=AnnouncementUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found"},
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description="Delete an announcement and return it.",
        responses={200: _resp_item_ok, 401: "Unauthorized", 404: "Not Found"},
    )
    def destroy(self, request, pk=None):
        announcement = AnnouncementService.delete(int(pk))
        return Response(AnnouncementSerializer(announcement).data)


# ----------------------------------------------------------------------------- #
# Active announcements for one app (public)                                     #
# ----------------------------------------------------------------------------- #
class ActiveAnnouncementsView(APIView):
    """
    What a client app should display right now.

    Public: the apps themselves call this without signing in.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        tags=["Announcements"],
        operation_description=(
            "Get all active announcements for an app slug.\n\n"
            "Active means start_date ≤ now ≤ end_date. `?debug=true` searches the "
            "debug universe instead of production."
        ),
        query_serializer=DebugQuerySerializer,
        security=[],
        responses={200: openapi.Response("OK", AnnouncementSerializer(many=True))},
    )
    def get(self, request, slug):
        announcements = AppService.active_announcements(slug, _debug_flag(request))
        return Response(AnnouncementSerializer(announcements, many=True).data)
