"""
client_apps/views.py

Endpoints:
- /api/apps/        (GET list, POST create; auth required)
- /api/apps/{id}/   (PUT/PATCH partial update, DELETE; auth required)

The active-announcement feed for an app lives with the announcements routes
(/api/announcements/active/{slug}/) because that is where clients look for it.
"""
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

# Swagger / OpenAPI
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .serializers import AppSerializer, AppUpdateSerializer
from .services import AppService


class AppViewSet(viewsets.ViewSet):
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"

    _resp_list_ok = openapi.Response("OK", AppSerializer(many=True))
    _resp_item_ok = openapi.Response("OK", AppSerializer())

    @swagger_auto_schema(
        tags=["Apps"],
        operation_description="Get all apps.",
        responses={200: _resp_list_ok, 401: "Unauthorized"},
    )
    def list(self, request):
        return Response(AppSerializer(AppService.list(), many=True).data)

    @swagger_auto_schema(
        tags=["Apps"],
        operation_description="Create an app. Slugs are unique.",
        request_body=AppSerializer,
        responses={201: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 409: "Duplicate slug"},
    )
    def create(self, request):
        ser = AppSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        app = AppService.create(dict(ser.validated_data))
        return Response(AppSerializer(app).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        tags=["Apps"],
        operation_description="Update an app with the given ID. Only the fields sent are changed.",
        request_body=AppUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found", 409: "Duplicate slug"},
    )
    def update(self, request, pk=None):
        ser = AppUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        app = AppService.update(int(pk), dict(ser.validated_data))
        return Response(AppSerializer(app).data)

    @swagger_auto_schema(
        tags=["Apps"],
        operation_description="Partially update an app (same as PUT).",
        request_body=AppUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found", 409: "Duplicate slug"},
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @swagger_auto_schema(
        tags=["Apps"],
        operation_description="Delete an app and return it.",
        responses={200: _resp_item_ok, 401: "Unauthorized", 404: "Not Found"},
    )
    def destroy(self, request, pk=None):
        app = AppService.delete(int(pk))
        return Response(AppSerializer(app).data)
