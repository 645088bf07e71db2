"""
users/views.py — Users API

Endpoints
- GET    /api/users/          list users
- POST   /api/users/          create a user (image_url defaults to the caller's Google picture)
- PUT    /api/users/{id}/     update any subset of fields
- PATCH  /api/users/{id}/     same as PUT
- DELETE /api/users/{id}/     delete and return the user
- POST   /api/users/login/    resolve the caller's Google identity to a stored
                              user and refresh its name/picture from the token

All endpoints require a Google ID token (see users.authentication).
Service errors (not found, duplicate email) are mapped to HTTP by
announcements_backend.exceptions.
"""
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from drf_yasg.utils import no_body, swagger_auto_schema
from drf_yasg import openapi

from .serializers import UserSerializer, UserUpdateSerializer
from .services import UserService


class UserViewSet(viewsets.ViewSet):
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"

    _resp_list_ok = openapi.Response("OK", UserSerializer(many=True))
    _resp_item_ok = openapi.Response("OK", UserSerializer())

    @swagger_auto_schema(
        tags=["Users"],
        operation_description="Get all users.",
        responses={200: _resp_list_ok, 401: "Unauthorized"},
    )
    def list(self, request):
        return Response(UserSerializer(UserService.list(), many=True).data)

    @swagger_auto_schema(
        tags=["Users"],
        operation_description=(
            "Create a user.\n\n"
            "If `image_url` is omitted, the caller's Google profile picture is used."
        ),
        request_body=UserSerializer,
        responses={201: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 409: "Duplicate email"},
    )
    def create(self, request):
        ser = UserSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = dict(ser.validated_data)
        if not data.get("image_url"):
            data["image_url"] = getattr(request.user, "picture", "") or ""
        user = UserService.create(data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        tags=["Users"],
        operation_description="Update a user with the given ID. Only the fields sent are changed.",
        request_body=UserUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found", 409: "Duplicate email"},
    )
    def update(self, request, pk=None):
        ser = UserUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        user = UserService.update(int(pk), dict(ser.validated_data))
        return Response(UserSerializer(user).data)

    @swagger_auto_schema(
        tags=["Users"],
        operation_description="Partially update a user (same as PUT).",
        request_body=UserUpdateSerializer,
        responses={200: _resp_item_ok, 400: "Bad Request", 401: "Unauthorized", 404: "Not Found", 409: "Duplicate email"},
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @swagger_auto_schema(
        tags=["Users"],
        operation_description="Delete a user and return it.",
        responses={200: _resp_item_ok, 401: "Unauthorized", 404: "Not Found"},
    )
    def destroy(self, request, pk=None):
        user = UserService.delete(int(pk))
        return Response(UserSerializer(user).data)

    @swagger_auto_schema(
        method="post",
        tags=["Users"],
        operation_description=(
            "Authenticate a user after Google sign-in.\n\n"
            "Looks up the stored user by the token's email and refreshes its name and picture."
        ),
        request_body=no_body,
        responses={200: _resp_item_ok, 401: "Unauthorized", 404: "No user with this email"},
    )
    @action(detail=False, methods=["post"])
    def login(self, request):
        identity = request.user
        user = UserService.get_by_email(identity.email)
        claims = {"name": identity.name, "image_url": identity.picture}
        user = UserService.update(user.pk, {k: v for k, v in claims.items() if v})
        return Response(UserSerializer(user).data)
