"""
users/auth_views.py — Google sign-in endpoints


Purpose
===============================================================================
The frontend signs people in with Google; this backend only brokers the two
OAuth steps and never issues tokens of its own:

- GET  /api/auth/url/           → Google consent URL (profile + email scopes)
- POST /api/auth/token/?code=   → exchange the returned code for an ID token

The ID token is then sent as ``Authorization: Bearer <id_token>`` on every
other request and verified by users.authentication.GoogleIDTokenAuthentication.
Both endpoints are public.


Swagger notes
- All endpoints in this module are tagged **Auth**.
"""
from rest_framework import permissions, serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .oauth import GoogleOAuthClient


class LoginUrlView(APIView):
    """GET /api/auth/url/ — the URL generated by Google OAuth for users to log in."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        tags=["Auth"],
        operation_description="Get the login URL for Google Auth.",
        security=[],
        responses={200: openapi.Response("Login URL", openapi.Schema(type=openapi.TYPE_STRING))},
    )
    def get(self, request):
        return Response(GoogleOAuthClient().login_url())


class TokenQuerySerializer(serializers.Serializer):
    code = serializers.CharField(help_text="The code provided by Google sign-in.")


class TokenView(APIView):
    """POST /api/auth/token/?code=<code> — returns the ID token for a sign-in code."""
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    @swagger_auto_schema(
        tags=["Auth"],
        operation_description=(
            "Get the auth token for a user.\n\n"
            "Exchanges the Google sign-in `code` for an ID token to be used as a Bearer token."
        ),
        query_serializer=TokenQuerySerializer,
        security=[],
        responses={
            200: openapi.Response("ID token", openapi.Schema(type=openapi.TYPE_STRING)),
            400: "Missing code",
            401: "Incorrectly formatted OAuth2 request",
        },
    )
    def post(self, request):
        ser = TokenQuerySerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        return Response(GoogleOAuthClient().exchange_code(ser.validated_data["code"]))
