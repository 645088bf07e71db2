"""
urls.py — Root URL configuration for the Announcements backend

Purpose
===============================================================================
- Wire Django admin, API routers, and auth endpoints.
- Expose DRF ViewSets for Users, Apps, and Announcements.
- Provide the public Google sign-in helpers (login URL, code → token).
- Provide interactive API docs:
    * /api/docs/   → Swagger UI
    * /api/schema/ → OpenAPI JSON (machine-readable)

Notes
- Every /api/ route requires a Google ID token (Bearer) except:
    * /api/auth/url/, /api/auth/token/
    * /api/announcements/active/<slug>/
- Auth views are centralized in users.auth_views.
"""

from django.contrib import admin
from django.urls import path, include
from rest_framework import routers, permissions
from django.conf import settings
from django.shortcuts import redirect

from users.views import UserViewSet
from users.auth_views import LoginUrlView, TokenView

# ----------------------------------------------------------------------------- #
# DRF Routers (ViewSets → automatic CRUD endpoints)                             #
# ----------------------------------------------------------------------------- #
router = routers.DefaultRouter()
router.register(r"users", UserViewSet, basename="user")

# ----------------------------------------------------------------------------- #
# API Docs (Swagger/OpenAPI via drf-yasg)                                       #
# ----------------------------------------------------------------------------- #
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

schema_view = get_schema_view(
    openapi.Info(
        title="Announcements API",
        default_version="v1",
        description=(
            "Interactive API documentation for in-app announcements. "
            "Auth uses Google ID tokens. Click 'Authorize' and paste: Bearer <ID_TOKEN>. "
            "Key endpoints: /api/announcements/, /api/announcements/active/<slug>/, "
            "/api/apps/, /api/users/"
        ),
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

# ----------------------------------------------------------------------------- #
# URL Patterns                                                                  #
# ----------------------------------------------------------------------------- #
urlpatterns = [
    # tiny root view that redirects to the FE (configurable per env)
    path("", lambda r: redirect(settings.FRONTEND_URL), name="root-redirect"),

    path("admin/", admin.site.urls),

    # Auth (Google OAuth helpers, public)
    path("api/auth/url/",   LoginUrlView.as_view(), name="auth-url"),
    path("api/auth/token/", TokenView.as_view(),    name="auth-token"),

    # API docs
    path("api/docs/",   schema_view.with_ui("swagger", cache_timeout=0), name="api-docs-swagger"),
    path("api/schema/", schema_view.without_ui(cache_timeout=0),         name="openapi-schema"),

    # API (ViewSets)
    path("api/", include("announcements.urls", namespace="announcements")),
    path("api/", include("client_apps.urls", namespace="client_apps")),
    path("api/", include(router.urls)),
]
