"""
client_apps/urls.py

Router for the apps registry. Include this under the global /api/ prefix.
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import AppViewSet


app_name = "client_apps"

router = DefaultRouter()
router.register(r"apps", AppViewSet, basename="app")

urlpatterns = [
    path("", include(router.urls)),
]
