"""
announcements/urls.py

Router + extra path for the public active-announcements feed.
Include this under the global /api/ prefix.
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ActiveAnnouncementsView, AnnouncementViewSet


app_name = "announcements"

router = DefaultRouter()
router.register(r"announcements", AnnouncementViewSet, basename="announcement")

urlpatterns = [
    path("announcements/active/<slug:slug>/", ActiveAnnouncementsView.as_view(), name="announcement-active"),
    path("", include(router.urls)),
]
