"""
announcements/apps.py

AppConfig for the Announcements app.

Why this app exists
-------------------
Announcements are short messages (title, body, image, link) shown inside the
client apps during a time window:

1) /api/announcements/               — staff CRUD, one universe (debug or not) at a time
2) /api/announcements/active/<slug>/ — what an app shows right now (public)

The date rules live in services.py; views and admin only call into it.
"""
from django.apps import AppConfig


class AnnouncementsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "announcements"
    verbose_name = "Announcements"
