"""
client_apps/apps.py

AppConfig for the client apps registry (Eatery, Transit, Uplift, ...).
Announcements target these apps by slug.
"""
from django.apps import AppConfig


class ClientAppsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "client_apps"
    verbose_name = "Client apps"
