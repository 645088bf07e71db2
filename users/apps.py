"""
users/apps.py — App configuration for the "users" app

Register the app with Django and set default behavior (like BigAutoField IDs).
The app owns the User record, the Google sign-in endpoints and the DRF
authentication class.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'users'
    verbose_name = "Users"
