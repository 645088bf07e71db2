"""
users/models.py

A User is the stored record behind a Google sign-in: the people who write
announcements and manage apps. It is a plain record, not Django's auth user;
identity comes from the Google ID token (see users.authentication) and is
matched to a row by email.

Notes
- email is unique; collisions surface as IntegrityError and the service turns
  them into UniquenessError.
- image_url is whatever Google reports as the account picture.
"""
from django.db import models


class User(models.Model):
    email = models.EmailField(max_length=254, unique=True, help_text="Google account email; unique.")
    image_url = models.URLField(max_length=1000, blank=True, default="", help_text="Profile picture URL.")
    is_admin = models.BooleanField(default=False)
    name = models.CharField(max_length=200, blank=True, default="")

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>" if self.name else self.email
