"""
client_apps/models.py

An App is one of the client applications announcements are shown in
(eatery, transit, uplift, ...). Announcements refer to apps by slug, never by
id, so the slug is the stable external identifier and is unique.
"""
from django.db import models


class App(models.Model):
    name = models.CharField(max_length=120, help_text="Display name, e.g. Eatery.")
    slug = models.SlugField(max_length=80, unique=True, help_text="Stable identifier referenced by announcements.")

    class Meta:
        ordering = ["slug"]
        verbose_name = "app"

    def __str__(self) -> str:
        return f"{self.name} ({self.slug})"
