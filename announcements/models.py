"""
announcements/models.py

Data model for:
- Announcement: a message shown inside one or more client apps during a
  time window [start_date, end_date].

Notes & design choices
----------------------
- apps is a JSONField (list of app slugs). Slugs are not foreign keys; the
  API checks they exist when an announcement is written (AppService.validate_slugs).
- is_debug splits announcements into two disjoint universes: debug ones are
  only visible to internal builds, the rest to production.
- creator is a weak back-reference to the User who posted it; deleting the
  user keeps the announcement.
- apps must be a list of existing slugs; clean() checks this for admin forms,
  the API serializers check it for requests.
- start_date < end_date must always hold. AnnouncementService enforces it on
  every write; clean() repeats the check for admin forms.
"""
from django.core.exceptions import ValidationError
from django.db import models

from announcements_backend.errors import InvalidArgumentError

from .validators import is_date_before, is_slug_list


class Announcement(models.Model):
    apps = models.JSONField(default=list, blank=True, help_text="List of app slugs, e.g. ['eatery','transit']")
    body = models.TextField()
    creator = models.ForeignKey(
        "users.User", null=True, blank=True, on_delete=models.SET_NULL,
        related_name="announcements", help_text="User who created this announcement."
    )
    end_date = models.DateTimeField(db_index=True)
    image_url = models.URLField(max_length=1000, blank=True, default="")
    is_debug = models.BooleanField(default=False, db_index=True)
    link = models.URLField(max_length=1000, blank=True, default="")
    start_date = models.DateTimeField(db_index=True)
    title = models.CharField(max_length=200)

    class Meta:
        ordering = ["-start_date", "id"]

    def clean(self):
        errors = {}
        if self.start_date and self.end_date and not is_date_before(self.start_date, self.end_date):
            errors["end_date"] = "Start date must be before end date"
        if not is_slug_list(self.apps):
            errors["apps"] = "Apps must be a list of app slugs"
        else:
            # client_apps.services imports this module.
            from client_apps.services import AppService

            try:
                AppService.validate_slugs(self.apps)
            except InvalidArgumentError as exc:
                errors["apps"] = exc.message
        if errors:
            raise ValidationError(errors)

    def __str__(self) -> str:
        return self.title
