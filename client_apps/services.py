"""
Service layer for apps.

Besides CRUD this is where the two slug-facing queries live:

- validate_slugs: every slug an announcement targets must belong to an app
  at the time the announcement is written. There is no foreign key behind
  this; it is a check-then-use at the API boundary.
- active_announcements: what a client app shows right now. "Active" means
  now falls inside [start_date, end_date], both ends inclusive.
"""
import logging
from typing import Any, Dict, Iterable, List

from django.utils import timezone

from announcements.models import Announcement
from announcements_backend import store
from announcements_backend.errors import InvalidArgumentError, RecordNotFoundError

from .models import App

logger = logging.getLogger(__name__)


class AppService:
    """CRUD for apps plus slug validation and the active-announcement feed."""

    @staticmethod
    def list() -> List[App]:
        return list(App.objects.all())

    @staticmethod
    def create(data: Dict[str, Any]) -> App:
        """Insert an app. A duplicate slug raises UniquenessError from the unique index."""
        app = store.create(App.objects, data, unique_fields=["slug"])
        logger.info("Created app %s (%s)", app.pk, app.slug)
        return app

    @staticmethod
    def update(app_id, data: Dict[str, Any]) -> App:
        app = store.update_by_id(App.objects, app_id, data, unique_fields=["slug"])
        if app is None:
            raise RecordNotFoundError("Invalid appId supplied")
        logger.info("Updated app %s fields=%s", app.pk, sorted(data))
        return app

    @staticmethod
    def delete(app_id) -> App:
        app = store.delete_by_id(App.objects, app_id)
        if app is None:
            raise RecordNotFoundError("Invalid appId supplied")
        logger.info("Deleted app %s (%s)", app_id, app.slug)
        return app

    @staticmethod
    def active_announcements(slug: str, include_debug: bool) -> List[Announcement]:
        """
        Announcements for ``slug`` whose window contains the current instant.

        Only the universe matching ``include_debug`` is searched: debug and
        production announcements never mix.
        """
        now = timezone.now()
        candidates = (
            Announcement.objects.select_related("creator")
            .filter(is_debug=include_debug, start_date__lte=now, end_date__gte=now)
        )
        # apps is a JSON list; membership is checked here so the query stays
        # portable across database backends. Rows whose apps is not a list
        # (e.g. a bare string written outside the API) match nothing.
        return [
            announcement for announcement in candidates
            if isinstance(announcement.apps, list) and slug in announcement.apps
        ]

    @staticmethod
    def validate_slugs(slugs: Iterable[str]) -> bool:
        """
        Return True when every slug belongs to an app.

        The existing slugs are loaded once. The first unknown slug raises
        InvalidArgumentError naming it. An empty input is always valid.
        """
        existing = set(App.objects.values_list("slug", flat=True))
        for slug in slugs:
            if slug not in existing:
                raise InvalidArgumentError(f"The slug [{slug}] does not exist.")
        return True
