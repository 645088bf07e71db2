"""
Management command: seed_announcements
--------------------------------------

Purpose:
    Load announcements from a JSON file (a list, or {"results": [...]}) so a
    fresh database can be populated for demos or local testing.

Behavior:
    - Each item goes through AnnouncementCreateSerializer and
      AnnouncementService.create, so app slugs and date order are checked the
      same way the API checks them.
    - All or nothing: the first invalid item aborts the command and nothing
      is written.

Usage:
    python manage.py seed_announcements path/to/announcements.json [--creator-email a@b.c]
"""
import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from announcements.serializers import AnnouncementCreateSerializer
from announcements.services import AnnouncementService
from announcements_backend.errors import ServiceError


class Command(BaseCommand):
    help = "Seed Announcement rows from a JSON file."

    def add_arguments(self, parser):
        parser.add_argument("json_path", type=str, help="Path to announcements JSON")
        parser.add_argument(
            "--creator-email", default=None,
            help="Email of an existing user to record as creator",
        )

    def handle(self, *args, **opts):
        path = Path(opts["json_path"])
        if not path.exists():
            raise CommandError(f"File not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CommandError(f"Invalid JSON in {path}: {exc}") from exc
        if isinstance(data, dict):
            data = data.get("results", [])
        if not isinstance(data, list):
            raise CommandError(f"Expected a list of announcements in {path}")
        items = data

        created = 0
        with transaction.atomic():
            for index, item in enumerate(items):
                ser = AnnouncementCreateSerializer(data=item)
                if not ser.is_valid():
                    raise CommandError(f"Item {index}: {ser.errors}")
                try:
                    AnnouncementService.create(dict(ser.validated_data), creator_email=opts["creator_email"])
                except ServiceError as exc:
                    raise CommandError(f"Item {index}: {exc.message}") from exc
                created += 1
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} announcement(s)."))
