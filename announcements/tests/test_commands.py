import json
import tempfile
from io import StringIO
from pathlib import Path

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from announcements.models import Announcement
from client_apps.models import App
from users.models import User


class SeedAnnouncementsCommandTests(TestCase):
    def setUp(self):
        App.objects.create(name="Eatery", slug="eatery")
        User.objects.create(email="staff@cornell.edu")
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, items):
        path = Path(self.tmp.name) / "announcements.json"
        path.write_text(json.dumps(items), encoding="utf-8")
        return str(path)

    def _item(self, **overrides):
        item = {
            "apps": ["eatery"],
            "body": "Body",
            "start_date": "2030-01-01T00:00:00Z",
            "end_date": "2030-01-08T00:00:00Z",
            "title": "Seeded",
        }
        item.update(overrides)
        return item

    def test_seeds_through_service(self):
        out = StringIO()
        path = self._write({"results": [self._item(), self._item(title="Debug", is_debug=True)]})
        call_command("seed_announcements", path, "--creator-email", "staff@cornell.edu", stdout=out)
        self.assertIn("Seeded 2 announcement(s).", out.getvalue())
        self.assertEqual(Announcement.objects.filter(creator__email="staff@cornell.edu").count(), 2)
        self.assertTrue(Announcement.objects.get(title="Debug").is_debug)

    def test_bad_dates_abort_everything(self):
        path = self._write([self._item(), self._item(title="Bad", end_date="2030-01-01T00:00:00Z")])
        with self.assertRaises(CommandError):
            call_command("seed_announcements", path, stdout=StringIO())
        self.assertFalse(Announcement.objects.exists())

    def test_unknown_slug_aborts(self):
        path = self._write([self._item(apps=["ghost"])])
        with self.assertRaises(CommandError):
            call_command("seed_announcements", path, stdout=StringIO())
        self.assertFalse(Announcement.objects.exists())

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            call_command("seed_announcements", str(Path(self.tmp.name) / "nope.json"))

    def test_malformed_json(self):
        path = Path(self.tmp.name) / "broken.json"
        path.write_text("[{\"title\": ", encoding="utf-8")
        with self.assertRaises(CommandError) as ctx:
            call_command("seed_announcements", str(path), stdout=StringIO())
        self.assertIn("Invalid JSON", str(ctx.exception))
        self.assertFalse(Announcement.objects.exists())

    def test_json_that_is_not_a_list(self):
        with self.assertRaises(CommandError):
            call_command("seed_announcements", self._write(42), stdout=StringIO())
