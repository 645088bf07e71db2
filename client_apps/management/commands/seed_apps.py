"""
Management command: seed_apps
-----------------------------

Purpose:
    Register the default client apps so announcements can target them, and
    optionally an admin user to sign in with.

Behavior:
    - Idempotent: uses get_or_create on the slug, so running it multiple
      times will not create duplicate rows.

Usage:
    python manage.py seed_apps [--admin-email someone@cornell.edu]
"""
from django.core.management.base import BaseCommand

from client_apps.models import App
from users.models import User

DEFAULT_APPS = (
    ("Eatery", "eatery"),
    ("Transit", "transit"),
    ("Uplift", "uplift"),
    ("CourseGrab", "coursegrab"),
    ("Volume", "volume"),
    ("Resell", "resell"),
)


class Command(BaseCommand):
    help = "Create the default apps (and optionally an admin user). Idempotent."

    def add_arguments(self, parser):
        parser.add_argument("--admin-email", default=None, help="Create an admin user with this email")

    def handle(self, *args, **options):
        created = 0
        for name, slug in DEFAULT_APPS:
            _, made = App.objects.get_or_create(slug=slug, defaults={"name": name})
            created += 1 if made else 0
        self.stdout.write(self.style.SUCCESS(f"Seeded {created} app(s)."))

        email = options["admin_email"]
        if email:
            user, made = User.objects.get_or_create(email=email, defaults={"is_admin": True})
            if made:
                self.stdout.write(self.style.SUCCESS(f"Created admin user {email}"))
            else:
                self.stdout.write(f"User {email} already exists.")
