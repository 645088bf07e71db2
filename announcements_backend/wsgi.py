"""
WSGI entrypoint, e.g. `gunicorn announcements_backend.wsgi`.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "announcements_backend.settings")

application = get_wsgi_application()
