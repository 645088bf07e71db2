"""
settings.py — Django project configuration for the Announcements Backend

What this file configures
===============================================================================
- Core Django wiring (INSTALLED_APPS, MIDDLEWARE, TEMPLATES, DB)
- REST Framework defaults (Google ID-token auth, IsAuthenticated, error mapping)
- Google OAuth client settings used by /api/auth/ and the auth backend
- CORS for FE ↔ BE requests
- Static handling via WhiteNoise in production
- Swagger (drf-yasg) configured to use Bearer tokens in the Authorize dialog
- Logging to the console for Django and the project apps

How environment variables drive behavior (deployment-safe)
===============================================================================
DJANGO_DEBUG            -> Enables dev mode when true. Defaults to True locally.
DJANGO_SECRET_KEY       -> Required when DJANGO_DEBUG=False (production).
DJANGO_ALLOWED_HOSTS    -> Comma-separated list of allowed hostnames in prod.
FRONTEND_URL            -> Where "/" redirects; also seeds the CORS allow-list.
CORS_ALLOW_ALL_ORIGINS  -> Dev toggle to allow any origin (default True in dev).
CORS_ALLOWED_ORIGINS    -> Comma-separated list of exact origins (prod).
DATABASE_URL            -> Any URL dj-database-url understands; SQLite otherwise.
GOOGLE_CLIENT_ID        -> OAuth client id; also the expected ID-token audience.
GOOGLE_CLIENT_SECRET    -> OAuth client secret (code exchange only).
GOOGLE_REDIRECT_URL     -> Redirect URI registered with Google.
LOG_LEVEL               -> Level for the project loggers (default INFO).

Why some ordering matters
===============================================================================
- We compute DEBUG first so SECRET_KEY can enforce “prod requires a key.”
- ALLOWED_HOSTS/CORS read from env with dev-safe defaults so you can flip
  to production behavior without code changes.
"""

from pathlib import Path
from urllib.parse import urlparse
import os

import dj_database_url


# ---------------------------
# Helpers for env parsing
# ---------------------------
def _get_bool(env_key: str, default: bool = False) -> bool:
    """Parse booleans from env like '1', 'true', 'yes'."""
    raw = os.environ.get(env_key, str(default))
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}

def _get_list(env_key: str, default=None):
    """Parse comma-separated lists from env (e.g., 'a.com,b.com')."""
    if default is None:
        default = []
    raw = os.environ.get(env_key)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def _origin_from(url: str) -> str:
    """Turn a full URL into an origin string (scheme://host[:port])."""
    p = urlparse(url or "")
    if not p.scheme or not p.hostname:
        return ""
    return f"{p.scheme}://{p.hostname}" + (f":{p.port}" if p.port else "")


BASE_DIR = Path(__file__).resolve().parent.parent

# Reads DJANGO_DEBUG from env. Defaults to True for dev.
DEBUG = _get_bool("DJANGO_DEBUG", True)


# --- Frontend URL & CORS ---
FRONTEND_URL = os.environ.get("FRONTEND_URL", "https://announcements.cornellappdev.com/")

CORS_ALLOW_ALL_ORIGINS = _get_bool("CORS_ALLOW_ALL_ORIGINS", DEBUG)

# Optional explicit allow-list (use in prod). Example:
#   CORS_ALLOWED_ORIGINS="https://fe.example.com,https://staging.example.com"
CORS_ALLOWED_ORIGINS = _get_list("CORS_ALLOWED_ORIGINS", [])
if not CORS_ALLOWED_ORIGINS and FRONTEND_URL:
    derived = _origin_from(FRONTEND_URL)
    if derived:
        CORS_ALLOWED_ORIGINS = [derived]


# SECRET_KEY with safe production enforcement
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or (
    "django-insecure-3v#q9k1m8x!r2w@announcements-dev-only-key" if DEBUG else None
)
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG=False")


ALLOWED_HOSTS = _get_list("DJANGO_ALLOWED_HOSTS", [] if DEBUG else ["127.0.0.1"])


INSTALLED_APPS = [
    # Django core
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'drf_yasg',                                   # Swagger/OpenAPI docs

    # Local apps
    'users',
    'client_apps',
    'announcements',
]

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,
    "SECURITY_DEFINITIONS": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Paste: Bearer <google-id-token>",
        }
    },
}

# Serve the schema with the OpenAPI renderers only (no legacy "swagger" format names).
SWAGGER_USE_COMPAT_RENDERERS = False

MIDDLEWARE = [
    # CORS should be as high as possible
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serves static in prod
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "users.authentication.GoogleIDTokenAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.IsAuthenticated",
    ),
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "EXCEPTION_HANDLER": "announcements_backend.exceptions.service_exception_handler",
}

# Google OAuth (see users/oauth.py)
GOOGLE_OAUTH = {
    "CLIENT_ID": os.environ.get("GOOGLE_CLIENT_ID", ""),
    "CLIENT_SECRET": os.environ.get("GOOGLE_CLIENT_SECRET", ""),
    "REDIRECT_URL": os.environ.get("GOOGLE_REDIRECT_URL", ""),
    "AUTH_URI": "https://accounts.google.com/o/oauth2/v2/auth",
    "TOKEN_URI": "https://oauth2.googleapis.com/token",
    "SCOPES": [
        "https://www.googleapis.com/auth/userinfo.profile",
        "https://www.googleapis.com/auth/userinfo.email",
    ],
    "TIMEOUT": 15,
    # Without a client id only DEBUG accepts tokens minted for any client.
    "REQUIRE_AUDIENCE": not DEBUG,
}

ROOT_URLCONF = 'announcements_backend.urls'
WSGI_APPLICATION = 'announcements_backend.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]


# --- Database (DATABASE_URL when set; SQLite otherwise) ---
DB_URL = os.environ.get("DATABASE_URL", "").strip()
IS_POSTGRES = DB_URL.startswith("postgres://") or DB_URL.startswith("postgresql://")

if DB_URL:
    DATABASES = {
        "default": dj_database_url.parse(
            DB_URL,
            conn_max_age=600,
            ssl_require=IS_POSTGRES,  # only apply SSL flag for Postgres URLs
        )
    }
else:
    # Default to SQLite for local dev/CI
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django.request": {  # 500s, 404s with exceptions
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "announcements": {"handlers": ["console"], "level": LOG_LEVEL},
        "announcements_backend": {"handlers": ["console"], "level": LOG_LEVEL},
        "client_apps": {"handlers": ["console"], "level": LOG_LEVEL},
        "users": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}
