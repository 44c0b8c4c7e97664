"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS (storefront behind a TLS-terminating proxy)

Fail-closed checks, grouped by concern:
- core:      SECRET_KEY, ALLOWED_HOSTS, Postgres DATABASE_URL
- origins:   CORS/CSRF explicit, https only, no localhost
- feeds:     fetch timeout bounded, a real User-Agent, scheduler owned by
             exactly one process
- transport: proxy SSL header, HSTS, hardened cookies, security headers

Static files are served by WhiteNoise (the admin is the only HTML surface).
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, env  # explicit for Ruff (F405)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ImproperlyConfigured(message)


DEBUG = False

# =========================================================
# CORE
# =========================================================
SECRET_KEY = (env("SECRET_KEY", default="") or "").strip()
_require(
    bool(SECRET_KEY) and SECRET_KEY != "dev-insecure-change-me",
    "SECRET_KEY must be set to a strong value in production.",
)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
_require(bool(ALLOWED_HOSTS), "ALLOWED_HOSTS must be set in production.")

_database_url = (env("DATABASE_URL", default="") or "").strip()
_require(bool(_database_url), "DATABASE_URL must be set in production.")
_require(
    not _database_url.startswith("sqlite"),
    "Refusing to start in production with SQLite DATABASE_URL "
    "(the feed scheduler and web workers write concurrently).",
)

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# =========================================================
# ORIGINS (storefront SPA -> API)
# =========================================================
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[])
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[])
CORS_ALLOW_CREDENTIALS = False

for _name, _origins in (
    ("CORS_ALLOWED_ORIGINS", CORS_ALLOWED_ORIGINS),
    ("CSRF_TRUSTED_ORIGINS", CSRF_TRUSTED_ORIGINS),
):
    _require(bool(_origins), f"{_name} must be set in production.")
    _require(
        not any("localhost" in o or "127.0.0.1" in o for o in _origins),
        f"Remove localhost from {_name} in production.",
    )
    _require(
        all(o.startswith("https://") for o in _origins),
        f"{_name} must be https:// in production.",
    )

# =========================================================
# FEED PIPELINE
# =========================================================
# Every scheduler tick fetches sources sequentially; an unbounded timeout
# would stall the whole tick behind one dead supplier.
FEED_FETCH_TIMEOUT_SECONDS = env.int("FEED_FETCH_TIMEOUT_SECONDS", default=30)
_require(
    1 <= FEED_FETCH_TIMEOUT_SECONDS <= 120,
    "FEED_FETCH_TIMEOUT_SECONDS must be between 1 and 120 in production.",
)

FEED_FETCH_USER_AGENT = (env("FEED_FETCH_USER_AGENT", default="") or "").strip()
_require(
    bool(FEED_FETCH_USER_AGENT) and "example.local" not in FEED_FETCH_USER_AGENT,
    "FEED_FETCH_USER_AGENT must identify the store (suppliers block anonymous bots).",
)

FEED_SCHEDULER_TICK_SECONDS = env.int("FEED_SCHEDULER_TICK_SECONDS", default=300)
_require(
    FEED_SCHEDULER_TICK_SECONDS >= 60,
    "FEED_SCHEDULER_TICK_SECONDS must be at least 60 in production.",
)

# One scheduler per deployment: either autostart inside a single-worker web
# process, or run `manage.py run_feed_scheduler` as its own service.
FEED_SCHEDULER_AUTOSTART = env.bool("FEED_SCHEDULER_AUTOSTART", default=False)
_require(
    not (FEED_SCHEDULER_AUTOSTART and env.int("WEB_CONCURRENCY", default=1) > 1),
    "FEED_SCHEDULER_AUTOSTART with WEB_CONCURRENCY > 1 would start one scheduler "
    "per worker; run `manage.py run_feed_scheduler` as a separate service instead.",
)

# =========================================================
# STATIC (WhiteNoise)
# =========================================================
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))

# New list: base.MIDDLEWARE is shared with any other settings module in-process.
MIDDLEWARE = [MIDDLEWARE[0], "whitenoise.middleware.WhiteNoiseMiddleware", *MIDDLEWARE[1:]]
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# =========================================================
# TRANSPORT / HEADERS
# =========================================================
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)

SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = "Lax"

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"
