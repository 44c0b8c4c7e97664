# backend/tests/test_prod_settings.py

import importlib
import sys
from unittest.mock import patch

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

PROD_MODULE = "backend.settings.prod"

VALID_ENV = {
    "SECRET_KEY": "a-long-random-production-secret",
    "ALLOWED_HOSTS": "shop.example.com",
    "DATABASE_URL": "postgres://store:pw@db:5432/store",
    "CORS_ALLOWED_ORIGINS": "https://shop.example.com",
    "CSRF_TRUSTED_ORIGINS": "https://shop.example.com",
    "FEED_FETCH_USER_AGENT": "ThornTechFeedImporter/1.0 (+https://shop.example.com)",
}


def load_prod(**overrides):
    env = {**VALID_ENV, **overrides}
    sys.modules.pop(PROD_MODULE, None)
    try:
        with patch.dict("os.environ", env):
            return importlib.import_module(PROD_MODULE)
    finally:
        sys.modules.pop(PROD_MODULE, None)


class ProdSettingsTests(SimpleTestCase):
    """
    GUARANTEES:
    - a fully configured environment loads
    - the hardening removed nothing the admin/session cookies rely on
    - feed pipeline limits fail closed
    """

    def test_valid_environment_loads(self):
        prod = load_prod()

        self.assertFalse(prod.DEBUG)
        self.assertTrue(prod.CSRF_COOKIE_HTTPONLY)
        self.assertEqual(prod.SECURE_CROSS_ORIGIN_OPENER_POLICY, "same-origin")
        self.assertEqual(prod.MIDDLEWARE[1], "whitenoise.middleware.WhiteNoiseMiddleware")

    def test_base_middleware_is_not_mutated(self):
        from backend.settings import base

        before = list(base.MIDDLEWARE)
        load_prod()
        self.assertEqual(base.MIDDLEWARE, before)

    def test_sqlite_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(DATABASE_URL="sqlite:///db.sqlite3")

    def test_localhost_origin_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(CORS_ALLOWED_ORIGINS="https://localhost:5173")

    def test_plain_http_origin_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(CSRF_TRUSTED_ORIGINS="http://shop.example.com")

    def test_fetch_timeout_bounded(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(FEED_FETCH_TIMEOUT_SECONDS="0")
        with self.assertRaises(ImproperlyConfigured):
            load_prod(FEED_FETCH_TIMEOUT_SECONDS="600")

    def test_placeholder_user_agent_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(FEED_FETCH_USER_AGENT="StorefrontFeedImporter/1.0 (+https://example.local)")

    def test_autostart_with_many_workers_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            load_prod(FEED_SCHEDULER_AUTOSTART="True", WEB_CONCURRENCY="4")

        prod = load_prod(FEED_SCHEDULER_AUTOSTART="True", WEB_CONCURRENCY="1")
        self.assertTrue(prod.FEED_SCHEDULER_AUTOSTART)
