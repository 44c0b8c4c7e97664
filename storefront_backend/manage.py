"""
PATH: manage.py

Django management entrypoint.

Key safeguard:
- If DJANGO_SETTINGS_MODULE is unset OR incorrectly set to the settings *package*
  ("backend.settings"), we force it to a concrete module ("backend.settings.dev").

Production:
- Production must set DJANGO_SETTINGS_MODULE=backend.settings.prod explicitly.

Admin bootstrap hook:
- If RUN_CREATE_SUPERUSER=True is set, a superuser is created from
  AUTO_ADMIN_USERNAME / AUTO_ADMIN_EMAIL / AUTO_ADMIN_PASSWORD (if not existing).
"""

from __future__ import annotations

import os
import sys


def _ensure_settings_module() -> None:
    current = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()

    # The settings package itself loads nothing.
    if not current or current == "backend.settings":
        os.environ["DJANGO_SETTINGS_MODULE"] = "backend.settings.dev"


def _create_superuser_if_requested() -> None:
    if os.environ.get("RUN_CREATE_SUPERUSER") != "True":
        return

    password = os.environ.get("AUTO_ADMIN_PASSWORD")
    if not password:
        print("RUN_CREATE_SUPERUSER set without AUTO_ADMIN_PASSWORD; skipping.")
        return

    import django

    django.setup()

    from django.contrib.auth import get_user_model

    User = get_user_model()

    username = os.environ.get("AUTO_ADMIN_USERNAME", "admin")
    email = os.environ.get("AUTO_ADMIN_EMAIL", "")

    if not User.objects.filter(username=username).exists():
        User.objects.create_superuser(username=username, email=email, password=password)
        print("✔ Superuser created.")
    else:
        print("✔ Superuser already exists.")


def main() -> None:
    _ensure_settings_module()

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    _create_superuser_if_requested()

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
