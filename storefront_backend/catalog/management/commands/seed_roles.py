# catalog/management/commands/seed_roles.py

from __future__ import annotations

from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from permissions.roles import ROLE_CAPABILITIES, STAFF_ROLES


class Command(BaseCommand):
    help = "Create the back-office role groups (admin, catalog_manager, merchandiser)."

    def handle(self, *args, **options):
        for role in sorted(STAFF_ROLES):
            _, created = Group.objects.get_or_create(name=role)
            caps = ", ".join(sorted(ROLE_CAPABILITIES.get(role, set())))
            status = "created" if created else "exists"
            self.stdout.write(f"{role:<16} {status:<8} {caps}")

        self.stdout.write(self.style.SUCCESS("✅ Role groups ready."))
