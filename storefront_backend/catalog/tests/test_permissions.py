# catalog/tests/test_permissions.py

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.test import TestCase

from permissions.roles import (
    ALL_CAPABILITIES,
    CAP_CATALOG_EDIT,
    CAP_FEEDS_IMPORT,
    CAP_FEEDS_MANAGE,
    ROLE_MERCHANDISER,
    effective_capabilities_for,
    get_user_role,
)

User = get_user_model()


class CapabilityTests(TestCase):
    """
    GUARANTEES:
    - superusers get every capability
    - plain staff get catalog + feed management
    - group roles add capabilities to non-staff users
    - ordinary users get nothing
    """

    def test_superuser_gets_everything(self):
        user = User.objects.create_superuser(username="root", password="pass", email="root@example.com")
        self.assertEqual(effective_capabilities_for(user), ALL_CAPABILITIES)

    def test_staff_default_capabilities(self):
        user = User.objects.create_user(username="staff", password="pass", is_staff=True)
        caps = effective_capabilities_for(user)

        self.assertIn(CAP_CATALOG_EDIT, caps)
        self.assertIn(CAP_FEEDS_MANAGE, caps)

    def test_merchandiser_group_can_only_import(self):
        user = User.objects.create_user(username="merch", password="pass")
        user.groups.add(Group.objects.create(name=ROLE_MERCHANDISER))

        self.assertEqual(effective_capabilities_for(user), {CAP_FEEDS_IMPORT})
        self.assertEqual(get_user_role(user), ROLE_MERCHANDISER)

    def test_plain_user_has_no_capabilities(self):
        user = User.objects.create_user(username="shopper", password="pass")
        self.assertEqual(effective_capabilities_for(user), set())
        self.assertIsNone(get_user_role(user))
