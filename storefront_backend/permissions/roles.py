# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS (BACK-OFFICE JOB ROLES)
# =========================================================
# Roles are Django auth groups with these names.
ROLE_ADMIN = "admin"
ROLE_CATALOG_MANAGER = "catalog_manager"
ROLE_MERCHANDISER = "merchandiser"

STAFF_ROLES = {
    ROLE_ADMIN,
    ROLE_CATALOG_MANAGER,
    ROLE_MERCHANDISER,
}


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
# Views should protect capabilities, not raw roles.
CAP_CATALOG_EDIT = "catalog.edit"
CAP_FEEDS_MANAGE = "feeds.manage"
CAP_FEEDS_IMPORT = "feeds.import"

ALL_CAPABILITIES = {
    CAP_CATALOG_EDIT,
    CAP_FEEDS_MANAGE,
    CAP_FEEDS_IMPORT,
}


# =========================================================
# ROLE → CAPABILITY MAP (DEFAULT)
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_ADMIN: {
        *ALL_CAPABILITIES,
    },
    ROLE_CATALOG_MANAGER: {
        CAP_CATALOG_EDIT,
        CAP_FEEDS_MANAGE,
        CAP_FEEDS_IMPORT,
    },
    ROLE_MERCHANDISER: {
        # can pull supplier feeds in, but not reconfigure scheduled sources
        CAP_FEEDS_IMPORT,
    },
}

# Plain is_staff accounts (no group) get the catalog manager set.
STAFF_DEFAULT_CAPABILITIES = ROLE_CAPABILITIES[ROLE_CATALOG_MANAGER]


# =========================================================
# Helpers
# =========================================================
def get_user_roles(user) -> set[str]:
    if not user or not getattr(user, "is_authenticated", False):
        return set()
    names = set(user.groups.values_list("name", flat=True))
    return names & STAFF_ROLES


def get_user_role(user) -> Optional[str]:
    """
    Single "headline" role for display purposes (highest privilege first).
    """
    roles = get_user_roles(user)
    for role in (ROLE_ADMIN, ROLE_CATALOG_MANAGER, ROLE_MERCHANDISER):
        if role in roles:
            return role
    return None


def effective_capabilities_for(user) -> set[str]:
    """
    Superusers get everything; staff get the default set; groups add on top.
    """
    if not user or not getattr(user, "is_authenticated", False):
        return set()

    if getattr(user, "is_superuser", False):
        return set(ALL_CAPABILITIES)

    caps: set[str] = set()
    if getattr(user, "is_staff", False):
        caps |= STAFF_DEFAULT_CAPABILITIES

    for role in get_user_roles(user):
        caps |= ROLE_CAPABILITIES.get(role, set())

    return caps


# =========================================================
# Capability Permissions
# =========================================================
class HasCapability(BasePermission):
    """
    Require a specific capability.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        view.required_capability = CAP_FEEDS_MANAGE
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_capability", None)
        if not required:
            # deny-by-default
            return False

        return required in effective_capabilities_for(user)


class HasAnyCapability(BasePermission):
    """
    Require ANY capability from a list.

    Usage:
        view.required_any_capabilities = {CAP_FEEDS_MANAGE, CAP_FEEDS_IMPORT}
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_any_capabilities", None)
        if not required:
            return False

        caps = effective_capabilities_for(user)
        return any(cap in caps for cap in set(required))
