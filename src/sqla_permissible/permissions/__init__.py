"""Role tiers and resolved permission sets."""

from sqla_permissible.permissions._permission_set import (
    PermissionSet,
    admin_permissions,
    author_permissions,
    contributor_permissions,
    editor_permissions,
)
from sqla_permissible.permissions._roles import Author, Contributor, Other, Role, resolve_role

__all__ = [
    "Author",
    "Contributor",
    "Other",
    "PermissionSet",
    "Role",
    "admin_permissions",
    "author_permissions",
    "contributor_permissions",
    "editor_permissions",
    "resolve_role",
]
