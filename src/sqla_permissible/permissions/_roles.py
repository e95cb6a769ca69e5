"""Role tiers: the explicit variant the evaluator dispatches on."""

from __future__ import annotations

from dataclasses import dataclass

from sqla_permissible.permissions._permission_set import AUTHOR, CONTRIBUTOR, PermissionSet

__all__ = ["Author", "Contributor", "Other", "Role", "resolve_role"]


@dataclass(frozen=True, slots=True)
class Contributor:
    """May only write their own drafts. Tag changes are always dropped."""

    name = "contributor"


@dataclass(frozen=True, slots=True)
class Author:
    """May write their own posts but never reassign authorship."""

    name = "author"


@dataclass(frozen=True, slots=True)
class Other:
    """Any other role (editor, administrator, ...).

    Access is decided solely by the externally resolved
    ``has_user_permission`` flag.
    """

    has_user_permission: bool = False
    name = "other"


Role = Contributor | Author | Other


def resolve_role(permission_set: PermissionSet, has_user_permission: bool) -> Role:
    """Map a permission set onto its role tier.

    A contributor role wins over an author role when both are present,
    so the most restricted tier always applies.

    Example::

        resolve_role(contributor_permissions(), False)  # Contributor()
        resolve_role(editor_permissions(), True)  # Other(has_user_permission=True)
    """
    if permission_set.has_role(CONTRIBUTOR):
        return Contributor()
    if permission_set.has_role(AUTHOR):
        return Author()
    return Other(has_user_permission=has_user_permission)
