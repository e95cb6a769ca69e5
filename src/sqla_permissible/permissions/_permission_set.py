"""PermissionSet: the caller's resolved roles and allowed actions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = [
    "ADMINISTRATOR",
    "AUTHOR",
    "CONTRIBUTOR",
    "EDITOR",
    "OWNER",
    "PermissionSet",
    "admin_permissions",
    "author_permissions",
    "contributor_permissions",
    "editor_permissions",
]

OWNER = "Owner"
ADMINISTRATOR = "Administrator"
EDITOR = "Editor"
AUTHOR = "Author"
CONTRIBUTOR = "Contributor"

_WRITE_ACTIONS = frozenset({"add", "edit", "destroy"})


@dataclass(frozen=True, slots=True)
class PermissionSet:
    """The caller's permissions for the Post entity type.

    Produced by the role/permission resolver of the surrounding system.
    The evaluator only asks two questions of it: which role tier it
    belongs to, and whether an exact action is contained in it.

    Attributes:
        roles: Role names held by the caller (e.g. ``"Contributor"``).
        actions: Actions the caller's roles allow on posts.

    Example::

        perms = PermissionSet(roles={"Author"}, actions={"add", "edit"})
        assert "edit" in perms
        assert perms.has_role("Author")
    """

    roles: frozenset[str] = field(default_factory=frozenset)
    actions: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "roles", frozenset(self.roles))
        object.__setattr__(self, "actions", frozenset(self.actions))

    def __contains__(self, action: object) -> bool:
        return action in self.actions

    def has_role(self, name: str) -> bool:
        """Return ``True`` if the caller holds the role *name*."""
        return name in self.roles


def _make(roles: Iterable[str], actions: Iterable[str] = _WRITE_ACTIONS) -> PermissionSet:
    return PermissionSet(roles=frozenset(roles), actions=frozenset(actions))


def contributor_permissions() -> PermissionSet:
    """Permission set of a contributor."""
    return _make([CONTRIBUTOR])


def author_permissions() -> PermissionSet:
    """Permission set of an author."""
    return _make([AUTHOR])


def editor_permissions() -> PermissionSet:
    """Permission set of an editor."""
    return _make([EDITOR])


def admin_permissions() -> PermissionSet:
    """Permission set of an administrator."""
    return _make([ADMINISTRATOR])
