"""Guard clauses: the individual checks a post write must pass.

Each guard reads the entity snapshot lazily, at most once per attribute
listed in ``reads``, and only when its ``check`` runs. Guards never
cache: two guards reading the same attribute perform two reads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqla_permissible._context import PermissionContext
from sqla_permissible._types import AttributeSource, DenialReason, UnsafeAttrs
from sqla_permissible.config._config import PermissibleConfig

__all__ = [
    "ASSIGNS_SELF",
    "AUTHOR_UNCHANGED",
    "Guard",
    "IS_DRAFT",
    "IS_OWNER",
    "NOT_PUBLISHED",
    "NOT_PUBLISHING",
    "PostWrite",
    "STATUS_UNCHANGED",
]


@dataclass(frozen=True, slots=True)
class PostWrite:
    """The inputs of a single evaluation, shared by every guard.

    Attributes:
        entity: Snapshot of the post before the change.
        action: The requested action.
        context: The acting caller.
        unsafe_attrs: Attribute changes requested by the caller.
        config: Resolved configuration for this call.
    """

    entity: AttributeSource
    action: str
    context: PermissionContext
    unsafe_attrs: UnsafeAttrs
    config: PermissibleConfig

    def is_changing(self, attr: str) -> bool:
        """Return ``True`` if *attr* is requested and differs from the entity.

        Reads the entity only when *attr* is part of the request.
        """
        if attr not in self.unsafe_attrs:
            return False
        return self.unsafe_attrs[attr] != self.entity.get(attr)


@dataclass(frozen=True, slots=True)
class Guard:
    """A named check with the denial reason it produces.

    Attributes:
        name: Identifier used in logs and explanations.
        reason: Denial reason raised when ``check`` fails.
        reads: Entity attributes the check may read, in order.
        check: Returns ``True`` when the write passes.
    """

    name: str
    reason: DenialReason
    reads: tuple[str, ...]
    check: Callable[[PostWrite], bool]

    def __call__(self, write: PostWrite) -> bool:
        return self.check(write)


def _not_publishing(write: PostWrite) -> bool:
    return write.unsafe_attrs.get("status") != write.config.published_status


def _assigns_self(write: PostWrite) -> bool:
    if "author_id" not in write.unsafe_attrs:
        return True
    return write.context.is_user(write.unsafe_attrs["author_id"])


def _status_unchanged(write: PostWrite) -> bool:
    return not write.is_changing("status")


def _author_unchanged(write: PostWrite) -> bool:
    return not write.is_changing("author_id")


def _is_draft(write: PostWrite) -> bool:
    return write.entity.get("status") == write.config.draft_status


def _is_owner(write: PostWrite) -> bool:
    return write.context.is_user(write.entity.get("author_id"))


def _not_published(write: PostWrite) -> bool:
    return write.entity.get("status") != write.config.published_status


# Requested status is not the published status. No reads.
NOT_PUBLISHING = Guard("not_publishing", "publishing_not_allowed", (), _not_publishing)

# Requested author_id, if any, is the caller. No reads.
ASSIGNS_SELF = Guard("assigns_self", "assigning_other_author", (), _assigns_self)

# Requested status, if any, equals the current status. Reads status when requested.
STATUS_UNCHANGED = Guard("status_unchanged", "changing_status", ("status",), _status_unchanged)

# Requested author_id, if any, equals the current author. Reads author_id when requested.
AUTHOR_UNCHANGED = Guard(
    "author_unchanged", "changing_author", ("author_id",), _author_unchanged
)

# Current status is draft. Reads status.
IS_DRAFT = Guard("is_draft", "not_draft", ("status",), _is_draft)

# Current author is the caller. Reads author_id.
IS_OWNER = Guard("is_owner", "not_owner", ("author_id",), _is_owner)

# Current status is not published. Reads status.
NOT_PUBLISHED = Guard("not_published", "destroying_published", ("status",), _not_published)
