"""Point checks: permissible() and can_write() for a single post."""

from __future__ import annotations

from typing import Any

from sqla_permissible._context import PermissionContext
from sqla_permissible._snapshot import as_attribute_source
from sqla_permissible._types import UnsafeAttrs
from sqla_permissible.config._config import PermissibleConfig
from sqla_permissible.evaluator._decision import Decision
from sqla_permissible.evaluator._evaluate import evaluate
from sqla_permissible.exceptions import NoPermissionError
from sqla_permissible.permissions._permission_set import PermissionSet

__all__ = ["can_write", "permissible"]


def permissible(
    resource: Any,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    *,
    config: PermissibleConfig | None = None,
) -> Decision:
    """Authorize a write to *resource*, raising on denial.

    *resource* may be a mapped SQLAlchemy instance, which is read through
    a :class:`~sqla_permissible.ModelSnapshot`, an object with a
    ``get(name)`` accessor, or ``None`` when adding a post that does not
    exist yet.

    Mapped instances are never loaded here: an attribute a guard needs must
    already be loaded. After ``session.commit()`` with the default
    ``expire_on_commit=True`` every attribute is expired, so call
    ``session.refresh(post)`` before checking a post again in the same
    session. An unloaded attribute denies the write with reason
    ``"attribute_not_loaded"`` (see ``on_unloaded_attribute``).

    Raises:
        NoPermissionError: If the write is not permitted.
        UnloadedAttributeError: If a guard reads an unloaded attribute and
            ``on_unloaded_attribute`` is ``"raise"``.

    Example::

        decision = permissible(post, "edit", ctx, payload, perms, False, True)
        for name, value in apply_exclusions(payload, decision).items():
            setattr(post, name, value)
        session.commit()
        session.refresh(post)  # before checking post again
    """
    return evaluate(
        as_attribute_source(resource),
        action,
        context,
        unsafe_attrs,
        permission_set,
        has_user_permission,
        has_api_key_permission,
        config=config,
    )


def can_write(
    resource: Any,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    *,
    config: PermissibleConfig | None = None,
) -> bool:
    """Return ``True`` if :func:`permissible` would allow the write."""
    try:
        permissible(
            resource,
            action,
            context,
            unsafe_attrs,
            permission_set,
            has_user_permission,
            has_api_key_permission,
            config=config,
        )
    except NoPermissionError:
        return False
    return True
