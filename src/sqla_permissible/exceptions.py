"""Exception hierarchy for sqla-permissible."""

from __future__ import annotations

from sqla_permissible._types import DenialReason

__all__ = [
    "NoPermissionError",
    "PermissibleError",
    "UnloadedAttributeError",
]

_REASON_MESSAGES: dict[str, str] = {
    "publishing_not_allowed": "You do not have permission to publish this post",
    "changing_status": "You do not have permission to change the status of this post",
    "changing_author": "You do not have permission to change the author of this post",
    "assigning_other_author": "You do not have permission to add posts for another author",
    "not_draft": "You may only edit draft posts",
    "not_owner": "You do not have permission to modify another author's post",
    "destroying_published": "You do not have permission to delete a published post",
    "action_not_allowed": "You do not have permission to perform this action",
    "not_permitted": "You do not have permission to perform this action",
    "api_key_not_permitted": "The API key does not have permission to perform this action",
    "attribute_not_loaded": "The post could not be checked because it is not fully loaded",
}


class PermissibleError(Exception):
    """Base exception for all sqla-permissible errors."""


class NoPermissionError(PermissibleError):
    """Actor is not permitted to perform the requested write.

    This is the only denial error. ``reason`` explains which guard
    rejected the call and is meant for logs and messages; callers must
    not branch on it.

    Attributes:
        actor: Identifier of the acting user.
        action: The action that was attempted.
        resource_type: The type of resource involved.
        reason: Short code naming the rejected guard.

    Example::

        try:
            evaluate(post, "edit", ctx, attrs, perms, False, True)
        except NoPermissionError as exc:
            logger.info("denied %s: %s", exc.action, exc.reason)
    """

    def __init__(
        self,
        *,
        actor: object,
        action: str,
        resource_type: str = "Post",
        reason: DenialReason = "not_permitted",
        message: str | None = None,
    ) -> None:
        self.actor = actor
        self.action = action
        self.resource_type = resource_type
        self.reason = reason
        if message is None:
            message = _REASON_MESSAGES.get(reason, _REASON_MESSAGES["not_permitted"])
        super().__init__(message)


class UnloadedAttributeError(PermissibleError):
    """Attribute was not loaded and cannot be checked.

    Raised by :class:`~sqla_permissible.ModelSnapshot` when a guard reads
    an expired, deferred or never-loaded column. The evaluator turns it
    into a denial unless ``on_unloaded_attribute`` is ``"raise"``.

    Attributes:
        model: The model class name.
        attribute: The name of the unloaded attribute.
    """

    def __init__(self, *, model: str, attribute: str) -> None:
        self.model = model
        self.attribute = attribute
        super().__init__(
            f"Attribute '{attribute}' on {model} is not loaded. "
            f"Refresh the instance before checking permissions or set "
            f"on_unloaded_attribute='deny'."
        )
