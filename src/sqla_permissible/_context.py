"""PermissionContext: identifies who is asking."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PermissionContext"]


@dataclass(frozen=True, slots=True)
class PermissionContext:
    """The acting caller for one request.

    Attributes:
        user: Identifier of the acting user. Compared against a post's
            ``author_id`` for ownership checks.
        internal: ``True`` for calls made by the system itself rather
            than on behalf of a user.

    Example::

        ctx = PermissionContext(user=1)
    """

    user: int | str | None
    internal: bool = False

    def is_user(self, author_id: object) -> bool:
        """Return ``True`` if *author_id* identifies the acting user."""
        return self.user is not None and author_id == self.user
