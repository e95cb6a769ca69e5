"""Shared protocols and type aliases for sqla-permissible."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Protocol, runtime_checkable

__all__ = [
    "AttributeSource",
    "DenialReason",
    "OnDenied",
    "OnUnloadedAttribute",
    "UnsafeAttrs",
]

# Why a call was denied. For logs and messages only, never for branching.
DenialReason = Literal[
    "publishing_not_allowed",
    "changing_status",
    "changing_author",
    "assigning_other_author",
    "not_draft",
    "not_owner",
    "destroying_published",
    "action_not_allowed",
    "not_permitted",
    "api_key_not_permitted",
    "attribute_not_loaded",
]

# Valid values for PermissibleConfig.on_denied.
OnDenied = Literal["raise", "log"]

# Valid values for PermissibleConfig.on_unloaded_attribute.
OnUnloadedAttribute = Literal["deny", "raise", "warn"]

# Raw attribute changes requested by the caller.
UnsafeAttrs = Mapping[str, Any]


@runtime_checkable
class AttributeSource(Protocol):
    """Structural type for an entity snapshot.

    Anything with a ``get(name)`` accessor satisfies this protocol: a
    :class:`~sqla_permissible.ModelSnapshot`, a test double, or
    an ORM row that already exposes ``get``.

    Example::

        class Row:
            def __init__(self, **values):
                self._values = values

            def get(self, name):
                return self._values.get(name)

        assert isinstance(Row(status="draft"), AttributeSource)
    """

    def get(self, name: str) -> Any: ...
