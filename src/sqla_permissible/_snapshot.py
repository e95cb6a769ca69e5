"""ModelSnapshot: read-only ``get`` access to a SQLAlchemy instance."""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm.base import ATTR_EMPTY, NO_VALUE

from sqla_permissible._types import AttributeSource
from sqla_permissible.exceptions import UnloadedAttributeError

__all__ = ["AttributeSource", "EmptySnapshot", "ModelSnapshot", "as_attribute_source"]


class ModelSnapshot:
    """Adapts a mapped instance to the ``AttributeSource`` protocol.

    Each ``get`` reads the attribute's currently loaded value through the
    instance state. The snapshot never emits SQL, triggers a lazy load, or
    autoflushes, so an expired, deferred or never-loaded attribute raises
    :class:`UnloadedAttributeError` instead of reading as ``None``.

    With the default ``expire_on_commit=True`` every attribute is expired
    after ``session.commit()``; call ``session.refresh(instance)`` before
    snapshotting a post that was committed in the same session.

    Example::

        post = session.get(Post, 1)
        snapshot = ModelSnapshot(post)
        snapshot.get("status")  # "draft"
    """

    __slots__ = ("_state",)

    def __init__(self, instance: DeclarativeBase) -> None:
        self._state = sa_inspect(instance)

    def get(self, name: str) -> Any:
        attrs = self._state.attrs
        if name not in attrs:
            raise KeyError(f"{self._state.class_.__name__} has no attribute {name!r}")
        value = attrs[name].loaded_value
        if value is NO_VALUE or value is ATTR_EMPTY:
            raise UnloadedAttributeError(model=self._state.class_.__name__, attribute=name)
        return value

    def __repr__(self) -> str:
        return f"ModelSnapshot({self._state.class_.__name__}, identity={self._state.identity!r})"


class EmptySnapshot:
    """Stands in for a post that does not exist yet. Every attribute is ``None``."""

    __slots__ = ()

    def get(self, name: str) -> Any:
        return None

    def __repr__(self) -> str:
        return "EmptySnapshot()"


def as_attribute_source(resource: Any) -> AttributeSource:
    """Return *resource* as an ``AttributeSource``.

    Anything that already has ``get`` is returned unchanged, mapped
    SQLAlchemy instances are wrapped in :class:`ModelSnapshot`, and
    ``None`` becomes an :class:`EmptySnapshot`.

    Raises:
        TypeError: If *resource* is none of these.
    """
    if resource is None:
        return EmptySnapshot()
    if isinstance(resource, AttributeSource):
        return resource
    if sa_inspect(resource, raiseerr=False) is not None:
        return ModelSnapshot(resource)
    raise TypeError(
        f"{type(resource).__name__!r} is neither a mapped instance nor has a get() accessor"
    )
