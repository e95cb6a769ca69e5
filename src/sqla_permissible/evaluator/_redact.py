"""apply_exclusions(): drop attributes a decision excludes."""

from __future__ import annotations

from typing import Any

from sqla_permissible._types import UnsafeAttrs
from sqla_permissible.evaluator._decision import Decision

__all__ = ["apply_exclusions"]


def apply_exclusions(unsafe_attrs: UnsafeAttrs, decision: Decision) -> dict[str, Any]:
    """Return a copy of *unsafe_attrs* without the excluded attributes.

    Example::

        apply_exclusions({"title": "x", "tags": ["a"]}, Decision(("tags",)))
        # {"title": "x"}
    """
    excluded = set(decision.excluded_attrs)
    return {name: value for name, value in unsafe_attrs.items() if name not in excluded}
