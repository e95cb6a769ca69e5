"""explain_permissible(): dry-run a post write and report each guard."""

from __future__ import annotations

from typing import Any

from sqla_permissible._context import PermissionContext
from sqla_permissible._snapshot import as_attribute_source
from sqla_permissible._types import UnsafeAttrs
from sqla_permissible.config._config import PermissibleConfig, get_global_config
from sqla_permissible.evaluator._evaluate import run_evaluation
from sqla_permissible.explain._models import GuardEvaluation, PermissibleExplanation
from sqla_permissible.permissions._permission_set import PermissionSet

__all__ = ["explain_permissible"]


def explain_permissible(
    resource: Any,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    *,
    config: PermissibleConfig | None = None,
) -> PermissibleExplanation:
    """Explain the decision :func:`~sqla_permissible.evaluate` would make.

    Runs the same guards in the same order, so the entity is read exactly
    as often as a real evaluation would read it. Never raises
    ``NoPermissionError`` and never logs the decision.

    Example::

        explanation = explain_permissible(post, "edit", ctx, attrs, perms, False, True)
        print(explanation)
    """
    cfg = config if config is not None else get_global_config()
    outcome = run_evaluation(
        as_attribute_source(resource),
        action,
        context,
        unsafe_attrs,
        permission_set,
        has_user_permission,
        has_api_key_permission,
        cfg,
    )
    return PermissibleExplanation(
        actor_repr=repr(context.user),
        action=action,
        role=outcome.role.name,
        allowed=outcome.allowed,
        unrestricted=outcome.unrestricted,
        reason=outcome.reason,
        guards=[GuardEvaluation(g.name, g.reads, g.passed) for g in outcome.trail],
        excluded_attrs=list(outcome.excluded_attrs),
    )
