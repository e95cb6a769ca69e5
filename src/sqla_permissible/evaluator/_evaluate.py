"""evaluate(): the permissible check for Post writes."""

from __future__ import annotations

from sqla_permissible._audit import log_decision, log_denial, log_unloaded_attribute
from sqla_permissible._context import PermissionContext
from sqla_permissible._types import AttributeSource, UnsafeAttrs
from sqla_permissible.config._config import PermissibleConfig, get_global_config
from sqla_permissible.evaluator._decision import Decision, GuardResult, Outcome
from sqla_permissible.evaluator._guards import PostWrite
from sqla_permissible.evaluator._tiers import policy_for
from sqla_permissible.exceptions import NoPermissionError, UnloadedAttributeError
from sqla_permissible.permissions._permission_set import PermissionSet
from sqla_permissible.permissions._roles import resolve_role

__all__ = ["evaluate", "evaluate_async", "run_evaluation"]

RESOURCE_TYPE = "Post"


def run_evaluation(
    entity: AttributeSource,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    config: PermissibleConfig,
) -> Outcome:
    """Evaluate a write and return its full ``Outcome`` without raising.

    The steps, in order:

    1. ``has_user_permission`` grants immediately; nothing is read.
    2. An *action* missing from *permission_set* is denied; nothing is read.
    3. The role tier is resolved from *permission_set* and its guards
       for *action* run in order, stopping at the first failure.
    4. A tier that grants still needs ``has_api_key_permission``.

    A guard that reads an unloaded attribute fails, unless
    ``config.on_unloaded_attribute`` is ``"raise"``.

    Raises:
        UnloadedAttributeError: If a guard reads an unloaded attribute
            and ``on_unloaded_attribute`` is ``"raise"``.
    """
    role = resolve_role(permission_set, has_user_permission)

    if has_user_permission:
        return Outcome(role=role, unrestricted=True)

    if action not in permission_set:
        return Outcome(role=role, unrestricted=False, reason="action_not_allowed")

    policy = policy_for(role, action, config)
    if policy is None:
        return Outcome(role=role, unrestricted=False, reason="action_not_allowed")

    write = PostWrite(
        entity=entity,
        action=action,
        context=context,
        unsafe_attrs=unsafe_attrs,
        config=config,
    )
    trail: list[GuardResult] = []
    for guard in policy.guards:
        try:
            passed = guard(write)
        except UnloadedAttributeError as exc:
            if config.on_unloaded_attribute == "raise":
                raise
            if config.on_unloaded_attribute == "warn":
                log_unloaded_attribute(model=exc.model, attribute=exc.attribute)
            trail.append(GuardResult(guard.name, False, guard.reads))
            return Outcome(
                role=role,
                unrestricted=False,
                trail=tuple(trail),
                reason="attribute_not_loaded",
            )
        trail.append(GuardResult(guard.name, passed, guard.reads))
        if not passed:
            return Outcome(role=role, unrestricted=False, trail=tuple(trail), reason=guard.reason)

    if not policy.grants:
        return Outcome(role=role, unrestricted=False, trail=tuple(trail), reason="not_permitted")
    if not has_api_key_permission:
        return Outcome(
            role=role, unrestricted=False, trail=tuple(trail), reason="api_key_not_permitted"
        )
    return Outcome(
        role=role,
        unrestricted=False,
        trail=tuple(trail),
        excluded_attrs=policy.excluded_attrs,
    )


def evaluate(
    entity: AttributeSource,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    *,
    config: PermissibleConfig | None = None,
) -> Decision:
    """Decide whether *context* may perform *action* on a post.

    Returns a :class:`Decision` whose ``excluded_attrs`` must be stripped
    from the write. Raises :class:`NoPermissionError` otherwise.

    Entity attributes are read lazily and only on the path taken, so the
    number of ``entity.get`` calls depends on where evaluation stops.
    None of the inputs are mutated and no state survives the call.

    Args:
        entity: Snapshot of the post before the change.
        action: ``"add"``, ``"edit"`` or ``"destroy"``.
        context: The acting caller.
        unsafe_attrs: Attribute changes requested by the caller.
        permission_set: The caller's resolved permissions.
        has_user_permission: ``True`` when a role check upstream already
            granted unrestricted access for this action.
        has_api_key_permission: Whether the API key used for the request,
            if any, allows the action.
        config: Optional per-call config. Defaults to the global config.

    Raises:
        NoPermissionError: If the write is not permitted.
        UnloadedAttributeError: If a guard reads an unloaded attribute of
            a mapped instance and ``on_unloaded_attribute`` is ``"raise"``.

    Example::

        decision = evaluate(
            ModelSnapshot(post), "edit", PermissionContext(user=1),
            {"title": "New"}, contributor_permissions(), False, True,
        )
        decision.excluded_attrs  # ("tags",)
    """
    cfg = config if config is not None else get_global_config()
    outcome = run_evaluation(
        entity,
        action,
        context,
        unsafe_attrs,
        permission_set,
        has_user_permission,
        has_api_key_permission,
        cfg,
    )

    if cfg.log_decisions:
        log_decision(action=action, actor=context.user, outcome=outcome)

    if outcome.reason is not None:
        if cfg.on_denied == "log":
            log_denial(action=action, actor=context.user, reason=outcome.reason)
        raise NoPermissionError(
            actor=context.user,
            action=action,
            resource_type=RESOURCE_TYPE,
            reason=outcome.reason,
        )
    return outcome.to_decision()


async def evaluate_async(
    entity: AttributeSource,
    action: str,
    context: PermissionContext,
    unsafe_attrs: UnsafeAttrs,
    permission_set: PermissionSet,
    has_user_permission: bool,
    has_api_key_permission: bool,
    *,
    config: PermissibleConfig | None = None,
) -> Decision:
    """Coroutine form of :func:`evaluate` for async request pipelines.

    Performs no I/O; a denial surfaces as ``NoPermissionError`` when awaited.
    """
    return evaluate(
        entity,
        action,
        context,
        unsafe_attrs,
        permission_set,
        has_user_permission,
        has_api_key_permission,
        config=config,
    )
