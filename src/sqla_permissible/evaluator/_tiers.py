"""Per-tier guard lists.

The order of every tuple below is part of the contract: evaluation stops
at the first failing guard, so the order fixes which attributes are read
for each outcome.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqla_permissible.config._config import PermissibleConfig
from sqla_permissible.evaluator._guards import (
    ASSIGNS_SELF,
    AUTHOR_UNCHANGED,
    IS_DRAFT,
    IS_OWNER,
    NOT_PUBLISHED,
    NOT_PUBLISHING,
    STATUS_UNCHANGED,
    Guard,
)
from sqla_permissible.permissions._roles import Author, Contributor, Other, Role

__all__ = ["TierPolicy", "policy_for"]

_CONTRIBUTOR_GUARDS: dict[str, tuple[Guard, ...]] = {
    "add": (NOT_PUBLISHING, ASSIGNS_SELF),
    "edit": (STATUS_UNCHANGED, AUTHOR_UNCHANGED, IS_DRAFT, IS_OWNER),
    "destroy": (IS_OWNER, NOT_PUBLISHED),
}

_AUTHOR_GUARDS: dict[str, tuple[Guard, ...]] = {
    "add": (ASSIGNS_SELF,),
    "edit": (IS_OWNER, AUTHOR_UNCHANGED),
    "destroy": (IS_OWNER,),
}

# Ownership is still checked for the denial reason, but never grants.
_OTHER_GUARDS: tuple[Guard, ...] = (IS_OWNER,)


@dataclass(frozen=True, slots=True)
class TierPolicy:
    """What a role tier requires for one action.

    Attributes:
        guards: Checks to run, in order.
        grants: Whether passing every guard authorizes the call.
        excluded_attrs: Attributes dropped from the write on success.
    """

    guards: tuple[Guard, ...]
    grants: bool
    excluded_attrs: tuple[str, ...] = ()


def policy_for(role: Role, action: str, config: PermissibleConfig) -> TierPolicy | None:
    """Return the policy for *role* and *action*, or ``None`` if the tier
    has no rule for the action (which denies it).

    Other tiers only ever reach here with ``has_user_permission=False``;
    their ownership guard runs but never grants.
    """
    if isinstance(role, Contributor):
        guards = _CONTRIBUTOR_GUARDS.get(action)
        if guards is None:
            return None
        return TierPolicy(guards, True, config.contributor_excluded_attrs)
    if isinstance(role, Author):
        guards = _AUTHOR_GUARDS.get(action)
        if guards is None:
            return None
        return TierPolicy(guards, True)
    if isinstance(role, Other):
        return TierPolicy(_OTHER_GUARDS, False)
    raise TypeError(f"Unknown role tier: {role!r}")
