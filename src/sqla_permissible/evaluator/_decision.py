"""Decision and Outcome: the results of evaluating a post write."""

from __future__ import annotations

from dataclasses import dataclass, field

from sqla_permissible._types import DenialReason
from sqla_permissible.permissions._roles import Role

__all__ = ["Decision", "GuardResult", "Outcome"]


@dataclass(frozen=True, slots=True)
class Decision:
    """A successful authorization.

    Attributes:
        excluded_attrs: Attribute names the caller may not change. They
            must be dropped from the write before it is persisted.
        role: The role tier the decision was made for.

    Example::

        decision = evaluate(post, "edit", ctx, attrs, perms, False, True)
        clean = apply_exclusions(attrs, decision)
    """

    excluded_attrs: tuple[str, ...] = ()
    role: Role | None = None


@dataclass(frozen=True, slots=True)
class GuardResult:
    """Outcome of a single guard."""

    name: str
    passed: bool
    reads: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Outcome:
    """Full trace of one evaluation, shared by ``evaluate`` and explain.

    ``reason`` is ``None`` when the call is authorized.
    """

    role: Role
    unrestricted: bool
    trail: tuple[GuardResult, ...] = field(default_factory=tuple)
    reason: DenialReason | None = None
    excluded_attrs: tuple[str, ...] = ()

    @property
    def allowed(self) -> bool:
        return self.reason is None

    def to_decision(self) -> Decision:
        return Decision(excluded_attrs=self.excluded_attrs, role=self.role)
