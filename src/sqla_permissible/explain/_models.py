"""Data models for explain/dry-run output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["GuardEvaluation", "PermissibleExplanation"]


@dataclass(frozen=True, slots=True)
class GuardEvaluation:
    """Result of one guard during an explained evaluation.

    Attributes:
        name: Guard name.
        reads: Entity attributes the guard may read.
        passed: Whether the guard passed.
    """

    name: str
    reads: tuple[str, ...]
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {"name": self.name, "reads": list(self.reads), "passed": self.passed}


@dataclass(frozen=True, slots=True)
class PermissibleExplanation:
    """Explanation of why a post write is or is not permitted.

    Attributes:
        actor_repr: String representation of the acting user.
        action: The action being checked.
        role: Name of the resolved role tier.
        allowed: Whether the write is permitted.
        unrestricted: True if ``has_user_permission`` granted it outright.
        reason: Denial reason, or ``None`` when allowed.
        guards: Guards evaluated, in order, up to the first failure.
        excluded_attrs: Attributes that would be dropped from the write.
    """

    actor_repr: str
    action: str
    role: str
    allowed: bool
    unrestricted: bool
    reason: str | None
    guards: list[GuardEvaluation]
    excluded_attrs: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "actor_repr": self.actor_repr,
            "action": self.action,
            "role": self.role,
            "allowed": self.allowed,
            "unrestricted": self.unrestricted,
            "reason": self.reason,
            "guards": [g.to_dict() for g in self.guards],
            "excluded_attrs": list(self.excluded_attrs),
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line explanation."""
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines: list[str] = []
        lines.append(f"Permissible Check: {verdict}")
        lines.append(f"  Actor: {self.actor_repr}")
        lines.append(f"  Action: Post.{self.action}")
        lines.append(f"  Role: {self.role}")
        lines.append("")
        if self.unrestricted:
            lines.append("  UNRESTRICTED (user permission already granted)")
        elif not self.guards:
            lines.append("  No guards evaluated")
        else:
            lines.append("  Guards:")
            for g in self.guards:
                status = "PASS" if g.passed else "FAIL"
                reads = ", ".join(g.reads) if g.reads else "-"
                lines.append(f"    - {g.name} [{status}] reads: {reads}")
        if self.reason is not None:
            lines.append(f"  Reason: {self.reason}")
        if self.excluded_attrs:
            lines.append(f"  Excluded: {', '.join(self.excluded_attrs)}")
        return "\n".join(lines)
