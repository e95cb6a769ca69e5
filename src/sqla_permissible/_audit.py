"""Audit logging for permissible decisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqla_permissible.evaluator._decision import Outcome

__all__ = ["log_decision", "log_denial", "log_unloaded_attribute"]

logger = logging.getLogger("sqla_permissible")


def log_decision(*, action: str, actor: object, outcome: Outcome) -> None:
    """Log a permissible decision.

    Logging levels:
    - INFO: Summary (action, actor, role tier, result)
    - DEBUG: Guard trail (each guard evaluated and whether it passed)
    """
    verdict = "allowed" if outcome.allowed else f"denied ({outcome.reason})"
    logger.info(
        "Permissible: Post.%s by %r as %s: %s",
        action,
        actor,
        outcome.role.name,
        verdict,
    )

    if logger.isEnabledFor(logging.DEBUG):
        if outcome.unrestricted:
            trail = "unrestricted"
        else:
            trail = ", ".join(
                f"{g.name}={'pass' if g.passed else 'fail'}" for g in outcome.trail
            )
        logger.debug(
            "Guards for Post.%s: %s (excluded: %s)",
            action,
            trail or "<none>",
            list(outcome.excluded_attrs),
        )


def log_denial(*, action: str, actor: object, reason: str) -> None:
    """Log a denial at WARNING on the ``sqla_permissible.denied`` logger."""
    denied_logger = logging.getLogger("sqla_permissible.denied")
    denied_logger.warning("DENIED Post.%s actor=%r reason=%s", action, actor, reason)


def log_unloaded_attribute(*, model: str, attribute: str) -> None:
    """Log a guard read of an unloaded attribute at WARNING."""
    logger.warning(
        "Attribute '%s' on %s is not loaded; defaulting to deny.",
        attribute,
        model,
    )
