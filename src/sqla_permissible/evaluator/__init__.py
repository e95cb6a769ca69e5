"""Permission evaluator: guards, tier policies and the evaluate() entry point."""

from sqla_permissible.evaluator._decision import Decision, GuardResult, Outcome
from sqla_permissible.evaluator._evaluate import evaluate, evaluate_async, run_evaluation
from sqla_permissible.evaluator._guards import Guard, PostWrite
from sqla_permissible.evaluator._redact import apply_exclusions
from sqla_permissible.evaluator._tiers import TierPolicy, policy_for

__all__ = [
    "Decision",
    "Guard",
    "GuardResult",
    "Outcome",
    "PostWrite",
    "TierPolicy",
    "apply_exclusions",
    "evaluate",
    "evaluate_async",
    "policy_for",
    "run_evaluation",
]
