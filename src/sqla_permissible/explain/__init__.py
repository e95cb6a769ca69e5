"""Explain/dry-run mode: structured insight into permissible decisions."""

from sqla_permissible.explain._models import GuardEvaluation, PermissibleExplanation
from sqla_permissible.explain._permissible import explain_permissible

__all__ = ["GuardEvaluation", "PermissibleExplanation", "explain_permissible"]
