"""sqla-permissible: attribute-level write authorization for posts.

Decides whether a caller may add, edit or destroy a post, and which
requested attribute changes must be dropped before the write is saved.
Role tier, ownership and status transitions are checked with the fewest
possible reads of the post.

Example::

    from sqla_permissible import PermissionContext, apply_exclusions, permissible

    decision = permissible(
        post, "edit", PermissionContext(user=current_user.id),
        payload, contributor_permissions(), False, True,
    )
    for name, value in apply_exclusions(payload, decision).items():
        setattr(post, name, value)
"""

from importlib.metadata import PackageNotFoundError, version

from sqla_permissible._checks import can_write, permissible
from sqla_permissible._context import PermissionContext
from sqla_permissible._snapshot import EmptySnapshot, ModelSnapshot
from sqla_permissible._types import AttributeSource
from sqla_permissible.config._config import PermissibleConfig, configure
from sqla_permissible.evaluator._decision import Decision
from sqla_permissible.evaluator._evaluate import evaluate, evaluate_async
from sqla_permissible.evaluator._redact import apply_exclusions
from sqla_permissible.exceptions import (
    NoPermissionError,
    PermissibleError,
    UnloadedAttributeError,
)
from sqla_permissible.explain._permissible import explain_permissible
from sqla_permissible.permissions._permission_set import (
    PermissionSet,
    admin_permissions,
    author_permissions,
    contributor_permissions,
    editor_permissions,
)
from sqla_permissible.permissions._roles import Author, Contributor, Other, resolve_role

try:
    __version__ = version("sqla-permissible")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "AttributeSource",
    "Author",
    "Contributor",
    "Decision",
    "EmptySnapshot",
    "ModelSnapshot",
    "NoPermissionError",
    "Other",
    "PermissibleConfig",
    "PermissibleError",
    "PermissionContext",
    "PermissionSet",
    "UnloadedAttributeError",
    "admin_permissions",
    "apply_exclusions",
    "author_permissions",
    "can_write",
    "configure",
    "contributor_permissions",
    "editor_permissions",
    "evaluate",
    "evaluate_async",
    "explain_permissible",
    "permissible",
    "resolve_role",
]
