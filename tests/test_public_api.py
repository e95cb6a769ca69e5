"""Tests for public API surface: verifies all __init__.py re-exports."""

from __future__ import annotations

import importlib
import inspect

import pytest


class TestTopLevelExports:
    EXPECTED = {
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
    }

    def test_all_is_complete(self) -> None:
        import sqla_permissible

        actual = set(sqla_permissible.__all__)
        assert actual == self.EXPECTED, (
            f"__all__ mismatch.\n"
            f"  Missing: {self.EXPECTED - actual}\n"
            f"  Extra: {actual - self.EXPECTED}"
        )

    def test_callable_symbols_are_callable(self) -> None:
        from sqla_permissible import (
            apply_exclusions,
            can_write,
            configure,
            evaluate,
            explain_permissible,
            permissible,
            resolve_role,
        )

        for sym in [
            apply_exclusions,
            can_write,
            configure,
            evaluate,
            explain_permissible,
            permissible,
            resolve_role,
        ]:
            assert callable(sym), f"{sym!r} should be callable"

    def test_evaluate_async_is_coroutine_function(self) -> None:
        from sqla_permissible import evaluate_async

        assert inspect.iscoroutinefunction(evaluate_async)

    def test_version_is_string(self) -> None:
        import sqla_permissible

        assert isinstance(sqla_permissible.__version__, str)


@pytest.mark.parametrize(
    "module_name",
    [
        "sqla_permissible",
        "sqla_permissible.config",
        "sqla_permissible.evaluator",
        "sqla_permissible.explain",
        "sqla_permissible.permissions",
        "sqla_permissible.testing",
    ],
)
def test_every_all_entry_exists(module_name: str) -> None:
    module = importlib.import_module(module_name)
    for name in module.__all__:
        assert hasattr(module, name), f"{module_name}.{name} listed in __all__ but missing"
