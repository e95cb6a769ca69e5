"""Shared test fixtures for sqla-permissible tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from sqla_permissible._context import PermissionContext
from sqla_permissible.config._config import _reset_global_config
from sqla_permissible.permissions._permission_set import (
    PermissionSet,
    admin_permissions,
    author_permissions,
    contributor_permissions,
    editor_permissions,
)


@pytest.fixture(autouse=True)
def _reset_config() -> Generator[None, None, None]:
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def context() -> PermissionContext:
    """The acting user, id 1."""
    return PermissionContext(user=1)


@pytest.fixture()
def contributor() -> PermissionSet:
    return contributor_permissions()


@pytest.fixture()
def author() -> PermissionSet:
    return author_permissions()


@pytest.fixture()
def editor() -> PermissionSet:
    return editor_permissions()


@pytest.fixture()
def admin() -> PermissionSet:
    return admin_permissions()
