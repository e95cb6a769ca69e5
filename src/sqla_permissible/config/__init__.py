"""Configuration module for sqla-permissible."""

from __future__ import annotations

from sqla_permissible.config._config import PermissibleConfig, configure, get_global_config

__all__ = ["PermissibleConfig", "configure", "get_global_config"]
