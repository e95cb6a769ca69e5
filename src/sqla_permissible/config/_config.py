"""Layered configuration for sqla-permissible."""

from __future__ import annotations

from dataclasses import dataclass

from sqla_permissible._types import OnDenied, OnUnloadedAttribute

__all__ = [
    "PermissibleConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_ON_DENIED: set[str] = {"raise", "log"}
_VALID_UNLOADED_ATTRIBUTE: set[str] = {"deny", "raise", "warn"}


@dataclass(frozen=True, slots=True)
class PermissibleConfig:
    """Layered configuration with merge semantics (global -> call).

    Attributes:
        draft_status: Status value that marks an unpublished post.
        published_status: Status value contributors may never set or destroy.
        contributor_excluded_attrs: Attributes stripped from every
            contributor write.
        log_decisions: Emit INFO/DEBUG audit records for each decision.
        on_denied: ``"raise"`` only raises ``NoPermissionError``.
            ``"log"`` also logs a WARNING before raising.
        on_unloaded_attribute: What a guard does when it reads an attribute
            that is not loaded on a mapped instance. ``"deny"`` denies the
            write, ``"warn"`` also logs a WARNING, ``"raise"`` raises
            ``UnloadedAttributeError``.

    Example::

        config = PermissibleConfig(log_decisions=True)
        merged = config.merge(published_status="live")
    """

    draft_status: str = "draft"
    published_status: str = "published"
    contributor_excluded_attrs: tuple[str, ...] = ("tags",)
    log_decisions: bool = False
    on_denied: OnDenied = "raise"
    on_unloaded_attribute: OnUnloadedAttribute = "deny"

    def __post_init__(self) -> None:
        if self.on_denied not in _VALID_ON_DENIED:
            raise ValueError(
                f"on_denied must be one of {_VALID_ON_DENIED!r}, got {self.on_denied!r}"
            )
        if self.on_unloaded_attribute not in _VALID_UNLOADED_ATTRIBUTE:
            raise ValueError(
                f"on_unloaded_attribute must be one of {_VALID_UNLOADED_ATTRIBUTE!r}, "
                f"got {self.on_unloaded_attribute!r}"
            )
        if not self.draft_status or not self.published_status:
            raise ValueError("draft_status and published_status must be non-empty")
        if self.draft_status == self.published_status:
            raise ValueError(
                f"draft_status and published_status must differ, both are {self.draft_status!r}"
            )
        # Accept any iterable of names but store an ordered tuple.
        if not isinstance(self.contributor_excluded_attrs, tuple):
            object.__setattr__(
                self, "contributor_excluded_attrs", tuple(self.contributor_excluded_attrs)
            )

    def merge(
        self,
        *,
        draft_status: str | None = None,
        published_status: str | None = None,
        contributor_excluded_attrs: tuple[str, ...] | None = None,
        log_decisions: bool | None = None,
        on_denied: OnDenied | None = None,
        on_unloaded_attribute: OnUnloadedAttribute | None = None,
    ) -> PermissibleConfig:
        """Return a new config with non-None overrides applied.

        Example::

            base = PermissibleConfig()
            call_cfg = base.merge(contributor_excluded_attrs=("tags", "authors"))
        """
        return PermissibleConfig(
            draft_status=draft_status if draft_status is not None else self.draft_status,
            published_status=(
                published_status if published_status is not None else self.published_status
            ),
            contributor_excluded_attrs=(
                contributor_excluded_attrs
                if contributor_excluded_attrs is not None
                else self.contributor_excluded_attrs
            ),
            log_decisions=log_decisions if log_decisions is not None else self.log_decisions,
            on_denied=on_denied if on_denied is not None else self.on_denied,
            on_unloaded_attribute=(
                on_unloaded_attribute
                if on_unloaded_attribute is not None
                else self.on_unloaded_attribute
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = PermissibleConfig()


def get_global_config() -> PermissibleConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    draft_status: str | None = None,
    published_status: str | None = None,
    contributor_excluded_attrs: tuple[str, ...] | None = None,
    log_decisions: bool | None = None,
    on_denied: OnDenied | None = None,
    on_unloaded_attribute: OnUnloadedAttribute | None = None,
) -> PermissibleConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        draft_status=draft_status,
        published_status=published_status,
        contributor_excluded_attrs=contributor_excluded_attrs,
        log_decisions=log_decisions,
        on_denied=on_denied,
        on_unloaded_attribute=on_unloaded_attribute,
    )
    return _global_config


def _set_global_config(cfg: PermissibleConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = PermissibleConfig()
