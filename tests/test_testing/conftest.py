"""Import fixtures from sqla_permissible.testing for test discovery."""

from sqla_permissible.testing._fixtures import (
    isolated_permissible_state,
    permissible_config,
    permissible_context,
)

__all__ = ["isolated_permissible_state", "permissible_config", "permissible_context"]
