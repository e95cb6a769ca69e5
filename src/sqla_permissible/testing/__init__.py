"""sqla-permissible testing utilities: MockPost, assertions, and fixtures.

- **MockPost / make_context**: snapshot double that records reads, and
  caller contexts.
- **Assertion helpers**: ``assert_permitted``, ``assert_denied``.
- **Fixtures**: ``permissible_config``, ``permissible_context``,
  ``isolated_permissible_state``.

Example::

    from sqla_permissible.testing import MockPost, assert_denied, make_context

    def test_contributor_cannot_destroy_others_post():
        post = MockPost(status="draft", author_id=2)
        assert_denied(post, "destroy", make_context(1), {},
                      contributor_permissions(), expected_reads=1)
"""

from sqla_permissible.testing._assertions import assert_denied, assert_permitted
from sqla_permissible.testing._fixtures import (
    isolated_permissible_state,
    permissible_config,
    permissible_context,
)
from sqla_permissible.testing._isolation import isolated_permissible
from sqla_permissible.testing._mocks import MockPost, make_context

__all__ = [
    "MockPost",
    "assert_denied",
    "assert_permitted",
    "isolated_permissible",
    "isolated_permissible_state",
    "make_context",
    "permissible_config",
    "permissible_context",
]
