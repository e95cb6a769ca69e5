"""Everyone else: only the resolved user permission grants access."""

from __future__ import annotations

import pytest

from sqla_permissible.evaluator._evaluate import evaluate
from sqla_permissible.exceptions import NoPermissionError
from sqla_permissible.permissions._roles import Other
from sqla_permissible.testing import MockPost


class TestEveryoneElse:
    def test_rejects_if_no_user_permission_and_not_current_owner(self, context, editor):
        post = MockPost(author_id=2)

        with pytest.raises(NoPermissionError) as exc_info:
            evaluate(post, "edit", context, {"author_id": 2}, editor, False, True)

        assert exc_info.value.reason == "not_owner"
        assert post.read_count == 1

    def test_ownership_alone_does_not_grant(self, context, editor):
        post = MockPost(author_id=1)

        with pytest.raises(NoPermissionError) as exc_info:
            evaluate(post, "edit", context, {"title": "x"}, editor, False, True)

        assert exc_info.value.reason == "not_permitted"
        assert post.read_count == 1

    def test_resolves_if_user_permission_granted(self, context, editor):
        post = MockPost(author_id=2)

        decision = evaluate(post, "edit", context, {"author_id": 2}, editor, True, True)

        assert decision.excluded_attrs == ()
        assert decision.role == Other(has_user_permission=True)
        assert post.called is False

    @pytest.mark.parametrize("action", ["add", "edit", "destroy"])
    def test_admin_without_user_permission_is_denied(self, context, admin, action):
        post = MockPost(author_id=1, status="draft")

        with pytest.raises(NoPermissionError):
            evaluate(post, action, context, {}, admin, False, True)

        assert post.reads == ["author_id"]
