"""Tests for the individual guard clauses and tier policies."""

from __future__ import annotations

import pytest

from sqla_permissible._context import PermissionContext
from sqla_permissible.config._config import PermissibleConfig
from sqla_permissible.evaluator._guards import (
    ASSIGNS_SELF,
    AUTHOR_UNCHANGED,
    IS_DRAFT,
    IS_OWNER,
    NOT_PUBLISHED,
    NOT_PUBLISHING,
    STATUS_UNCHANGED,
    PostWrite,
)
from sqla_permissible.evaluator._tiers import policy_for
from sqla_permissible.permissions._roles import Author, Contributor, Other
from sqla_permissible.testing import MockPost


def _write(post, unsafe_attrs=None, user=1, config=None) -> PostWrite:
    return PostWrite(
        entity=post,
        action="edit",
        context=PermissionContext(user=user),
        unsafe_attrs=unsafe_attrs or {},
        config=config or PermissibleConfig(),
    )


class TestIsChanging:
    def test_absent_attribute_is_not_read(self):
        post = MockPost(status="draft")
        assert _write(post).is_changing("status") is False
        assert post.called is False

    def test_same_value_is_not_changing(self):
        post = MockPost(status="draft")
        assert _write(post, {"status": "draft"}).is_changing("status") is False
        assert post.reads == ["status"]

    def test_explicit_none_is_compared(self):
        post = MockPost(author_id=1)
        assert _write(post, {"author_id": None}).is_changing("author_id") is True


class TestGuards:
    def test_not_publishing_reads_nothing(self):
        post = MockPost(status="published")
        assert NOT_PUBLISHING(_write(post, {"status": "draft"})) is True
        assert NOT_PUBLISHING(_write(post, {"status": "published"})) is False
        assert NOT_PUBLISHING(_write(post)) is True
        assert post.called is False

    def test_assigns_self(self):
        post = MockPost()
        assert ASSIGNS_SELF(_write(post)) is True
        assert ASSIGNS_SELF(_write(post, {"author_id": 1})) is True
        assert ASSIGNS_SELF(_write(post, {"author_id": 2})) is False
        assert post.called is False

    def test_status_unchanged(self):
        post = MockPost(status="draft")
        assert STATUS_UNCHANGED(_write(post, {"status": "scheduled"})) is False

    def test_author_unchanged(self):
        post = MockPost(author_id=3)
        assert AUTHOR_UNCHANGED(_write(post, {"author_id": 3})) is True

    def test_is_draft_uses_configured_status(self):
        post = MockPost(status="wip")
        config = PermissibleConfig(draft_status="wip")
        assert IS_DRAFT(_write(post, config=config)) is True
        assert IS_DRAFT(_write(post)) is False

    def test_is_owner(self):
        assert IS_OWNER(_write(MockPost(author_id=1))) is True
        assert IS_OWNER(_write(MockPost(author_id=2))) is False

    def test_anonymous_caller_owns_nothing(self):
        assert IS_OWNER(_write(MockPost(author_id=None), user=None)) is False

    def test_not_published(self):
        assert NOT_PUBLISHED(_write(MockPost(status="scheduled"))) is True
        assert NOT_PUBLISHED(_write(MockPost(status="published"))) is False

    def test_reads_documentation_matches_behavior(self):
        post = MockPost(status="draft", author_id=1)
        for guard in (IS_DRAFT, IS_OWNER, NOT_PUBLISHED):
            post.reset()
            guard(_write(post))
            assert tuple(post.reads) == guard.reads


class TestPolicyFor:
    def test_contributor_edit_guard_order(self):
        policy = policy_for(Contributor(), "edit", PermissibleConfig())
        assert policy is not None
        assert [g.name for g in policy.guards] == [
            "status_unchanged",
            "author_unchanged",
            "is_draft",
            "is_owner",
        ]
        assert policy.excluded_attrs == ("tags",)

    def test_contributor_excluded_attrs_follow_config(self):
        config = PermissibleConfig(contributor_excluded_attrs=("tags", "authors"))
        policy = policy_for(Contributor(), "add", config)
        assert policy is not None
        assert policy.excluded_attrs == ("tags", "authors")

    def test_author_edit_guard_order(self):
        policy = policy_for(Author(), "edit", PermissibleConfig())
        assert policy is not None
        assert [g.name for g in policy.guards] == ["is_owner", "author_unchanged"]
        assert policy.excluded_attrs == ()

    def test_unknown_action_has_no_policy(self):
        assert policy_for(Contributor(), "publish", PermissibleConfig()) is None
        assert policy_for(Author(), "publish", PermissibleConfig()) is None

    def test_other_never_grants_without_permission(self):
        policy = policy_for(Other(has_user_permission=False), "edit", PermissibleConfig())
        assert policy is not None
        assert policy.grants is False

    @pytest.mark.parametrize("action", ["add", "edit", "destroy", "publish"])
    def test_other_policy_is_ownership_only_for_every_action(self, action):
        policy = policy_for(Other(), action, PermissibleConfig())
        assert policy is not None
        assert [g.name for g in policy.guards] == ["is_owner"]
        assert policy.grants is False
