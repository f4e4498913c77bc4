"""Unit tests for comment nesting and the comment tree."""

from uuid import uuid4

import pytest

from graphreview.domain.model import CommentTree, nest_comments
from graphreview.domain.value import CommentId, ReviewId
from tests.factories import make_comment, make_user

REVIEW = ReviewId(uuid4())
AUTHOR = make_user("Jane Doe")


def _thread():
    parent = make_comment(REVIEW, AUTHOR, "Parent", age_seconds=30)
    first = make_comment(REVIEW, AUTHOR, "First reply", parent.id, age_seconds=20)
    second = make_comment(REVIEW, AUTHOR, "Second reply", parent.id, age_seconds=10)
    return parent, first, second


class TestNestComments:
    def test_replies_attached_in_order(self):
        parent, first, second = _thread()
        other = make_comment(REVIEW, AUTHOR, "Other", age_seconds=25)

        nested = nest_comments([parent, other, first, second])

        assert [c.id for c in nested] == [parent.id, other.id]
        assert [r.id for r in nested[0].replies] == [first.id, second.id]
        assert nested[1].replies == ()

    def test_orphaned_reply_kept_at_top_level(self):
        orphan = make_comment(REVIEW, AUTHOR, "Orphan", CommentId(uuid4()))

        assert [c.id for c in nest_comments([orphan])] == [orphan.id]


class TestCommentTree:
    def test_node_count_includes_replies(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first, second]))

        assert len(tree) == 1
        assert tree.node_count() == 3

    def test_prepend_new_top_level(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first, second]))
        newest = make_comment(REVIEW, AUTHOR, "Newest")

        tree.prepend(newest)

        assert [c.id for c in tree] == [newest.id, parent.id]

    def test_prepend_reply_rejected(self):
        parent, first, _ = _thread()
        tree = CommentTree([parent])

        with pytest.raises(ValueError):
            tree.prepend(first)

    def test_append_reply_goes_last(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first]))

        assert tree.append_reply(second) is True
        assert [r.id for r in tree.find(parent.id).replies] == [first.id, second.id]

    def test_append_reply_to_unknown_parent(self):
        _, first, _ = _thread()

        assert CommentTree().append_reply(first) is False

    def test_remove_top_level_drops_replies(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first, second]))

        assert tree.remove(parent.id) is True
        assert tree.node_count() == 0
        assert tree.find(first.id) is None

    def test_remove_reply_keeps_parent_and_sibling(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first, second]))

        assert tree.remove(first.id) is True
        assert tree.node_count() == 2
        assert [r.id for r in tree.find(parent.id).replies] == [second.id]

    def test_replace_reply_and_top_level(self):
        parent, first, second = _thread()
        tree = CommentTree(nest_comments([parent, first, second]))

        tree.replace(first.model_copy(update={"vote_count": 3}))
        tree.replace(parent.model_copy(update={"vote_count": 5}))

        updated_parent = tree.find(parent.id)
        assert updated_parent.vote_count == 5
        assert len(updated_parent.replies) == 2
        assert tree.find(first.id).vote_count == 3

    def test_remove_unknown_returns_false(self):
        assert CommentTree().remove(CommentId(uuid4())) is False
