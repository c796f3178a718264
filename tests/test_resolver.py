import logging
from datetime import datetime, timedelta

import pytest

from gqlblog.model import Comment, Post, User
from gqlblog.resolver import (
    AlreadyExistsError,
    FieldContext,
    NotFoundError,
    Resolver,
    ResolverError,
    format_args,
    log_resolver_depth,
)

BASE = datetime(2024, 1, 1, 12, 0, 0)


def _user(uid, days):
    return User(
        id=uid,
        name=f"User {uid}",
        email=f"user{uid}@example.com",
        phone_number="",
        address=None,
        role="editor",
        created_at=BASE - timedelta(days=days),
        last_login=BASE,
        preferences=None,
    )


def _post(pid, uid, days, content="abcdef"):
    return Post(
        id=pid,
        user_id=uid,
        title=f"Title {pid}",
        ingress="ingress",
        content=content,
        category="Science",
        created_at=BASE - timedelta(days=days),
    )


def _comment(cid, pid, uid, hours):
    return Comment(
        id=cid,
        post_id=pid,
        user_id=uid,
        created_at=BASE - timedelta(hours=hours),
        content=f"comment {cid}",
    )


@pytest.fixture
def resolver():
    r = Resolver()
    r.user_service.set(_user(1, 10))
    r.user_service.set(_user(2, 20))
    r.post_service.set(_post(1, 1, 3))
    r.post_service.set(_post(2, 2, 5))
    r.post_service.set(_post(3, 1, 4))
    r.comment_service.set(_comment(1, 1, 2, 1))
    r.comment_service.set(_comment(2, 1, 1, 5))
    r.comment_service.set(_comment(3, 2, 1, 3))
    return r


def test_format_args_skips_none_and_formats_lists():
    assert format_args([("ids", None), ("limit", None)]) == ""
    assert format_args([("ids", [1, 2])]) == "(ids: [1 2])"
    assert format_args([("post", 7), ("offset", None), ("limit", 4)]) == "(post: 7, limit: 4)"


def test_field_context_depth_grows_by_one_per_level():
    root = FieldContext("query")
    first = root.child("users")
    second = first.child(0).child("posts")
    assert root.depth() == 0
    assert first.depth() == 0
    assert second.depth() == first.depth() + 2
    assert second.path == "users[0].posts".join(["query.", ""])


def test_child_shares_errors(resolver):
    root = FieldContext("query")
    child = root.child("users").child("provokeError")
    assert resolver.provoke_error(resolver.users([1])[0], child) is False
    assert [str(e) for e in root.errors] == ["you just provoked an error"]


def test_log_without_context_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="gqlblog.resolver"):
        log_resolver_depth(None, "queryResolver.Users", [])
    assert any("queryResolver.Users" in r.getMessage() for r in caplog.records)


def test_log_with_context_includes_args_and_path(caplog):
    ctx = FieldContext("query").child("posts")
    with caplog.at_level(logging.INFO, logger="gqlblog.resolver"):
        log_resolver_depth(ctx, "queryResolver.Posts", [("ids", [3])])
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("queryResolver.Posts(ids: [3])") and m.endswith(ctx.path) for m in messages)


def test_lists_are_sorted_by_creation(resolver):
    for items in (resolver.users(), resolver.posts(), resolver.comments()):
        stamps = [item.created_at for item in items]
        assert stamps == sorted(stamps)
    assert len(resolver.posts()) == 3


def test_empty_ids_select_nothing(resolver):
    assert resolver.users([]) == []
    assert resolver.posts([]) == []
    assert [p.id for p in resolver.posts([2])] == [2]


def test_create_comment_assigns_next_id(resolver):
    expected = resolver.comment_service.next_id()
    comment = resolver.create_comment(post_id=2, user_id=2, content="hello")
    assert comment.id == expected
    assert resolver.comments([expected]) == [comment]


def test_create_comment_errors(resolver):
    with pytest.raises(NotFoundError, match="user not found"):
        resolver.create_comment(1, 99, "x")
    with pytest.raises(NotFoundError, match="post not found"):
        resolver.create_comment(99, 1, "x")
    with pytest.raises(AlreadyExistsError, match="comment already exists"):
        resolver.create_comment(1, 1, "x", id=1)


def test_delete_comment(resolver):
    assert resolver.delete_comment(1) is True
    assert resolver.comments([1]) == []
    with pytest.raises(NotFoundError, match="comment not found"):
        resolver.delete_comment(1)


def test_create_post_and_errors(resolver):
    post = resolver.create_post(1, "T", "I", "body text", "Health")
    assert post.content == "body text"
    assert post.id == max(resolver.post_service.keys())
    with pytest.raises(AlreadyExistsError, match="post already exists"):
        resolver.create_post(1, "T", "I", "b", "Health", id=post.id)
    with pytest.raises(NotFoundError, match="user not found"):
        resolver.create_post(42, "T", "I", "b", "Health")


def test_delete_post_removes_its_comments(resolver):
    assert resolver.delete_post(1) is True
    assert resolver.posts([1]) == []
    assert {c.post_id for c in resolver.comments()} == {2}
    with pytest.raises(NotFoundError, match="post not found"):
        resolver.delete_post(1)


def test_post_body_offset_and_limit(resolver):
    post = resolver.posts([1])[0]
    assert resolver.post_body(post) == post.content
    assert resolver.post_body(post, limit=3, offset=2) == "cde"
    assert resolver.post_body(post, offset=len(post.content)) == ""
    with pytest.raises(ResolverError):
        resolver.post_body(post, limit=100)


def test_relations(resolver):
    comment = resolver.comments([3])[0]
    assert resolver.comment_post(comment).id == comment.post_id
    assert resolver.comment_user(comment).id == comment.user_id
    user = resolver.users([1])[0]
    assert resolver.user_full_name(user) == user.name
    assert all(p.user_id == 1 for p in resolver.user_posts(user))
    assert {p.id for p in resolver.user_posts(user)} == {1, 3}
    assert {c.id for c in resolver.user_comments(user)} == {2, 3}
    post = resolver.posts([2])[0]
    assert resolver.post_user(post).id == post.user_id
    assert len(resolver.post_comments(post)) == len(resolver.comments())


def test_missing_relations_raise(resolver):
    orphan = _comment(9, 99, 99, 0)
    with pytest.raises(NotFoundError, match="post not found"):
        resolver.comment_post(orphan)
    with pytest.raises(NotFoundError, match="user not found"):
        resolver.comment_user(orphan)


def test_subscriptions_receive_events(resolver):
    created = resolver.comment_created()
    deleted = resolver.comment_deleted()
    post_created = resolver.post_created()
    post_deleted = resolver.post_deleted()
    comment = resolver.create_comment(2, 1, "new")
    assert created.get(timeout=1) is comment
    resolver.delete_comment(comment.id)
    assert deleted.get(timeout=1) == comment.id
    post = resolver.create_post(2, "T", "I", "b", "Business")
    assert post_created.get(timeout=1) is post
    resolver.delete_post(post.id)
    assert post_deleted.get(timeout=1) == post.id