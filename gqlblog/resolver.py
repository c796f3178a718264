"""Field resolvers for the blog's users, posts and comments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Sequence

from gqlblog.model import Comment, Post, User
from gqlblog.service import Service
from gqlblog.subscription import Subscription

logger = logging.getLogger(__name__)


class ResolverError(Exception):
    """Raised when a resolver cannot produce a result."""


class NotFoundError(ResolverError):
    """Raised when a referenced entity does not exist."""


class AlreadyExistsError(ResolverError):
    """Raised when creating an entity whose id is already taken."""


@dataclass
class FieldContext:
    """Position of a resolver within the query tree, plus collected errors."""

    name: str | int
    parent: FieldContext | None = None
    errors: list[ResolverError] = field(default_factory=list)

    def child(self, name: str | int) -> FieldContext:
        """Return a context for a field nested under this one."""
        return FieldContext(name, self, self.errors)

    def depth(self) -> int:
        """Return the nesting depth; root and first-level fields are 0."""
        length = 0
        current: FieldContext | None = self
        while current is not None:
            length += 1
            current = current.parent
        return max(length - 2, 0)

    @property
    def path(self) -> str:
        """Return the dotted path from the root, indices in brackets."""
        names: list[str | int] = []
        current: FieldContext | None = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        text = ""
        for name in reversed(names):
            if isinstance(name, int):
                text += f"[{name}]"
            elif text:
                text += f".{name}"
            else:
                text = name
        return text


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


def format_args(args: Iterable[tuple[str, Any]]) -> str:
    """Render ``(key: value, ...)`` for the arguments that are not ``None``."""
    parts = [f"{key}: {_format_value(value)}" for key, value in args if value is not None]
    return f"({', '.join(parts)})" if parts else ""


def log_resolver_depth(
    ctx: FieldContext | None,
    resolver_name: str,
    args: Iterable[tuple[str, Any]] = (),
) -> None:
    """Log the resolver's name and arguments, indented by its depth."""
    if ctx is None:
        logger.warning(
            "WARNING: No FieldContext found for resolver '%s'. This might happen "
            "for root resolvers or in non-GraphQL contexts.",
            resolver_name,
        )
        return
    spaces = " " * (ctx.depth() * 2)
    logger.info("%s%s%s → %s", spaces, resolver_name, format_args(args), ctx.path)


def _by_creation(items: Iterable[Any]) -> list[Any]:
    return sorted(items, key=lambda item: item.created_at)


class Resolver:
    """Resolves queries, mutations and subscriptions against the services."""

    def __init__(
        self,
        user_service: Service[int, User] | None = None,
        post_service: Service[int, Post] | None = None,
        comment_service: Service[int, Comment] | None = None,
    ) -> None:
        self.user_service: Service[int, User] = user_service or Service()
        self.post_service: Service[int, Post] = post_service or Service()
        self.comment_service: Service[int, Comment] = comment_service or Service()

    def _one(self, service: Service, key: int, what: str) -> Any:
        found = service.get([key])
        if not found:
            raise NotFoundError(f"{what} not found")
        return found[0]

    # Comments

    def comment_post(self, comment: Comment, ctx: FieldContext | None = None) -> Post:
        log_resolver_depth(ctx, "commentResolver.Post", [("post", comment.post_id)])
        return self._one(self.post_service, comment.post_id, "post")

    def comment_user(self, comment: Comment, ctx: FieldContext | None = None) -> User:
        log_resolver_depth(ctx, "commentResolver.User", [("user", comment.user_id)])
        return self._one(self.user_service, comment.user_id, "user")

    def create_comment(
        self,
        post_id: int,
        user_id: int,
        content: str,
        id: int | None = None,
        ctx: FieldContext | None = None,
    ) -> Comment:
        log_resolver_depth(ctx, "mutationResolver.CreateComment")
        self._one(self.user_service, user_id, "user")
        self._one(self.post_service, post_id, "post")
        if id is not None:
            if self.comment_service.get([id]):
                raise AlreadyExistsError("comment already exists")
        else:
            id = self.comment_service.next_id()
        comment = Comment(
            id=id,
            post_id=post_id,
            user_id=user_id,
            created_at=datetime.now(),
            content=content,
        )
        self.comment_service.set(comment)
        return comment

    def delete_comment(self, id: int, ctx: FieldContext | None = None) -> bool:
        log_resolver_depth(ctx, "mutationResolver.DeleteComment", [("id", id)])
        self._one(self.comment_service, id, "comment")
        self.comment_service.delete(id)
        return True

    def comments(
        self, ids: Sequence[int] | None = None, ctx: FieldContext | None = None
    ) -> list[Comment]:
        log_resolver_depth(ctx, "queryResolver.Comments", [("ids", ids)])
        return _by_creation(self.comment_service.get(ids))

    def comment_created(self, ctx: FieldContext | None = None) -> Subscription[Comment]:
        log_resolver_depth(ctx, "subscriptionResolver.CommentCreated")
        return self.comment_service.created_sub.subscribe()

    def comment_deleted(self, ctx: FieldContext | None = None) -> Subscription[int]:
        log_resolver_depth(ctx, "subscriptionResolver.CommentDeleted")
        return self.comment_service.deleted_sub.subscribe()

    # Posts

    def create_post(
        self,
        user_id: int,
        title: str,
        ingress: str,
        body: str,
        category: str,
        id: int | None = None,
        ctx: FieldContext | None = None,
    ) -> Post:
        log_resolver_depth(ctx, "mutationResolver.CreatePost")
        self._one(self.user_service, user_id, "user")
        if id is not None:
            if self.post_service.get([id]):
                raise AlreadyExistsError("post already exists")
        else:
            id = self.post_service.next_id()
        post = Post(
            id=id,
            user_id=user_id,
            title=title,
            ingress=ingress,
            content=body,
            category=category,
            created_at=datetime.now(),
        )
        self.post_service.set(post)
        return post

    def delete_post(self, id: int, ctx: FieldContext | None = None) -> bool:
        log_resolver_depth(ctx, "mutationResolver.DeletePost", [("id", id)])
        self._one(self.post_service, id, "post")
        for comment in self.comment_service.values():
            if comment.post_id == id:
                self.comment_service.delete(comment.id)
        self.post_service.delete(id)
        return True

    def post_body(
        self,
        post: Post,
        limit: int | None = None,
        offset: int | None = None,
        ctx: FieldContext | None = None,
    ) -> str:
        log_resolver_depth(
            ctx,
            "postResolver.Body",
            [("post", post.id), ("limit", limit), ("offset", offset)],
        )
        body = post.content
        if offset is not None:
            if not 0 <= offset <= len(body):
                raise ResolverError(f"offset {offset} out of range")
            body = body[offset:]
        if limit is not None:
            if not 0 <= limit <= len(body):
                raise ResolverError(f"limit {limit} out of range")
            body = body[:limit]
        return body

    def post_user(self, post: Post, ctx: FieldContext | None = None) -> User:
        log_resolver_depth(ctx, "postResolver.User", [("user", post.user_id)])
        return self._one(self.user_service, post.user_id, "user")

    def post_comments(
        self,
        post: Post,
        ids: Sequence[int] | None = None,
        ctx: FieldContext | None = None,
    ) -> list[Comment]:
        log_resolver_depth(ctx, "postResolver.Comments", [("post", post.id), ("ids", ids)])
        return _by_creation(self.comment_service.get(ids))

    def posts(
        self, ids: Sequence[int] | None = None, ctx: FieldContext | None = None
    ) -> list[Post]:
        log_resolver_depth(ctx, "queryResolver.Posts", [("ids", ids)])
        return _by_creation(self.post_service.get(ids))

    def post_created(self, ctx: FieldContext | None = None) -> Subscription[Post]:
        log_resolver_depth(ctx, "subscriptionResolver.PostCreated")
        return self.post_service.created_sub.subscribe()

    def post_deleted(self, ctx: FieldContext | None = None) -> Subscription[int]:
        log_resolver_depth(ctx, "subscriptionResolver.PostDeleted")
        return self.post_service.deleted_sub.subscribe()

    # Users

    def users(
        self, ids: Sequence[int] | None = None, ctx: FieldContext | None = None
    ) -> list[User]:
        log_resolver_depth(ctx, "queryResolver.Users", [("ids", ids)])
        return _by_creation(self.user_service.get(ids))

    def user_full_name(self, user: User, ctx: FieldContext | None = None) -> str:
        return user.name

    def user_posts(
        self,
        user: User,
        ids: Sequence[int] | None = None,
        ctx: FieldContext | None = None,
    ) -> list[Post]:
        log_resolver_depth(ctx, "userResolver.Posts", [("user", user.id), ("ids", ids)])
        return _by_creation(p for p in self.post_service.get(ids) if p.user_id == user.id)

    def user_comments(
        self,
        user: User,
        ids: Sequence[int] | None = None,
        ctx: FieldContext | None = None,
    ) -> list[Comment]:
        log_resolver_depth(ctx, "userResolver.Comments", [("user", user.id), ("ids", ids)])
        return _by_creation(
            c for c in self.comment_service.get(ids) if c.user_id == user.id
        )

    def provoke_error(self, user: User, ctx: FieldContext | None = None) -> bool:
        """Record an error on the context and resolve to ``False``."""
        if ctx is not None:
            ctx.errors.append(ResolverError("you just provoked an error"))
        return False