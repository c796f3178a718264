# gqlblog

An in-memory blog backend: users, posts and comments held in thread-safe
stores, a resolver layer that answers the fields of a GraphQL-style blog
schema, and subscriptions that deliver created and deleted items as they
happen.

## Modules

- `gqlblog.safemap.SafeMap` – a lock-guarded dictionary with `get`, `set`,
  `delete`, snapshot `keys()` and `values()`, `len()` and `in`.
- `gqlblog.subscription`
  - `Manager` keeps subscribers. `subscribe(filter_func)` returns a new
    `Subscription`; `publish(msgs)` hands each message, in order, to every
    open subscription whose filter accepts it; `unsubscribe(sub)` removes and
    closes a subscription; `len()` counts the open ones.
  - `Subscription` queues delivered messages. `get(timeout)` returns the next
    one, raising `queue.Empty` on timeout and `SubscriptionClosed` once the
    subscription is closed and drained. Iterating a subscription yields
    messages until it is closed. `close()` stops further deliveries.
- `gqlblog.model` – the `User`, `Post` and `Comment` dataclasses. Each has
  `to_dict()` using the schema's field names (`postID`, `createdAt`, ...),
  with timestamps in ISO 8601.
- `gqlblog.service.Service` – a store keyed by each entity's `id`. `set` and
  `delete` publish to its `created_sub` and `deleted_sub` managers.
  `get(ids)` returns everything when `ids` is `None`, nothing when it is
  empty, and the matching items otherwise. `next_id()` is one more than the
  largest stored id (1 for an empty store).
- `gqlblog.resolver`
  - `Resolver` holds a user, a post and a comment service and answers the
    queries (`users`, `posts`, `comments`), mutations (`create_post`,
    `delete_post`, `create_comment`, `delete_comment`), field resolvers
    (`comment_post`, `comment_user`, `post_body`, `post_user`,
    `post_comments`, `user_full_name`, `user_posts`, `user_comments`,
    `provoke_error`) and subscriptions (`post_created`, `post_deleted`,
    `comment_created`, `comment_deleted`).
  - Errors: `NotFoundError` for a missing user, post or comment;
    `AlreadyExistsError` when creating with an id already in use; both derive
    from `ResolverError`. `post_body` raises `ResolverError` when `offset` or
    `limit` falls outside the body.
  - `FieldContext` describes where a field sits in a query tree: `child(name)`
    nests a field, `depth()` gives its nesting depth, `path` its dotted path,
    and `errors` collects errors recorded during resolution (`provoke_error`
    adds one there and returns `False`).
  - `format_args(args)` renders `(key: value, ...)` for arguments that are not
    `None`; `log_resolver_depth(ctx, name, args)` logs a resolver call,
    indented by depth, on the `gqlblog.resolver` logger. Every resolver except
    `user_full_name` and `provoke_error` logs this way.
- `gqlblog.seed` – sample data: `init_users()` (two users), `init_posts(rng)`
  (five posts whose bodies come from `generate_paragraphs`, lorem-ipsum filler
  text), `init_comments()` (two comments on post 1), and `build_resolver(rng)`
  wiring them into a `Resolver`.

## Example

```python
import random

from gqlblog.seed import build_resolver

resolver = build_resolver(random.Random(1))

for user in resolver.users(None, None):
    print(user.name, [p.title for p in resolver.user_posts(user, None, None)])

# Watch for new comments
sub = resolver.comment_created(None)

post = resolver.posts(None, None)[0]
comment = resolver.create_comment(post.id, 1, "Nice read.", None, None)

delivered = sub.get(1.0)
print(delivered.id == comment.id)

# The body field can be sliced
print(resolver.post_body(post, 40, 0, None))

sub.close()
```

Query results are sorted by creation time, oldest first. Deleting a post
also deletes its comments, and each deletion is published to the matching
"deleted" subscription. `post_comments` selects comments by `ids` only; it
does not restrict them to the given post.

## What it does not do

The package is a library only. It has no HTTP or WebSocket server, no
GraphQL query parser or executor, no playground page and no command to
start anything: callers invoke the resolver methods directly. All data lives
in memory and is lost when the process ends.