"""In-memory store of entities keyed by id, with change notifications."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Protocol, TypeVar

from gqlblog.safemap import SafeMap
from gqlblog.subscription import Manager

K = TypeVar("K", bound=Hashable)


class _Entity(Protocol):
    @property
    def id(self): ...


V = TypeVar("V", bound=_Entity)


class Service(Generic[K, V]):
    """Stores entities by their ``id`` and announces creations and deletions."""

    def __init__(self) -> None:
        self.db: SafeMap[K, V] = SafeMap()
        self.created_sub: Manager[V] = Manager()
        self.deleted_sub: Manager[K] = Manager()

    def get(self, ids: Iterable[K] | None = None) -> list[V]:
        """Return all entities, or only those whose id is in ``ids``.

        ``None`` selects every entity; an empty collection selects none.
        """
        values = self.db.values()
        if ids is None:
            return values
        wanted = set(ids)
        return [value for value in values if value.id in wanted]

    def set(self, value: V) -> None:
        """Store ``value`` and notify creation subscribers."""
        self.db.set(value.id, value)
        self.created_sub.publish([value])

    def delete(self, key: K) -> None:
        """Remove the entity with id ``key`` and notify deletion subscribers."""
        self.db.delete(key)
        self.deleted_sub.publish([key])

    def keys(self) -> list[K]:
        """Return the ids of all stored entities."""
        return self.db.keys()

    def values(self) -> list[V]:
        """Return all stored entities."""
        return self.db.values()

    def next_id(self) -> int:
        """Return one more than the largest stored id, starting at 1."""
        return max(self.db.keys(), default=0) + 1