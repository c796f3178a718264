"""Publish/subscribe: a manager fans published messages out to subscribers."""

from __future__ import annotations

import queue
import threading
import uuid
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_CLOSED = object()


class SubscriptionClosed(Exception):
    """Raised when reading from a subscription that has been closed."""


class Subscription(Generic[T]):
    """A subscriber's queue of messages, with an optional filter."""

    def __init__(self, filter_func: Callable[[T], bool] | None = None) -> None:
        self.id = uuid.uuid4()
        self._filter_func = filter_func
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def filter(self, msg: T) -> bool:
        """Return whether ``msg`` should be delivered; no filter lets all through."""
        if self._filter_func is None:
            return True
        return bool(self._filter_func(msg))

    def push(self, msg: T) -> None:
        """Queue ``msg`` for delivery; ignored once closed."""
        with self._lock:
            if self._closed:
                return
            self._queue.put(msg)

    def get(self, timeout: float | None = None) -> T:
        """Return the next message.

        Raises ``queue.Empty`` if none arrives within ``timeout`` and
        ``SubscriptionClosed`` once the subscription is closed and drained.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise SubscriptionClosed("subscription is closed")
        return item

    def close(self) -> None:
        """Stop accepting messages; readers finish after pending ones."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except SubscriptionClosed:
                return


class Manager(Generic[T]):
    """Keeps subscribers and delivers published messages to them in order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[uuid.UUID, Subscription[T]] = {}

    def subscribe(
        self, filter_func: Callable[[T], bool] | None = None
    ) -> Subscription[T]:
        """Register and return a new subscription."""
        sub: Subscription[T] = Subscription(filter_func)
        with self._lock:
            self._subscribers[sub.id] = sub
        return sub

    def publish(self, msgs: Iterable[T]) -> None:
        """Deliver each message to every subscriber whose filter accepts it."""
        with self._lock:
            for key in [k for k, s in self._subscribers.items() if s.closed]:
                del self._subscribers[key]
            subscribers = list(self._subscribers.values())
        for msg in msgs:
            for sub in subscribers:
                if sub.filter(msg):
                    sub.push(msg)

    def unsubscribe(self, subscription: Subscription[T]) -> None:
        """Remove ``subscription`` and close it."""
        with self._lock:
            self._subscribers.pop(subscription.id, None)
        subscription.close()

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for s in self._subscribers.values() if not s.closed)