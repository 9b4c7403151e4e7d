"""Entry class holding one key's latest value and its listeners."""

from typing import Any, Optional

from .registry import Listener, SubscriberRegistry
from .subscription import SubscriptionId


_UNSET = object()


class Entry:
    """
    State for a single store key.

    Keeps the last published value and a registry of listeners scoped to the
    key. Forwarded global listeners live in the same registry under their
    global ids.
    """

    def __init__(self, key: str):
        self.key = key
        self._value = _UNSET
        self._closed = False
        self.subscribers = SubscriberRegistry(key)

    def get(self) -> Optional[Any]:
        """Return the last published value, or None if nothing was put."""
        if self._value is _UNSET:
            return None
        return self._value

    def put(self, value: Any) -> None:
        """
        Store a value and notify every listener with (value, key).

        A listener that raises stops delivery and propagates to the caller.
        Listeners removed during delivery are skipped, and delivery stops
        once the entry is closed.
        """
        self._value = value

        def deliver(sid, fn):
            if not self._closed and sid in self.subscribers:
                fn(value, self.key)

        self.subscribers.for_each(deliver)

    def sub(self, fn: Listener, explicit_id: Optional[SubscriptionId] = None) -> SubscriptionId:
        return self.subscribers.sub(fn, explicit_id)

    def unsub(self, sid: SubscriptionId) -> bool:
        return self.subscribers.unsub(sid)

    def close(self) -> None:
        """
        Notify every listener with (None, key), then drop them all.

        Removing the entry from a store is left to the caller.
        """
        self._closed = True

        def notify(sid, fn):
            if sid in self.subscribers:
                fn(None, self.key)

        self.subscribers.for_each(notify)
        self.subscribers.clear()

    @property
    def closed(self) -> bool:
        return self._closed

    def __repr__(self) -> str:
        return f"Entry(key='{self.key}', listeners={len(self.subscribers)})"
