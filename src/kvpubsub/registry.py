"""Subscriber registry mapping subscription ids to listeners."""

from typing import Any, Callable, Dict, Optional

from .subscription import SubscriptionId


# Listener signature: called with the new value (None once closed) and the key
Listener = Callable[[Optional[Any], str], None]


class SubscriberRegistry:
    """
    Holds listeners and mints namespaced subscription ids.

    Ids minted here are scoped to ``key`` (None for the global registry) and
    are never reused, even after removal. Ids minted by another registry may
    be stored verbatim, which is how global listeners are forwarded into
    entries.
    """

    def __init__(self, key: Optional[str] = None):
        """
        Initialize an empty registry.

        Args:
            key: Entry key used to scope minted ids, or None for global ids
        """
        self.key = key
        self._counter = 0
        self._listeners: Dict[SubscriptionId, Listener] = {}

    def sub(self, fn: Listener, explicit_id: Optional[SubscriptionId] = None) -> SubscriptionId:
        """
        Register a listener.

        Args:
            fn: The listener to register
            explicit_id: Register under this id instead of minting one

        Returns:
            The id the listener is registered under
        """
        if explicit_id is None:
            explicit_id = SubscriptionId(self.key, self._counter)
            self._counter += 1

        self._listeners[explicit_id] = fn
        return explicit_id

    def unsub(self, sid: SubscriptionId) -> bool:
        """Remove the listener bound to sid, returning whether it was present."""
        return self._listeners.pop(sid, None) is not None

    def for_each(self, fn: Callable[[SubscriptionId, Listener], None]) -> None:
        """
        Call fn once per registered listener.

        Iterates over a snapshot: fn may add or remove registrations, and
        those changes show up on the next pass.
        """
        for sid, listener in list(self._listeners.items()):
            fn(sid, listener)

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, sid) -> bool:
        return sid in self._listeners

    def __repr__(self) -> str:
        return f"SubscriberRegistry(key={self.key!r}, listeners={len(self._listeners)})"
