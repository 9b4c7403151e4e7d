"""PubSub store routing values and subscriptions to per-key entries."""

import logging
import threading
from typing import Any, Dict, List, Optional, Union

from .entry import Entry
from .registry import Listener, SubscriberRegistry
from .subscription import SubscriptionId, WILDCARD


class PubSub:
    """
    A keyed publish/subscribe data store.

    Each key gets an Entry holding its latest value and listeners. Listeners
    subscribed to the ``"*"`` wildcard are global: they are copied into every
    existing entry when they subscribe, and into every new entry when it is
    created, under the same subscription id. Unsubscribing a global id
    removes it from all of those places.

    Every operation runs under one re-entrant lock, so listeners may call
    back into the store. Listeners run synchronously; an exception raised by
    one propagates to the caller of ``put``, ``delete`` or ``close``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize an empty store.

        Args:
            logger: Receives error reports; defaults to the "kvpubsub.store" logger
        """
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._entries: Dict[str, Entry] = {}
        self._global_subscribers = SubscriberRegistry()

    def _create_entry(self, key: str) -> Entry:
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        entry = self._entries[key] = Entry(key)
        self._global_subscribers.for_each(lambda sid, fn: entry.sub(fn, sid))
        return entry

    def _sub_global(self, fn: Listener) -> SubscriptionId:
        sid = self._global_subscribers.sub(fn)
        for entry in list(self._entries.values()):
            entry.sub(fn, sid)
        return sid

    def _unsub_global(self, sid: SubscriptionId) -> bool:
        if not self._global_subscribers.unsub(sid):
            # Never forwarded anywhere, so the entries need no visit
            self._logger.error(f"Could not unsub global subscription {sid}")
            return False

        for entry in list(self._entries.values()):
            entry.unsub(sid)
        return True

    def get(self, key: str) -> Optional[Any]:
        """
        Get the latest value for a key.

        Returns:
            The value, or None if the key has no entry or no value yet
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            return entry.get()

    def put(self, key: str, value: Any) -> None:
        """
        Set the value for a key and notify its listeners.

        Putting to the reserved ``"*"`` key is logged as an error and ignored.

        Args:
            key: The entry key
            value: The value to publish
        """
        if key == WILDCARD:
            self._logger.error(f"Invalid key '{key}': reserved for wildcard subscriptions")
            return

        with self._lock:
            self._create_entry(key).put(value)

    def delete(self, key: str) -> bool:
        """
        Remove the entry for a key.

        Every listener of the entry, local and global alike, is called with
        None before it is removed.

        Returns:
            True if an entry was removed, False if the key had none
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False

            entry.close()
            del self._entries[key]
            return True

    def sub(self, key: str, fn: Listener) -> SubscriptionId:
        """
        Subscribe a listener to a key, or to every key with ``"*"``.

        Args:
            key: The entry key, or ``"*"`` for all present and future keys
            fn: Called as ``fn(value, key)``; value is None when the entry closes

        Returns:
            The subscription id to pass to ``unsub``

        Raises:
            TypeError: If fn is not callable
        """
        if not callable(fn):
            raise TypeError(f"Listener for key '{key}' must be callable, got {type(fn).__name__}")

        with self._lock:
            if key == WILDCARD:
                return self._sub_global(fn)
            return self._create_entry(key).sub(fn)

    def unsub(self, sid: Union[SubscriptionId, str]) -> bool:
        """
        Unsubscribe a listener.

        Accepts the SubscriptionId returned by ``sub`` or its string form.

        Returns:
            True if the listener was removed, False if it was not found
        """
        if isinstance(sid, str):
            try:
                sid = SubscriptionId.parse(sid)
            except ValueError as e:
                self._logger.debug(f"Ignoring unsub: {e}")
                return False

        with self._lock:
            if sid.is_global:
                return self._unsub_global(sid)

            entry = self._entries.get(sid.key)
            if entry is None:
                return False
            return entry.unsub(sid)

    def close(self) -> None:
        """
        Close every entry and drop every global listener.

        Entry listeners are called with None as each entry closes. The store
        is empty afterwards and can be reused.
        """
        with self._lock:
            for key in list(self._entries):
                self._entries.pop(key).close()
            self._global_subscribers.clear()

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"PubSub(entries={len(self._entries)}, global_listeners={len(self._global_subscribers)})"

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close the store."""
        self.close()


def new(**kwargs) -> PubSub:
    """
    Create an empty store.

    Keyword arguments are passed to PubSub.
    """
    return PubSub(**kwargs)
