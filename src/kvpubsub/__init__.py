"""
kvpubsub - An in-process keyed publish-subscribe store.

Values are published under string keys and delivered synchronously to
listeners of that key, or to wildcard listeners subscribed to every key.
"""

__version__ = "1.0.0"

from .subscription import SubscriptionId, WILDCARD, GLOBAL_NAMESPACE
from .registry import SubscriberRegistry
from .entry import Entry
from .store import PubSub, new

__all__ = [
    "PubSub",
    "Entry",
    "SubscriberRegistry",
    "SubscriptionId",
    "WILDCARD",
    "GLOBAL_NAMESPACE",
    "new"
]
