"""Subscription identifiers for the kvpubsub store."""

from typing import Optional


# Key reserved for subscribing to every present and future entry
WILDCARD = "*"

# Namespace rendered in the string form of global subscription ids
GLOBAL_NAMESPACE = "global"


class SubscriptionId:
    """
    Identifies one listener registration.

    An id is either global (``key is None``) or scoped to the entry named by
    ``key``. The store routes ``unsub`` on that scope directly, so keys are
    free to contain underscores.

    The string form is ``"{namespace}_{sequence}"`` where namespace is
    ``"global"`` for global ids and the entry key otherwise.
    """

    __slots__ = ("_key", "_sequence")

    def __init__(self, key: Optional[str], sequence: int):
        """
        Initialize a subscription id.

        Args:
            key: The entry key, or None for a global subscription
            sequence: Counter value of the registry that minted this id
        """
        self._key = key
        self._sequence = sequence

    @property
    def key(self) -> Optional[str]:
        return self._key

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def is_global(self) -> bool:
        return self._key is None

    @property
    def namespace(self) -> str:
        return GLOBAL_NAMESPACE if self._key is None else self._key

    @classmethod
    def parse(cls, text: str) -> 'SubscriptionId':
        """
        Parse the string form of a subscription id.

        The sequence is read after the last underscore, so entry keys that
        contain underscores survive the round trip. An empty namespace is
        the empty key, and a namespace of ``"global"`` always parses to a
        global id.

        Args:
            text: A string such as ``"global_0"`` or ``"sensor_3"``

        Returns:
            The parsed SubscriptionId

        Raises:
            ValueError: If text is not of the form ``{namespace}_{n}``
        """
        namespace, sep, sequence = text.rpartition("_")
        if not sep or not sequence.isdigit():
            raise ValueError(f"Invalid subscription id '{text}'. Expected '{{namespace}}_{{n}}'.")

        key = None if namespace == GLOBAL_NAMESPACE else namespace
        return cls(key, int(sequence))

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubscriptionId):
            return NotImplemented
        return self._key == other._key and self._sequence == other._sequence

    def __hash__(self) -> int:
        return hash((self._key, self._sequence))

    def __str__(self) -> str:
        return f"{self.namespace}_{self._sequence}"

    def __repr__(self) -> str:
        return f"SubscriptionId(key={self._key!r}, sequence={self._sequence})"
