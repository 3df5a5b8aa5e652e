"""Key-value store abstractions."""

import copy
from dataclasses import dataclass
from typing import Protocol


class KeyValueStore(Protocol):
    """Store for JSON-serializable values addressed by key."""

    def get(self, key: str, default: object = None) -> object:
        """Return the stored value or the default when the key is absent."""

    def set(self, key: str, value: object) -> None:
        """Store a value under a key, replacing any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory store used for local runs and tests."""

    _values: dict[str, object]

    def __init__(self) -> None:
        self._values = {}

    def get(self, key: str, default: object = None) -> object:
        """Return a copy of the stored value."""
        if key not in self._values:
            return default
        return copy.deepcopy(self._values[key])

    def set(self, key: str, value: object) -> None:
        """Store a copy of the value."""
        self._values[key] = copy.deepcopy(value)
