"""
Insertion-ordered registry with a first-occurrence-wins collision policy.

Used wherever the same entity can be registered more than once (a message
referenced by several operations). A later registration under an existing
key is ignored, so the output never depends on which duplicate came last.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class OrderedRegistry(Generic[K, V]):
    """An ordered mapping where the first value registered under a key is kept."""

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def register(self, key: K, value: V) -> bool:
        """
        Register value under key unless the key is already present.

        Returns:
            True if the entry was added, False if it was a duplicate
        """
        if key in self._entries:
            return False
        self._entries[key] = value
        return True

    def get(self, key: K, default: V | None = None) -> V | None:
        return self._entries.get(key, default)

    def keys(self) -> tuple[K, ...]:
        return tuple(self._entries)

    def values(self) -> tuple[V, ...]:
        return tuple(self._entries.values())

    def items(self) -> tuple[tuple[K, V], ...]:
        return tuple(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"OrderedRegistry({list(self._entries)!r})"
