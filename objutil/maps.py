"""Maps that remember the original key of each entry."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

__all__ = ["Entry", "Map", "StrKeyMap", "SyncMap"]

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Entry(Generic[K, V]):
    """A key as it was given, and its value."""

    key: K
    value: V


class Map(Generic[K, V]):
    """A mapping whose lookup key may be a normalised form of the given key."""

    def __init__(self) -> None:
        self._entries: dict[Any, Entry[K, V]] = {}

    def _key(self, k: K) -> Any:
        return k

    def put(self, k: K, v: V) -> None:
        """Store *v* under *k*, replacing any entry with the same lookup key."""
        self._entries[self._key(k)] = Entry(k, v)

    def put_all(self, other: Any) -> None:
        """Store every pair of another map or mapping."""
        for k, v in list(other.items()):
            self.put(k, v)

    def get_entry(self, k: K) -> Entry[K, V] | None:
        """Return the entry for *k*, or None."""
        return self._entries.get(self._key(k))

    def get(self, k: K, default: Any = None) -> Any:
        """Return the value for *k*, or *default*."""
        entry = self.get_entry(k)
        return entry.value if entry is not None else default

    def get_if_absent(self, k: K, f: Callable[[K], V]) -> V:
        """Return the value for *k*, storing ``f(k)`` first if there is none."""
        entry = self.get_entry(k)
        if entry is not None:
            return entry.value
        value = f(k)
        self.put(k, value)
        return value

    def remove(self, k: K) -> bool:
        """Remove *k*; return whether it was present."""
        return self._entries.pop(self._key(k), None) is not None

    def remove_all(self, *ks: K) -> None:
        """Remove every given key."""
        for k in ks:
            self.remove(k)

    def contains_keys(self, *ks: K) -> bool:
        """Return True if every given key is present."""
        return all(self._key(k) in self._entries for k in ks)

    def contains_any_keys(self, *ks: K) -> bool:
        """Return True if at least one given key is present."""
        return any(self._key(k) in self._entries for k in ks)

    def keys(self) -> list[K]:
        """Return the stored keys as they were given."""
        return [k for k, _ in self.items()]

    def values(self) -> list[V]:
        """Return the stored values."""
        return [v for _, v in self.items()]

    def items(self) -> list[tuple[K, V]]:
        """Return a snapshot of the (key, value) pairs."""
        return [(e.key, e.value) for e in self._entries.values()]

    def is_empty(self) -> bool:
        """Return True if the map holds nothing."""
        return len(self) == 0

    def raw(self) -> dict[K, V]:
        """Return a plain dict of the stored pairs."""
        return dict(self.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw()!r})"


class StrKeyMap(Map[str, V]):
    """A map with string keys, optionally compared without regard to case."""

    def __init__(self, case_sensitive: bool) -> None:
        super().__init__()
        self.case_sensitive = case_sensitive

    def _key(self, k: str) -> str:
        return k if self.case_sensitive else k.casefold()


class SyncMap(Map[K, V]):
    """A map safe to use from several threads."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()

    def put(self, k: K, v: V) -> None:
        with self._lock:
            super().put(k, v)

    def get_entry(self, k: K) -> Entry[K, V] | None:
        with self._lock:
            return super().get_entry(k)

    def get_if_absent(self, k: K, f: Callable[[K], V]) -> V:
        with self._lock:
            return super().get_if_absent(k, f)

    def remove(self, k: K) -> bool:
        with self._lock:
            return super().remove(k)

    def contains_keys(self, *ks: K) -> bool:
        with self._lock:
            return super().contains_keys(*ks)

    def contains_any_keys(self, *ks: K) -> bool:
        with self._lock:
            return super().contains_any_keys(*ks)

    def items(self) -> list[tuple[K, V]]:
        with self._lock:
            return super().items()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()