"""Sets built on the maps of this package."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from objutil.maps import Map, StrKeyMap, SyncMap

__all__ = ["Set", "StrSet", "SyncSet"]

T = TypeVar("T")


class Set(Generic[T]):
    """A set of hashable elements."""

    def __init__(self, *elems: T) -> None:
        self._map: Map[T, Any] = self._new_map()
        self.add(*elems)

    def _new_map(self) -> Map[T, Any]:
        return Map()

    def add(self, *elems: T) -> None:
        """Add every given element."""
        for e in elems:
            self._map.put(e, None)

    def add_set(self, other: Iterable[T]) -> None:
        """Add every element of another set or iterable."""
        self.add(*other)

    def remove(self, e: T) -> bool:
        """Remove *e*; return whether it was present."""
        return self._map.remove(e)

    def remove_all(self, *elems: T) -> None:
        """Remove every given element."""
        self._map.remove_all(*elems)

    def contains(self, *elems: T) -> bool:
        """Return True if every given element is present."""
        return self._map.contains_keys(*elems)

    def contains_any(self, *elems: T) -> bool:
        """Return True if at least one given element is present."""
        return self._map.contains_any_keys(*elems)

    def is_empty(self) -> bool:
        """Return True if the set holds nothing."""
        return self._map.is_empty()

    def raw(self) -> list[T]:
        """Return the elements as a list."""
        return self._map.keys()

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[T]:
        return iter(self._map.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw()!r})"


class StrSet(Set[str]):
    """A set of strings, optionally compared without regard to case."""

    def __init__(self, case_sensitive: bool, *elems: str) -> None:
        self.case_sensitive = case_sensitive
        super().__init__(*elems)

    def _new_map(self) -> Map[str, Any]:
        return StrKeyMap(self.case_sensitive)


class SyncSet(Set[T]):
    """A set safe to use from several threads."""

    def __init__(self, *elems: T) -> None:
        super().__init__(*elems)

    def _new_map(self) -> Map[T, Any]:
        return SyncMap()