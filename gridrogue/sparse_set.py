"""A sparse set keyed by entity, carrying one value per entity."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from gridrogue.entity import Entity

T = TypeVar("T")


class SparseSet(Generic[T]):
    """Dense storage of (entity, value) pairs with O(1) lookup and removal."""

    def __init__(self, default_factory: Callable[[], T]) -> None:
        self._default_factory = default_factory
        self._dense: list[list] = []
        self._sparse: dict[Entity, int] = {}

    def add_defaulted(self, entity: Entity) -> T:
        """Add a default value for ``entity`` unless present; return its value."""
        if entity in self._sparse:
            return self.get(entity)
        value = self._default_factory()
        self._dense.append([entity, value])
        self._sparse[entity] = len(self._dense) - 1
        return value

    def get(self, entity: Entity) -> T:
        """Return the value of ``entity``; raise KeyError if absent."""
        return self._dense[self._sparse[entity]][1]

    def set(self, entity: Entity, value: T) -> None:
        """Replace the value of ``entity``; raise KeyError if absent."""
        self._dense[self._sparse[entity]][1] = value

    def remove(self, entity: Entity) -> None:
        """Remove ``entity`` by swapping in the last entry; absent is a no-op."""
        index = self._sparse.get(entity)
        if index is None:
            return
        last = self._dense[-1]
        self._dense[index] = last
        self._sparse[last[0]] = index
        self._dense.pop()
        del self._sparse[entity]

    def __contains__(self, entity: object) -> bool:
        return entity in self._sparse

    def __len__(self) -> int:
        return len(self._dense)

    def __iter__(self) -> Iterator[tuple[Entity, T]]:
        for entity, value in list(self._dense):
            yield entity, value