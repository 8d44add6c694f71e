"""Per-type component storage and multi-component queries over entities."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from gridrogue.entity import Entity
from gridrogue.sparse_set import SparseSet

C = TypeVar("C", bound="Component")


class Component:
    """Base class for all components; subclasses must be default-constructible."""

    __slots__ = ()


def _check_component_type(component_type: object) -> None:
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} is not a Component subclass")


class ComponentContainer(Generic[C]):
    """Holds every component of one type, keyed by entity."""

    def __init__(self, component_type: type[C]) -> None:
        _check_component_type(component_type)
        self.component_type = component_type
        self._components: SparseSet[C] = SparseSet(component_type)

    def add(self, entity: Entity) -> C:
        """Give ``entity`` a default component unless it has one; return it."""
        return self._components.add_defaulted(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def remove_entity(self, entity: Entity) -> None:
        """Drop the component of ``entity``; absent entities are ignored."""
        self._components.remove(entity)

    def get(self, entity: Entity) -> C:
        """Return the component of ``entity``; raise KeyError if absent."""
        return self._components.get(entity)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[tuple[Entity, C]]:
        return iter(self._components)


class ComponentIterator:
    """Visits every entity that owns all of the given component types.

    The first component type drives the iteration order.
    """

    def __init__(
        self,
        manager: ComponentManager,
        component_types: Iterable[type[Component]],
        with_entity: bool = False,
    ) -> None:
        types = tuple(component_types)
        if not types:
            raise ValueError("at least one component type is required")
        self._containers = tuple(manager.container(t) for t in types)
        self._with_entity = with_entity

    def _matches(self) -> Iterator[tuple[Entity, tuple[Component, ...]]]:
        driver = self._containers[0]
        for entity, _ in driver:
            if all(entity in container for container in self._containers):
                yield entity, tuple(container.get(entity) for container in self._containers)

    def execute(self, func: Callable[..., Any]) -> None:
        """Call ``func`` with the components (preceded by the entity if requested)."""
        for entity, components in self._matches():
            if self._with_entity:
                func(entity, *components)
            else:
                func(*components)

    def any(self, predicate: Callable[..., bool]) -> bool:
        """Return True if ``predicate(*components)`` holds for some entity."""
        return any(predicate(*components) for _, components in self._matches())

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for entity, components in self._matches():
            yield (entity, *components) if self._with_entity else components


class ComponentManager:
    """Owns one container per component type."""

    def __init__(self) -> None:
        self._containers: dict[type[Component], ComponentContainer[Any]] = {}

    def container(self, component_type: type[C]) -> ComponentContainer[C]:
        """Return the container for ``component_type``, creating it on first use."""
        try:
            return self._containers[component_type]
        except KeyError:
            created = ComponentContainer(component_type)
            self._containers[component_type] = created
            return created

    def add_component(self, entity: Entity, component_type: type[C]) -> C:
        """Attach a component of ``component_type`` to ``entity`` and return it."""
        return self.container(component_type).add(entity)

    def remove_entity(self, entity: Entity) -> None:
        """Remove every component that ``entity`` owns."""
        for container in self._containers.values():
            container.remove_entity(entity)

    def try_get_component(self, entity: Entity, component_type: type[C]) -> C | None:
        """Return the component of ``entity`` or None if it has none."""
        container = self.container(component_type)
        if entity not in container:
            return None
        return container.get(entity)

    def get_component_checked(self, entity: Entity, component_type: type[C]) -> C:
        """Return the component of ``entity``; raise KeyError if it has none."""
        container = self.container(component_type)
        if entity not in container:
            raise KeyError(f"entity {entity} has no {component_type.__name__}")
        return container.get(entity)

    def create_iterator(
        self, *args: type[Component], with_entity: bool = False
    ) -> ComponentIterator:
        """Return an iterator over entities owning all of ``args``."""
        return ComponentIterator(self, args, with_entity)