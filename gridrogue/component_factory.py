"""Named factories that build components from entity template data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from gridrogue.component_manager import ComponentManager
from gridrogue.entity import Entity


@dataclass
class FactoryParameters:
    """A component description from a template: its id and extra properties."""

    id: str
    properties: dict[str, Any] = field(default_factory=dict)


class ComponentFactory(ABC):
    """Adds one kind of component to an entity from template parameters."""

    @abstractmethod
    def populate(
        self, entity: Entity, params: FactoryParameters, manager: ComponentManager
    ) -> None:
        """Add the component described by ``params`` to ``entity``."""


_FACTORIES: dict[str, ComponentFactory] = {}


def register_factory(component_id: str, factory: ComponentFactory) -> None:
    """Register ``factory`` under ``component_id``; duplicates raise ValueError."""
    if component_id in _FACTORIES:
        raise ValueError(f"a factory is already registered for {component_id!r}")
    _FACTORIES[component_id] = factory


def create_components(
    entity: Entity, params: FactoryParameters, manager: ComponentManager
) -> bool:
    """Run the factory registered for ``params.id``.

    Returns False, doing nothing, when no factory is registered for that id.
    """
    factory = _FACTORIES.get(params.id)
    if factory is None:
        return False
    factory.populate(entity, params, manager)
    return True