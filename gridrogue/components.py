"""The game's components and the factories that build them from templates."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from gridrogue.component_factory import ComponentFactory, FactoryParameters, register_factory
from gridrogue.component_manager import Component, ComponentManager
from gridrogue.entity import Entity
from gridrogue.hashed_string import HashedString
from gridrogue.renderer import DrawCallOrder
from gridrogue.vector import IntVector2D


@dataclass
class LocationComponent(Component):
    """Where an entity stands on the grid."""

    world_location: IntVector2D = IntVector2D(0, 0)


@dataclass
class MovementComponent(Component):
    """Where an entity wants to move to."""

    target_location: IntVector2D = IntVector2D(0, 0)


@dataclass
class CreatureComponent(Component):
    """Marks an entity as a creature."""


@dataclass
class CollisionComponent(Component):
    """Marks an entity as blocking movement."""


@dataclass
class TextureRendererComponent(Component):
    """Which tile draws an entity, and on which layer."""

    texture_name: HashedString = HashedString("Default")
    order: DrawCallOrder = DrawCallOrder.FOREGROUND


class CollisionComponentFactory(ComponentFactory):
    def populate(self, entity: Entity, params: FactoryParameters, manager: ComponentManager) -> None:
        manager.add_component(entity, CollisionComponent)


class LocationComponentFactory(ComponentFactory):
    def populate(self, entity: Entity, params: FactoryParameters, manager: ComponentManager) -> None:
        manager.add_component(entity, LocationComponent)


_ORDERS = {"Background": DrawCallOrder.BACKGROUND, "Foreground": DrawCallOrder.FOREGROUND}


def _text_property(params: FactoryParameters, name: str) -> str | None:
    value = params.properties.get(name)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"property {name!r} must be a string, not {type(value).__name__}")
    return value


class TextureRendererFactory(ComponentFactory):
    """Reads the optional ``TextureName`` and ``Order`` properties."""

    def populate(self, entity: Entity, params: FactoryParameters, manager: ComponentManager) -> None:
        renderer = manager.add_component(entity, TextureRendererComponent)

        texture_name = _text_property(params, "TextureName")
        if texture_name is not None:
            renderer.texture_name = HashedString(texture_name)

        order = _text_property(params, "Order")
        if order in _ORDERS:
            renderer.order = _ORDERS[order]


@functools.cache
def register_default_factories() -> None:
    """Register the built-in component factories; later calls do nothing."""
    register_factory("CollisionComponent", CollisionComponentFactory())
    register_factory("LocationComponent", LocationComponentFactory())
    register_factory("TextureRendererComponent", TextureRendererFactory())