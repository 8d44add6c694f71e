import pytest

from gridrogue.component_factory import FactoryParameters, create_components
from gridrogue.component_manager import ComponentManager
from gridrogue.components import (
    CollisionComponent,
    CollisionComponentFactory,
    CreatureComponent,
    LocationComponent,
    LocationComponentFactory,
    MovementComponent,
    TextureRendererComponent,
    TextureRendererFactory,
    register_default_factories,
)
from gridrogue.hashed_string import HashedString
from gridrogue.renderer import DrawCallOrder
from gridrogue.vector import IntVector2D


def test_component_defaults():
    assert LocationComponent().world_location == IntVector2D(0, 0)
    assert MovementComponent().target_location == IntVector2D(0, 0)
    renderer = TextureRendererComponent()
    assert renderer.texture_name == HashedString("Default")
    assert renderer.order is DrawCallOrder.FOREGROUND


def test_marker_components_are_storable():
    manager = ComponentManager()
    manager.add_component(1, CreatureComponent)
    assert (1 in manager.container(CreatureComponent)) is True


def test_location_factory_adds_default_location():
    manager = ComponentManager()
    LocationComponentFactory().populate(3, FactoryParameters("LocationComponent"), manager)
    location = manager.get_component_checked(3, LocationComponent)
    assert location.world_location == IntVector2D(0, 0)


def test_collision_factory_adds_collision():
    manager = ComponentManager()
    CollisionComponentFactory().populate(4, FactoryParameters("CollisionComponent"), manager)
    container = manager.container(CollisionComponent)
    assert (4 in container) is True
    assert len(container) == 1


def test_texture_factory_reads_properties():
    manager = ComponentManager()
    params = FactoryParameters(
        "TextureRendererComponent", {"TextureName": "Wall", "Order": "Background"}
    )
    TextureRendererFactory().populate(5, params, manager)
    renderer = manager.get_component_checked(5, TextureRendererComponent)
    assert renderer.texture_name == HashedString("Wall")
    assert renderer.order is DrawCallOrder.BACKGROUND


def test_texture_factory_keeps_defaults_for_unknown_order():
    manager = ComponentManager()
    params = FactoryParameters("TextureRendererComponent", {"Order": "Sideways"})
    TextureRendererFactory().populate(6, params, manager)
    renderer = manager.get_component_checked(6, TextureRendererComponent)
    assert renderer.order is DrawCallOrder.FOREGROUND
    assert renderer.texture_name == HashedString("Default")


def test_texture_factory_rejects_non_string_name():
    manager = ComponentManager()
    params = FactoryParameters("TextureRendererComponent", {"TextureName": 5})
    with pytest.raises(TypeError):
        TextureRendererFactory().populate(7, params, manager)


def test_default_factories_are_registered():
    register_default_factories()
    register_default_factories()
    manager = ComponentManager()
    for component_id in ("CollisionComponent", "LocationComponent", "TextureRendererComponent"):
        assert create_components(8, FactoryParameters(component_id), manager) is True
    assert manager.try_get_component(8, LocationComponent) == LocationComponent()
    assert manager.try_get_component(8, CollisionComponent) == CollisionComponent()
    assert manager.try_get_component(8, TextureRendererComponent) == TextureRendererComponent()