import uuid
from dataclasses import dataclass

import pytest

from gridrogue.component_factory import (
    ComponentFactory,
    FactoryParameters,
    create_components,
    register_factory,
)
from gridrogue.component_manager import Component, ComponentManager


@dataclass
class Tag(Component):
    label: str = ""


class TagFactory(ComponentFactory):
    def populate(self, entity, params, manager):
        tag = manager.add_component(entity, Tag)
        if "Label" in params.properties:
            tag.label = params.properties["Label"]


def _unique_id():
    return f"Tag-{uuid.uuid4()}"


def test_registered_factory_populates_entity():
    component_id = _unique_id()
    register_factory(component_id, TagFactory())
    manager = ComponentManager()

    handled = create_components(
        4, FactoryParameters(component_id, {"Label": "wall"}), manager
    )

    assert handled is True
    assert manager.get_component_checked(4, Tag).label == "wall"


def test_unknown_id_does_nothing():
    manager = ComponentManager()
    handled = create_components(1, FactoryParameters(_unique_id()), manager)
    assert handled is False
    assert manager.try_get_component(1, Tag) is None


def test_duplicate_registration_raises():
    component_id = _unique_id()
    register_factory(component_id, TagFactory())
    with pytest.raises(ValueError):
        register_factory(component_id, TagFactory())


def test_parameters_default_to_empty_properties():
    params = FactoryParameters("Anything")
    assert params.properties == {}
    other = FactoryParameters("Anything")
    params.properties["x"] = 1
    assert other.properties == {}


def test_base_factory_is_abstract():
    with pytest.raises(TypeError):
        ComponentFactory()