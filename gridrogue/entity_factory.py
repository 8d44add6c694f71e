"""Entity templates read from JSON and used to populate entities."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from gridrogue.component_factory import FactoryParameters, create_components
from gridrogue.component_manager import ComponentManager
from gridrogue.components import LocationComponent
from gridrogue.entity import Entity
from gridrogue.vector import IntVector2D

ENTITY_DIRECTORY = "Entities/"


@dataclass
class EntityTemplate:
    """A named recipe of components, optionally built on other templates."""

    id: str
    components: list[FactoryParameters] = field(default_factory=list)
    composites: list[str] = field(default_factory=list)


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string")
    return value


def parse_template(data: dict[str, Any]) -> EntityTemplate:
    """Build a template from its JSON object; raise ValueError if it is malformed."""
    if "Id" not in data:
        raise ValueError("template has no Id")
    template_id = _require_str(data["Id"], "template Id")

    composites = data.get("Composites", [])
    if not isinstance(composites, list):
        raise ValueError("Composites must be a list")
    composites = [_require_str(item, "composite id") for item in composites]

    if "Components" not in data:
        raise ValueError(f"template {template_id!r} has no Components")

    components = []
    for component in data["Components"]:
        if "Id" not in component:
            raise ValueError(f"a component of {template_id!r} has no Id")
        properties = {key: value for key, value in component.items() if key != "Id"}
        components.append(FactoryParameters(_require_str(component["Id"], "component Id"), properties))

    return EntityTemplate(template_id, components, composites)


class EntityFactory:
    """Holds entity templates by id and applies them to entities."""

    def __init__(self) -> None:
        self.templates: dict[str, EntityTemplate] = {}

    def load(self, assets: Any) -> None:
        """Read every template file in the assets' entity directory; malformed ones are skipped."""
        for path in assets.get_assets(ENTITY_DIRECTORY):
            with open(path, encoding="utf-8") as stream:
                data = json.load(stream)
            try:
                template = parse_template(data)
            except ValueError:
                continue
            self.add_template(template)

    def add_template(self, template: EntityTemplate) -> bool:
        """Add ``template`` unless its id is taken; return whether it was added."""
        if template.id in self.templates:
            return False
        self.templates[template.id] = template
        return True

    def populate_entity(
        self,
        entity: Entity,
        template_id: str,
        manager: ComponentManager,
        world_location: IntVector2D | None = None,
    ) -> None:
        """Give ``entity`` the components of the template and its composites.

        Raises KeyError for an unknown template id.
        """
        try:
            template = self.templates[template_id]
        except KeyError:
            raise KeyError(f"unknown entity template {template_id!r}") from None

        for composite_id in template.composites:
            self.populate_entity(entity, composite_id, manager)

        for params in template.components:
            create_components(entity, params, manager)

        if world_location is not None:
            location = manager.try_get_component(entity, LocationComponent)
            if location is not None:
                location.world_location = world_location