"""Entity identifiers."""

from __future__ import annotations

Entity = int

INVALID_ENTITY: Entity = 0


class EntityManager:
    """Hands out increasing entity identifiers starting at zero."""

    def __init__(self) -> None:
        self._next_id: Entity = 0
        self.active_entities: list[Entity] = []

    def new_entity_id(self) -> Entity:
        entity = self._next_id
        self._next_id += 1
        return entity