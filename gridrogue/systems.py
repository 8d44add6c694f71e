"""The game's systems: creature AI, grid movement and tile rendering."""

from __future__ import annotations

from gridrogue.components import (
    CollisionComponent,
    CreatureComponent,
    LocationComponent,
    MovementComponent,
    TextureRendererComponent,
)
from gridrogue.entity import INVALID_ENTITY, Entity
from gridrogue.system import System
from gridrogue.vector import IntVector2D

TILE_SIZE = 32


class CreatureAISystem(System):
    """Points every creature other than the player at the player's location."""

    def execute(self) -> None:
        game_mode = self.game.game_mode
        if game_mode is None:
            return
        manager = self.level.component_manager

        def chase(
            entity: Entity,
            location: LocationComponent,
            creature: CreatureComponent,
            movement: MovementComponent,
        ) -> None:
            possessed = game_mode.possessed_entity
            if possessed == INVALID_ENTITY or possessed == entity:
                return
            target = manager.try_get_component(possessed, LocationComponent)
            if target is None:
                return
            movement.target_location = target.world_location

        self.query(
            chase, LocationComponent, CreatureComponent, MovementComponent, with_entity=True
        )


class MovementSystem(System):
    """Moves entities one step toward their target unless the step is blocked."""

    def execute(self) -> None:
        def step(entity: Entity, location: LocationComponent, movement: MovementComponent) -> None:
            direction = (movement.target_location - location.world_location).normalized()
            new_position = location.world_location + direction
            if not self.is_valid_move(entity, location.world_location, new_position):
                return
            location.world_location = new_position

        self.query(step, LocationComponent, MovementComponent, with_entity=True)

    def is_valid_move(
        self, entity: Entity, current_position: IntVector2D, target_position: IntVector2D
    ) -> bool:
        """Return True unless a colliding entity stands on ``target_position``."""
        return not self.any(
            lambda location, _collision: location.world_location == target_position,
            LocationComponent,
            CollisionComponent,
        )


class RenderingSystem(System):
    """Queues a draw call for every entity that has a location and a texture."""

    def execute(self) -> None:
        renderer = self.game.renderer
        size = IntVector2D(TILE_SIZE, TILE_SIZE)

        def draw(location: LocationComponent, render_data: TextureRendererComponent) -> None:
            renderer.draw(location.world_location, size, render_data.texture_name, render_data.order)

        self.query(draw, LocationComponent, TextureRendererComponent)