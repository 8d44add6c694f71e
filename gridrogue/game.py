"""The running game: its level, game mode, systems and per-frame flow."""

from __future__ import annotations

from typing import Any, TypeVar

from gridrogue.camera import Camera
from gridrogue.component_manager import ComponentManager
from gridrogue.components import LocationComponent
from gridrogue.entity import INVALID_ENTITY, Entity
from gridrogue.entity_factory import EntityFactory
from gridrogue.game_mode import GameMode
from gridrogue.input import Input
from gridrogue.system import System, SystemCategory, SystemScheduler
from gridrogue.systems import RenderingSystem
from gridrogue.vector import IntVector2D

S = TypeVar("S", bound=System)
M = TypeVar("M", bound=GameMode)


class Level:
    """The world being played: owns every component of every entity."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.component_manager = ComponentManager()

    def create_entity(
        self, template_id: str | None = None, position: IntVector2D | None = None
    ) -> Entity:
        """Allocate an entity, populating it from ``template_id`` when given."""
        if template_id is None:
            if position is not None:
                raise ValueError("a position can only be given with a template id")
            return self.game.next_entity()
        entity = self.game.next_entity()
        self.game.entity_factory.populate_entity(
            entity, template_id, self.component_manager, position
        )
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Remove every component of ``entity``."""
        self.component_manager.remove_entity(entity)


class Game:
    """Drives the systems of one level under one game mode."""

    def __init__(
        self,
        renderer: Any,
        input: Input,
        entity_factory: EntityFactory,
        camera: Camera,
    ) -> None:
        self.renderer = renderer
        self.input = input
        self.entity_factory = entity_factory
        self.camera = camera
        self._current_entity: Entity = 0
        # Ticks once per game round.
        self._game_time_systems = SystemScheduler()
        # Ticks once per frame.
        self._real_time_systems = SystemScheduler()
        # Ticks once per frame, after the real-time systems.
        self._render_time_systems = SystemScheduler()
        self._systems: list[System] = []
        self._level = Level(self)
        self._game_mode: GameMode | None = None

    @property
    def level(self) -> Level:
        return self._level

    @property
    def game_mode(self) -> GameMode | None:
        return self._game_mode

    def initialize(self, game_mode_type: type[M]) -> M:
        """Start ``game_mode_type`` with a rendering system in place; return the mode."""
        game_mode = game_mode_type(self)
        self._game_mode = game_mode
        self.create_system(RenderingSystem, SystemCategory.RENDER_TIME)
        game_mode.initialize()
        return game_mode

    def tick(self) -> None:
        """Deliver buffered input, then run the real-time systems."""
        self.input.process_input_buffer()
        self._real_time_systems.tick()

    def start_round(self) -> None:
        """Run the game-time systems once."""
        self._game_time_systems.tick()

    def pre_present(self) -> None:
        """Run the render-time systems and move the camera to the player."""
        self._render_time_systems.tick()
        self._update_camera_position()

    def next_entity(self) -> Entity:
        """Return a fresh entity identifier."""
        entity = self._current_entity
        self._current_entity += 1
        return entity

    def create_system(self, system_type: type[S], category: SystemCategory) -> S:
        """Create a system and schedule it in every category set in ``category``."""
        category = SystemCategory(category)
        if not category:
            raise ValueError("a system needs at least one category")
        system = system_type(self)
        self._systems.append(system)
        if category & SystemCategory.GAME_TIME:
            self._game_time_systems.register(system)
        if category & SystemCategory.REAL_TIME:
            self._real_time_systems.register(system)
        if category & SystemCategory.RENDER_TIME:
            self._render_time_systems.register(system)
        return system

    def get_system(self, system_type: type[S]) -> S | None:
        """Return the first created system of ``system_type``, or None."""
        return next((s for s in self._systems if isinstance(s, system_type)), None)

    def _update_camera_position(self) -> None:
        if self._game_mode is None:
            return
        possessed = self._game_mode.possessed_entity
        # Without a possessed entity the camera stays where it is.
        if possessed == INVALID_ENTITY:
            return
        location = self._level.component_manager.try_get_component(possessed, LocationComponent)
        if location is None:
            return
        self.camera.position = location.world_location