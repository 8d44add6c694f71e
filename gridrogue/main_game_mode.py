"""The main game mode: a walled room, a player and a few chasing enemies."""

from __future__ import annotations

import pygame

from gridrogue.components import (
    CollisionComponent,
    CreatureComponent,
    LocationComponent,
    MovementComponent,
    TextureRendererComponent,
)
from gridrogue.entity import INVALID_ENTITY, Entity
from gridrogue.game_mode import GameMode
from gridrogue.hashed_string import HashedString
from gridrogue.input_action import AxisInputAction, InputEventType
from gridrogue.renderer import DrawCallOrder
from gridrogue.system import SystemCategory
from gridrogue.systems import CreatureAISystem, MovementSystem
from gridrogue.vector import IntVector2D

ROOM_SIZE = 32
PLAYER_START = IntVector2D(5, 5)
ENEMY_SPAWN_POSITIONS = (IntVector2D(10, 5), IntVector2D(5, 10), IntVector2D(11, 12))

_HORIZONTAL_KEYS = ((pygame.K_d, 1), (pygame.K_a, -1), (pygame.K_RIGHT, 1), (pygame.K_LEFT, -1))
_VERTICAL_KEYS = ((pygame.K_w, -1), (pygame.K_s, 1), (pygame.K_UP, -1), (pygame.K_DOWN, 1))


class MainGameMode(GameMode):
    """Builds the room and lets the player take one step per round."""

    def initialize(self) -> None:
        level = self.game.level
        manager = level.component_manager

        last = ROOM_SIZE - 1
        for x in range(ROOM_SIZE):
            for y in range(ROOM_SIZE):
                is_wall = x in (0, last) or y in (0, last)
                level.create_entity("Wall" if is_wall else "Floor", IntVector2D(x, y))

        player = self.create_creature()
        self.possessed_entity = player
        self._place(manager, player, PLAYER_START, "Player")

        for position in ENEMY_SPAWN_POSITIONS:
            self._place(manager, self.create_creature(), position, "Enemy")

        self._register_input()

        self.game.create_system(CreatureAISystem, SystemCategory.GAME_TIME)
        self.game.create_system(MovementSystem, SystemCategory.GAME_TIME)

    @staticmethod
    def _place(manager, entity: Entity, position: IntVector2D, texture: str) -> None:
        manager.get_component_checked(entity, LocationComponent).world_location = position
        render = manager.get_component_checked(entity, TextureRendererComponent)
        render.texture_name = HashedString(texture)
        render.order = DrawCallOrder.FOREGROUND

    def _register_input(self) -> None:
        for keys, horizontal in ((_HORIZONTAL_KEYS, True), (_VERTICAL_KEYS, False)):
            action = AxisInputAction()
            for keycode, value in keys:
                action.add_keycode_axis(keycode, value, InputEventType.DOWN_OR_HELD)
            action.add_callback(
                lambda value, horizontal=horizontal: self.handle_movement_input(value, horizontal)
            )
            self.game.input.register_action(action)

    def handle_movement_input(self, value: int, is_horizontal: bool) -> None:
        """Aim the player one step along an axis and start a round if the step is free."""
        possessed = self.possessed_entity
        if possessed == INVALID_ENTITY:
            return

        manager = self.game.level.component_manager
        movement = manager.get_component_checked(possessed, MovementComponent)
        location = manager.get_component_checked(possessed, LocationComponent)

        offset = IntVector2D(value, 0) if is_horizontal else IntVector2D(0, value)
        movement.target_location = location.world_location + offset

        movement_system = self.game.get_system(MovementSystem)
        if movement_system is None:
            raise RuntimeError("no movement system is running")
        if movement_system.is_valid_move(
            possessed, location.world_location, movement.target_location
        ):
            self.game.start_round()

    def create_creature(self, target: Entity = INVALID_ENTITY) -> Entity:
        """Give ``target`` (or a new entity) every creature component; return it."""
        level = self.game.level
        manager = level.component_manager
        if target == INVALID_ENTITY:
            target = level.create_entity()
        for component_type in (
            LocationComponent,
            CreatureComponent,
            TextureRendererComponent,
            CollisionComponent,
            MovementComponent,
        ):
            manager.add_component(target, component_type)
        return target