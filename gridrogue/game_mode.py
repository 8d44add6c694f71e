"""Game modes and other objects bound to a running game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gridrogue.entity import INVALID_ENTITY, Entity


class GameComponent:
    """An object that belongs to a game."""

    def __init__(self, game: Any) -> None:
        if game is None:
            raise ValueError("a game is required")
        self._game = game

    @property
    def game(self) -> Any:
        return self._game


class GameMode(GameComponent, ABC):
    """Rules of play; tracks the entity the player controls."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self._possessed_entity: Entity = INVALID_ENTITY

    @abstractmethod
    def initialize(self) -> None:
        """Set up the level for this mode."""

    @property
    def possessed_entity(self) -> Entity:
        """The player-controlled entity, or INVALID_ENTITY if there is none."""
        return self._possessed_entity

    @possessed_entity.setter
    def possessed_entity(self, entity: Entity) -> None:
        self._possessed_entity = entity