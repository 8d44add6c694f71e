"""Systems that run over components, and the scheduler that ticks them."""

from __future__ import annotations

import bisect
import enum
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any

from gridrogue.component_manager import Component, ComponentManager


class SystemCategory(enum.IntFlag):
    """When a system is ticked."""

    NONE = 0
    GAME_TIME = 1 << 0
    REAL_TIME = 1 << 1
    RENDER_TIME = 1 << 2


class System(ABC):
    """A unit of game logic working on the current level's components."""

    def __init__(self, game: Any) -> None:
        self.game = game

    @property
    def priority(self) -> int:
        """Scheduling key; systems with lower values run first."""
        return 0

    @abstractmethod
    def execute(self) -> None:
        """Run the system once."""

    @property
    def level(self) -> Any:
        """The level the owning game is currently playing."""
        return self.game.level

    def _component_manager(self) -> ComponentManager:
        return self.level.component_manager

    def query(
        self,
        func: Callable[..., Any],
        *args: type[Component],
        with_entity: bool = False,
    ) -> None:
        """Call ``func`` for every entity that owns all component types in ``args``."""
        self._component_manager().create_iterator(*args, with_entity=with_entity).execute(func)

    def any(self, predicate: Callable[..., bool], *args: type[Component]) -> bool:
        """Return True if ``predicate(*components)`` holds for some entity."""
        return self._component_manager().create_iterator(*args, with_entity=True).any(predicate)


class SystemScheduler:
    """Runs registered systems in ascending priority, ties in registration order."""

    def __init__(self) -> None:
        self._systems: list[System] = []
        self._priorities: list[int] = []

    def register(self, system: System) -> None:
        index = bisect.bisect_right(self._priorities, system.priority)
        self._priorities.insert(index, system.priority)
        self._systems.insert(index, system)

    def tick(self) -> None:
        for system in list(self._systems):
            system.execute()

    def __iter__(self) -> Iterator[System]:
        return iter(list(self._systems))

    def __len__(self) -> int:
        return len(self._systems)