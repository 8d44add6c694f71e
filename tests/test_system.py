from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from gridrogue.component_manager import Component, ComponentManager
from gridrogue.system import System, SystemScheduler


@dataclass
class Position(Component):
    x: int = 0


@dataclass
class Solid(Component):
    pass


def _make_game():
    return SimpleNamespace(level=SimpleNamespace(component_manager=ComponentManager()))


class Recorder(System):
    def __init__(self, game, name, prio, log):
        super().__init__(game)
        self.name = name
        self._prio = prio
        self.log = log

    @property
    def priority(self):
        return self._prio

    def execute(self):
        self.log.append(self.name)


class Mover(System):
    def execute(self):
        def move(position):
            position.x += 1

        self.query(move, Position)


def test_scheduler_orders_by_ascending_priority():
    game = _make_game()
    log = []
    scheduler = SystemScheduler()
    scheduler.register(Recorder(game, "high", 5, log))
    scheduler.register(Recorder(game, "low", -1, log))
    scheduler.register(Recorder(game, "mid", 0, log))

    scheduler.tick()

    assert log == ["low", "mid", "high"]
    assert len(scheduler) == 3


def test_scheduler_keeps_registration_order_for_ties():
    game = _make_game()
    log = []
    scheduler = SystemScheduler()
    for name in ("first", "second", "third"):
        scheduler.register(Recorder(game, name, 0, log))
    scheduler.tick()
    scheduler.tick()
    assert log == ["first", "second", "third"] * 2
    assert [s.name for s in scheduler] == ["first", "second", "third"]


def test_default_priority_is_zero():
    assert Mover(_make_game()).priority == 0


def test_level_comes_from_game():
    game = _make_game()
    assert Mover(game).level is game.level


def test_query_mutates_components():
    game = _make_game()
    manager = game.level.component_manager
    pos = manager.add_component(3, Position)
    mover = Mover(game)
    mover.execute()
    mover.execute()
    assert pos.x == 2


def test_query_with_entity_filters_by_all_types():
    game = _make_game()
    manager = game.level.component_manager
    manager.add_component(1, Position)
    manager.add_component(2, Position)
    manager.add_component(2, Solid)
    system = Mover(game)

    seen = []
    system.query(lambda entity, pos, solid: seen.append(entity), Position, Solid, with_entity=True)

    assert seen == [2]


def test_any_checks_components_only():
    game = _make_game()
    manager = game.level.component_manager
    manager.add_component(1, Position).x = 7
    manager.add_component(1, Solid)
    manager.add_component(2, Position).x = 9
    system = Mover(game)

    assert system.any(lambda pos, solid: pos.x == 7, Position, Solid) is True
    assert system.any(lambda pos, solid: pos.x == 9, Position, Solid) is False


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System(_make_game())