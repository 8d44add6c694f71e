import pygame
import pytest

from gridrogue.camera import Camera
from gridrogue.component_factory import FactoryParameters
from gridrogue.components import (
    CollisionComponent,
    LocationComponent,
    TextureRendererComponent,
    register_default_factories,
)
from gridrogue.entity_factory import EntityFactory, EntityTemplate
from gridrogue.game import Game
from gridrogue.game_mode import GameMode
from gridrogue.input import Input
from gridrogue.input_action import DiscreteInputAction
from gridrogue.renderer import Renderer
from gridrogue.system import System, SystemCategory
from gridrogue.systems import RenderingSystem
from gridrogue.vector import IntVector2D

WALL = EntityTemplate(
    "Wall",
    [
        FactoryParameters("LocationComponent"),
        FactoryParameters("CollisionComponent"),
        FactoryParameters("TextureRendererComponent", {"TextureName": "Wall", "Order": "Background"}),
    ],
)


def make_game():
    register_default_factories()
    camera = Camera()
    factory = EntityFactory()
    factory.add_template(WALL)
    renderer = Renderer(pygame.Surface((64, 64)), None, camera)
    return Game(renderer, Input(), factory, camera)


class IdleMode(GameMode):
    def initialize(self):
        self.ready = True


class Recorder(System):
    def __init__(self, game):
        super().__init__(game)
        self.runs = 0

    def execute(self):
        self.runs += 1


def test_next_entity_counts_from_zero():
    game = make_game()
    assert [game.next_entity() for _ in range(3)] == list(range(3))


def test_create_entity_without_template_is_empty():
    game = make_game()
    entity = game.level.create_entity()
    assert entity == 0
    assert game.level.component_manager.try_get_component(entity, LocationComponent) is None


def test_create_entity_from_template_at_position():
    game = make_game()
    manager = game.level.component_manager
    entity = game.level.create_entity("Wall", IntVector2D(3, 1))
    assert manager.get_component_checked(entity, LocationComponent).world_location == IntVector2D(3, 1)
    assert manager.try_get_component(entity, CollisionComponent) == CollisionComponent()


def test_create_entity_unknown_template_raises():
    game = make_game()
    with pytest.raises(KeyError):
        game.level.create_entity("Nothing")


def test_position_needs_template():
    game = make_game()
    with pytest.raises(ValueError):
        game.level.create_entity(None, IntVector2D(1, 1))


def test_destroy_entity_removes_components():
    game = make_game()
    manager = game.level.component_manager
    entity = game.level.create_entity("Wall", IntVector2D(2, 2))
    game.level.destroy_entity(entity)
    assert manager.try_get_component(entity, LocationComponent) is None
    assert manager.try_get_component(entity, TextureRendererComponent) is None


def test_create_system_requires_category():
    game = make_game()
    with pytest.raises(ValueError):
        game.create_system(Recorder, SystemCategory.NONE)


def test_categories_decide_when_systems_run():
    game = make_game()
    system = game.create_system(Recorder, SystemCategory.GAME_TIME | SystemCategory.RENDER_TIME)
    game.tick()
    assert system.runs == 0
    game.start_round()
    assert system.runs == 1
    game.pre_present()
    assert system.runs == 2


def test_real_time_systems_run_on_tick():
    game = make_game()
    system = game.create_system(Recorder, SystemCategory.REAL_TIME)
    game.tick()
    game.start_round()
    assert system.runs == 1


def test_lower_priority_runs_first():
    order = []

    class Late(System):
        @property
        def priority(self):
            return 5

        def execute(self):
            order.append("late")

    class Early(System):
        def execute(self):
            order.append("early")

    game = make_game()
    late = game.create_system(Late, SystemCategory.GAME_TIME)
    early = game.create_system(Early, SystemCategory.GAME_TIME)
    game.start_round()
    assert order == ["early", "late"]
    assert game.get_system(Late) is late
    assert game.get_system(Early) is early
    assert (early.priority, late.priority) == (0, 5)


def test_get_system():
    game = make_game()
    created = game.create_system(Recorder, SystemCategory.GAME_TIME)
    assert game.get_system(Recorder) is created
    assert game.get_system(RenderingSystem) is None


def test_initialize_sets_up_mode_and_rendering():
    game = make_game()
    mode = game.initialize(IdleMode)
    assert game.game_mode is mode
    assert mode.ready is True
    assert game.get_system(RenderingSystem).game is game


def test_pre_present_follows_possessed_entity_and_draws():
    game = make_game()
    mode = game.initialize(IdleMode)
    entity = game.level.create_entity("Wall", IntVector2D(4, 6))
    mode.possessed_entity = entity
    game.pre_present()
    assert game.camera.position == IntVector2D(4, 6)
    assert len(game.renderer.pending_calls()) == 1


def test_camera_stays_without_possessed_entity():
    game = make_game()
    game.initialize(IdleMode)
    game.camera.position = IntVector2D(2, 2)
    game.level.create_entity("Wall", IntVector2D(4, 6))
    game.pre_present()
    assert game.camera.position == IntVector2D(2, 2)


def test_tick_processes_input_once():
    game = make_game()
    presses = []
    action = DiscreteInputAction()
    action.add_keycode(pygame.K_a)
    action.add_callback(lambda: presses.append(pygame.K_a))
    game.input.register_action(action)
    game.input.push_onto_input_buffer(pygame.K_a, True)
    game.tick()
    game.tick()
    assert presses == [pygame.K_a]