"""The application that wires the game together, and the windowed entry point."""

from __future__ import annotations

import argparse
import os
import sys

import pygame

from gridrogue.asset_manager import AssetManager
from gridrogue.camera import Camera
from gridrogue.components import register_default_factories
from gridrogue.entity_factory import EntityFactory
from gridrogue.game import Game
from gridrogue.input import Input
from gridrogue.main_game_mode import MainGameMode
from gridrogue.renderer import Renderer

WINDOW_TITLE = "gridrogue"
WINDOW_SIZE = (640, 480)
KEY_REPEAT_DELAY_MS = 500
KEY_REPEAT_INTERVAL_MS = 30


class Application:
    """Owns the assets, renderer, input and game for one window."""

    def __init__(self, boot_dir: str | os.PathLike[str], surface: pygame.Surface) -> None:
        self.assets = AssetManager(boot_dir)
        self.camera = Camera()
        self.renderer = Renderer(surface, self.assets, self.camera)
        self.input = Input()
        self.entity_factory = EntityFactory()
        self.game = Game(self.renderer, self.input, self.entity_factory, self.camera)

    def initialize(self) -> None:
        """Load the content, then start the main game mode."""
        self._load_content()
        self.game.initialize(MainGameMode)

    def tick(self) -> None:
        self.game.tick()

    def pre_present(self) -> None:
        self.game.pre_present()

    def handle_input_event(self, key: int, is_key_down: bool) -> None:
        """Queue a key event for the next tick."""
        self.input.push_onto_input_buffer(key, is_key_down)

    def _load_content(self) -> None:
        register_default_factories()
        self.assets.load()
        self.entity_factory.load(self.assets)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridrogue", description="Play a small grid roguelike.")
    parser.add_argument(
        "boot_dir",
        nargs="?",
        default=os.getcwd(),
        help="directory holding the game's assets (default: the current directory)",
    )
    args = parser.parse_args(argv)

    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Couldn't initialize video: {exc}", file=sys.stderr)
        return 1

    try:
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as exc:
            print(f"Couldn't create window: {exc}", file=sys.stderr)
            return 1
        pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)

        app = Application(args.boot_dir, surface)
        try:
            app.initialize()
        except (OSError, ValueError, KeyError, pygame.error) as exc:
            print(f"Couldn't load content: {exc}", file=sys.stderr)
            return 1

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    app.handle_input_event(event.key, event.type == pygame.KEYDOWN)
            app.tick()
            app.pre_present()
            app.renderer.present()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())