"""Collects draw calls during a frame and paints them onto a surface."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any

import pygame

from gridrogue.camera import Camera
from gridrogue.hashed_string import HashedString
from gridrogue.vector import IntVector2D, Vector2D


class DrawCallOrder(enum.Enum):
    """Layer a draw call belongs to; background is painted first."""

    BACKGROUND = 0
    FOREGROUND = 1


@dataclass(frozen=True)
class DrawCall:
    """One tile to paint at a world position."""

    texture_name: HashedString = HashedString("Default")
    world_position: Vector2D = Vector2D(0.0, 0.0)
    dest_rect_size: IntVector2D = IntVector2D(0, 0)


class Renderer:
    """Paints queued tiles from the tileset, centred on the camera."""

    CELL_SIZE = 32
    MAX_NUM_DRAW_CALLS = 2048
    BACKGROUND_CAPACITY = MAX_NUM_DRAW_CALLS * 3 // 4
    FOREGROUND_CAPACITY = MAX_NUM_DRAW_CALLS - BACKGROUND_CAPACITY - 1

    def __init__(self, surface: pygame.Surface, assets: Any, camera: Camera) -> None:
        if surface is None:
            raise ValueError("a target surface is required")
        self.surface = surface
        self.assets = assets
        self.camera = camera
        self._background: list[DrawCall] = []
        self._foreground: list[DrawCall] = []

    def draw(
        self,
        world_position: Vector2D | IntVector2D,
        dest_rect_size: IntVector2D,
        texture_name: HashedString,
        order: DrawCallOrder,
    ) -> None:
        """Queue a tile; raises OverflowError when its layer is full."""
        if order is DrawCallOrder.BACKGROUND:
            layer, capacity = self._background, self.BACKGROUND_CAPACITY
        else:
            layer, capacity = self._foreground, self.FOREGROUND_CAPACITY
        if len(layer) >= capacity:
            raise OverflowError(f"too many {order.name.lower()} draw calls in one frame")
        position = Vector2D(float(world_position.x), float(world_position.y))
        layer.append(DrawCall(texture_name, position, dest_rect_size))

    def pending_calls(self) -> list[DrawCall]:
        """Return the queued calls in paint order."""
        return [*self._background, *self._foreground]

    def present(self) -> None:
        """Clear the surface, paint every queued call, and empty the queue."""
        self.surface.fill((0, 0, 0))
        tileset = self.assets.tileset
        width, height = self.surface.get_size()
        camera_pos = self.camera.position

        for call in self.pending_calls():
            try:
                source = tileset.source_rects[call.texture_name]
            except KeyError:
                raise KeyError(f"no tile for {call.texture_name!r}") from None
            x = (call.world_position.x - camera_pos.x) * self.CELL_SIZE + width / 2
            y = (call.world_position.y - camera_pos.y) * self.CELL_SIZE + height / 2
            image = tileset.surface.subsurface(
                pygame.Rect(source.x, source.y, source.width, source.height)
            )
            size = (call.dest_rect_size.x, call.dest_rect_size.y)
            if image.get_size() != size:
                image = pygame.transform.scale(image, size)
            self.surface.blit(image, (math.floor(x), math.floor(y)))

        if pygame.display.get_init() and self.surface is pygame.display.get_surface():
            pygame.display.flip()

        self._background.clear()
        self._foreground.clear()