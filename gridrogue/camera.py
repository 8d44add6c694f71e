"""The camera that decides which part of the world is in view."""

from __future__ import annotations

from dataclasses import dataclass

from gridrogue.vector import IntVector2D, Vector2D


@dataclass
class Camera:
    """A camera positioned on the world grid."""

    position: IntVector2D = IntVector2D(0, 0)

    def to_view_space(self, world_position: IntVector2D | Vector2D) -> IntVector2D | Vector2D:
        """Return ``world_position`` relative to the camera."""
        if isinstance(world_position, Vector2D):
            return world_position - Vector2D(float(self.position.x), float(self.position.y))
        return world_position - self.position