"""Two-dimensional integer and float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Smallest positive single-precision step above 1.0.
_FLT_EPSILON = 1.1920928955078125e-07


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


@dataclass(frozen=True, slots=True)
class IntVector2D:
    """An integer grid vector."""

    x: int = 0
    y: int = 0

    def __add__(self, other: IntVector2D) -> IntVector2D:
        if not isinstance(other, IntVector2D):
            return NotImplemented
        return IntVector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: IntVector2D) -> IntVector2D:
        if not isinstance(other, IntVector2D):
            return NotImplemented
        return IntVector2D(self.x - other.x, self.y - other.y)

    def normalized(self) -> IntVector2D:
        """Divide both parts by the truncated length; zero stays zero."""
        length = int(math.sqrt(self.x * self.x + self.y * self.y))
        if length == 0:
            return self
        return IntVector2D(_trunc_div(self.x, length), _trunc_div(self.y, length))


@dataclass(frozen=True, slots=True)
class Vector2D:
    """A floating-point vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def normalized(self) -> Vector2D:
        """Scale to unit length; vectors shorter than epsilon are unchanged."""
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length < _FLT_EPSILON:
            return self
        return Vector2D(self.x / length, self.y / length)