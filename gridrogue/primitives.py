"""Small value types: colours and integer rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


@dataclass(frozen=True, slots=True)
class Rect:
    """An integer rectangle given by its corner and size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def as_float_rect(self) -> tuple[float, float, float, float]:
        """Return ``(x, y, width, height)`` as floats."""
        return (float(self.x), float(self.y), float(self.width), float(self.height))