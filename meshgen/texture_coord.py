# meshgen/texture_coord.py
from __future__ import annotations

import math
from dataclasses import dataclass

from .vertex import Vec2

# Inset applied to every packed atlas region so that texture filtering
# never samples a neighbouring region.
UV_GAP = 0.01


@dataclass(frozen=True)
class UVRect:
    """Axis aligned sub-rectangle of the [0,1]x[0,1] atlas."""
    offset: Vec2
    scale: Vec2

    def coord(self, uv: Vec2) -> Vec2:
        return (self.offset[0] + self.scale[0] * uv[0],
                self.offset[1] + self.scale[1] * uv[1])

    def inset(self, gap: float = UV_GAP) -> "UVRect":
        return UVRect((self.offset[0] + gap, self.offset[1] + gap),
                      (self.scale[0] - 2 * gap, self.scale[1] - 2 * gap))


@dataclass(frozen=True)
class UVCircle:
    """Circle in atlas space; ``coord`` walks its circumference by angle."""
    offset: Vec2
    radius: float

    def coord(self, angle: float) -> Vec2:
        return (self.offset[0] + math.cos(angle) * self.radius,
                self.offset[1] + math.sin(angle) * self.radius)
