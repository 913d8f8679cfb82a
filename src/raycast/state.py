"""Frozen views of the scene for renderers and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .fan import Ray
from .geometry import Vec2, Wall


@dataclass(frozen=True)
class SceneSnapshot:
    """Everything a renderer needs to draw one frame."""

    observer: Vec2
    size: Tuple[float, float]
    boundary_walls: Sequence[Wall]
    interior_walls: Sequence[Wall]
    rays: Sequence[Ray]
    tick_index: int

    @property
    def walls(self) -> Sequence[Wall]:
        return tuple(self.boundary_walls) + tuple(self.interior_walls)

    @property
    def ray_segments(self) -> Sequence[Tuple[Vec2, Vec2]]:
        return tuple(ray.segment for ray in self.rays)


__all__ = ["SceneSnapshot"]
