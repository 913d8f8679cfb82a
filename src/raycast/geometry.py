"""Geometry primitives for the ray-casting scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

Vec2 = Tuple[float, float]

DEFAULT_WALL_MARGIN = 50.0


@dataclass(frozen=True)
class Wall:
    """Immutable line segment obstacle between two endpoints."""

    pos1: Vec2
    pos2: Vec2

    @staticmethod
    def from_coords(x1: float, y1: float, x2: float, y2: float) -> "Wall":
        return Wall((float(x1), float(y1)), (float(x2), float(y2)))

    @property
    def endpoints(self) -> Tuple[Vec2, Vec2]:
        return self.pos1, self.pos2


def boundary_walls(width: float, height: float) -> Tuple[Wall, Wall, Wall, Wall]:
    """Return the four edges of the ``(0, 0)-(width, height)`` viewport.

    The order is top, bottom, left, right.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    return (
        Wall.from_coords(0.0, 0.0, width, 0.0),
        Wall.from_coords(0.0, height, width, height),
        Wall.from_coords(0.0, 0.0, 0.0, height),
        Wall.from_coords(width, 0.0, width, height),
    )


def random_wall(
    width: float,
    height: float,
    rng: np.random.Generator,
    *,
    margin: float = DEFAULT_WALL_MARGIN,
) -> Wall:
    """Create a wall whose endpoints lie inside the viewport inset by ``margin``.

    Each coordinate is drawn independently from the whole-pixel range
    ``[margin, size - margin)``.
    """
    low = int(margin)
    high_x = int(width - margin)
    high_y = int(height - margin)
    if high_x <= low or high_y <= low:
        raise ValueError("margin leaves no room for interior walls")
    x1, x2 = rng.integers(low, high_x, size=2)
    y1, y2 = rng.integers(low, high_y, size=2)
    return Wall.from_coords(x1, y1, x2, y2)


__all__ = ["DEFAULT_WALL_MARGIN", "Vec2", "Wall", "boundary_walls", "random_wall"]
