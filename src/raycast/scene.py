"""Observer, obstacles and the cached ray fan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .fan import Ray, build_ray_fan
from .geometry import DEFAULT_WALL_MARGIN, Vec2, Wall, boundary_walls, random_wall


@dataclass(frozen=True)
class SceneConfig:
    """Parameters used when populating a scene with interior walls."""

    interior_wall_count: int = 6
    wall_margin: float = DEFAULT_WALL_MARGIN


class Scene:
    """Holds the observer and walls and recomputes the visible rays on demand.

    Boundary walls are kept apart from interior walls so that a resize can
    swap them without touching the obstacles.
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        observer: Vec2 | None = None,
        interior_walls: Iterable[Wall] = (),
    ) -> None:
        self._width = float(width)
        self._height = float(height)
        self._boundary = boundary_walls(self._width, self._height)
        self._interior: Tuple[Wall, ...] = tuple(interior_walls)
        if observer is None:
            observer = (self._width / 2.0, self._height / 2.0)
        self._observer: Vec2 = (float(observer[0]), float(observer[1]))
        self._rays: List[Ray] = []
        self.tick()

    @property
    def size(self) -> Tuple[float, float]:
        return self._width, self._height

    @property
    def observer(self) -> Vec2:
        return self._observer

    @property
    def boundary_walls(self) -> Tuple[Wall, ...]:
        return self._boundary

    @property
    def interior_walls(self) -> Tuple[Wall, ...]:
        return self._interior

    @property
    def walls(self) -> Tuple[Wall, ...]:
        """All walls, boundary first."""
        return self._boundary + self._interior

    @property
    def rays(self) -> Sequence[Ray]:
        return tuple(self._rays)

    def set_observer_position(self, x: float, y: float) -> None:
        """Move the observer; no clamping against walls or the viewport."""
        self._observer = (float(x), float(y))

    def resize(self, width: float, height: float) -> None:
        """Replace the boundary walls to match a new viewport size."""
        self._boundary = boundary_walls(width, height)
        self._width = float(width)
        self._height = float(height)

    def tick(self) -> None:
        """Rebuild the ray fan from the current observer and walls."""
        self._rays = build_ray_fan(self._observer, self.walls)


def initialize(
    width: float,
    height: float,
    *,
    config: SceneConfig | None = None,
    rng: np.random.Generator | None = None,
) -> Scene:
    """Create a scene with the observer centred and random interior walls."""
    config = config or SceneConfig()
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if config.interior_wall_count < 0:
        raise ValueError("interior wall count must be non-negative")
    rng = rng if rng is not None else np.random.default_rng()
    interior = [
        random_wall(width, height, rng, margin=config.wall_margin)
        for _ in range(config.interior_wall_count)
    ]
    return Scene(width, height, interior_walls=interior)


__all__ = ["Scene", "SceneConfig", "initialize"]
