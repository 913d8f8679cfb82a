"""Non-graphical helpers for running the ray-casting loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .scene import Scene, SceneConfig, initialize
from .state import SceneSnapshot


@dataclass(frozen=True)
class SessionConfig:
    """Viewport layout and scene population settings."""

    grid_size: Tuple[int, int] = (30, 20)
    cell_size: Tuple[int, int] = (32, 32)
    viewport: Tuple[int, int] | None = None
    seed: int | None = None
    scene: SceneConfig = field(default_factory=SceneConfig)

    @property
    def screen_size(self) -> Tuple[int, int]:
        if self.viewport is not None:
            return self.viewport
        return (
            self.grid_size[0] * self.cell_size[0],
            self.grid_size[1] * self.cell_size[1],
        )


class SceneSession:
    """Wraps a Scene with a tick counter and snapshot access."""

    def __init__(self, config: SessionConfig | None = None) -> None:
        self._config = config or SessionConfig()
        self._rng = np.random.default_rng(self._config.seed)
        self._tick_index = 0
        self._scene = self._build_scene()

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def tick_index(self) -> int:
        return self._tick_index

    def reset(self) -> SceneSnapshot:
        """Create a fresh scene with new interior walls at the current viewport size."""
        self._scene = self._build_scene(self._scene.size)
        self._tick_index = 0
        return self.snapshot()

    def set_observer_position(self, x: float, y: float) -> None:
        self._scene.set_observer_position(x, y)

    def resize(self, width: float, height: float) -> None:
        self._scene.resize(width, height)

    def step(self) -> SceneSnapshot:
        """Recompute the ray fan and return the resulting frame."""
        self._scene.tick()
        self._tick_index += 1
        return self.snapshot()

    def snapshot(self) -> SceneSnapshot:
        """Return the current state without recomputing the fan."""
        scene = self._scene
        return SceneSnapshot(
            observer=scene.observer,
            size=scene.size,
            boundary_walls=scene.boundary_walls,
            interior_walls=scene.interior_walls,
            rays=scene.rays,
            tick_index=self._tick_index,
        )

    def _build_scene(self, size: Tuple[float, float] | None = None) -> Scene:
        width, height = size if size is not None else self._config.screen_size
        return initialize(width, height, config=self._config.scene, rng=self._rng)


__all__ = ["SceneSession", "SessionConfig"]
