"""Pygame rendering for the ray-casting demo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame

from .fan import Ray
from .geometry import Vec2, Wall
from .state import SceneSnapshot


@dataclass(frozen=True)
class RenderConfig:
    background_color: Tuple[int, int, int] = (0, 0, 0)
    wall_color: Tuple[int, int, int] = (255, 255, 255)
    wall_width: int = 1
    ray_color: Tuple[int, int, int, int] = (255, 255, 255, 77)
    ray_width: int = 2
    observer_color: Tuple[int, int, int] = (255, 255, 255)
    observer_radius: int = 10


class Renderer:
    """Draws walls, the translucent ray fan and the observer."""

    def __init__(
        self, screen: pygame.Surface, config: RenderConfig | None = None
    ) -> None:
        self.screen = screen
        self.config = config or RenderConfig()
        self._overlay: pygame.Surface | None = None
        display_surface = pygame.display.get_surface() if pygame.display.get_init() else None
        self._flip_display = display_surface is not None and display_surface == screen

    def draw(self, snapshot: SceneSnapshot) -> None:
        self.screen.fill(self.config.background_color)
        self._draw_walls(snapshot.walls)
        self._draw_rays(snapshot.rays)
        self._draw_observer(snapshot.observer)
        if self._flip_display:
            pygame.display.flip()

    def _draw_walls(self, walls: Sequence[Wall]) -> None:
        for wall in walls:
            pygame.draw.line(
                self.screen,
                self.config.wall_color,
                _to_screen(wall.pos1),
                _to_screen(wall.pos2),
                self.config.wall_width,
            )

    def _draw_rays(self, rays: Sequence[Ray]) -> None:
        if not rays:
            return
        # pygame.draw ignores alpha on opaque targets; blend via an overlay.
        overlay = self._ray_overlay()
        overlay.fill((0, 0, 0, 0))
        for ray in rays:
            pygame.draw.line(
                overlay,
                self.config.ray_color,
                _to_screen(ray.origin),
                _to_screen(ray.end),
                self.config.ray_width,
            )
        self.screen.blit(overlay, (0, 0))

    def _draw_observer(self, observer: Vec2) -> None:
        pygame.draw.circle(
            self.screen,
            self.config.observer_color,
            _to_screen(observer),
            self.config.observer_radius,
        )

    def _ray_overlay(self) -> pygame.Surface:
        size = self.screen.get_size()
        if self._overlay is None or self._overlay.get_size() != size:
            self._overlay = pygame.Surface(size, pygame.SRCALPHA)
        return self._overlay


def _to_screen(point: Vec2) -> Tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


__all__ = ["Renderer", "RenderConfig"]
