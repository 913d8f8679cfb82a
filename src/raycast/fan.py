"""Builds the per-frame fan of visibility rays around the observer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from .geometry import Vec2, Wall
from .intersect import RayHit, cast_ray

SWEEP_ANGLES: Tuple[int, ...] = tuple(range(360))


def _direction(angle_deg: float) -> Vec2:
    radians = math.radians(angle_deg)
    return math.sin(radians), math.cos(radians)


SWEEP_DIRECTIONS: Tuple[Vec2, ...] = tuple(_direction(angle) for angle in SWEEP_ANGLES)


@dataclass(frozen=True)
class Ray:
    """Visible segment from the observer to the nearest wall in one direction."""

    origin: Vec2
    end: Vec2
    distance: float
    angle_deg: int

    @property
    def segment(self) -> Tuple[Vec2, Vec2]:
        return self.origin, self.end


def nearest_hit(origin: Vec2, direction: Vec2, walls: Iterable[Wall]) -> RayHit | None:
    """Return the closest valid crossing along ``direction``; ties keep the first wall."""
    closest: RayHit | None = None
    for wall in walls:
        hit = cast_ray(origin, direction, wall)
        if hit is None:
            continue
        if closest is None or hit.distance < closest.distance:
            closest = hit
    return closest


def sweep(observer: Vec2, walls: Sequence[Wall]) -> Iterator[Tuple[int, Ray | None]]:
    """Yield ``(angle, ray)`` for every whole degree, with None where nothing is hit."""
    for angle, direction in zip(SWEEP_ANGLES, SWEEP_DIRECTIONS):
        hit = nearest_hit(observer, direction, walls)
        if hit is None:
            yield angle, None
        else:
            yield angle, Ray(origin=observer, end=hit.point, distance=hit.distance, angle_deg=angle)


def build_ray_fan(observer: Vec2, walls: Sequence[Wall]) -> List[Ray]:
    """Return the sparse fan of nearest-hit rays, at most one per degree."""
    return [ray for _, ray in sweep(observer, walls) if ray is not None]


__all__ = [
    "Ray",
    "SWEEP_ANGLES",
    "SWEEP_DIRECTIONS",
    "build_ray_fan",
    "nearest_hit",
    "sweep",
]
