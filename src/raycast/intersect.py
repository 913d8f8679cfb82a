"""Ray versus wall segment intersection."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Vec2, Wall


@dataclass(frozen=True)
class RayHit:
    """Crossing of a ray with a wall.

    ``distance`` is the ray parameter ``u``; it equals the Euclidean distance
    only when the direction has unit length. ``t`` is the position along the
    wall, strictly between 0 (``pos1``) and 1 (``pos2``).
    """

    distance: float
    point: Vec2
    t: float


def can_cast_ray(t: float, u: float) -> bool:
    """Return True if the crossing lies inside the wall and ahead of the origin."""
    return 0.0 < t < 1.0 and u > 0.0


def cast_ray(origin: Vec2, direction: Vec2, wall: Wall) -> RayHit | None:
    """Intersect the ray ``origin + u * direction`` (``u >= 0``) with ``wall``.

    Returns None when the ray is parallel to the wall, misses it, touches
    only one of its endpoints or crosses it exactly at the origin.
    """
    x1, y1 = wall.pos1
    x2, y2 = wall.pos2
    x3, y3 = origin
    x4 = x3 + direction[0]
    y4 = y3 + direction[1]

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if den == 0:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    if not can_cast_ray(t, u):
        return None

    point = (x1 + t * (x2 - x1), y1 + t * (y2 - y1))
    return RayHit(distance=u, point=point, t=t)


__all__ = ["RayHit", "can_cast_ray", "cast_ray"]
