"""2D ray casting: an observer's visibility fan against line-segment walls."""

from .fan import Ray, build_ray_fan, nearest_hit, sweep
from .geometry import Vec2, Wall, boundary_walls, random_wall
from .intersect import RayHit, can_cast_ray, cast_ray
from .runtime import SceneSession, SessionConfig
from .scene import Scene, SceneConfig, initialize
from .state import SceneSnapshot

__all__ = [
    "Ray",
    "RayHit",
    "Scene",
    "SceneConfig",
    "SceneSession",
    "SceneSnapshot",
    "SessionConfig",
    "Vec2",
    "Wall",
    "boundary_walls",
    "build_ray_fan",
    "can_cast_ray",
    "cast_ray",
    "initialize",
    "nearest_hit",
    "random_wall",
    "sweep",
]
