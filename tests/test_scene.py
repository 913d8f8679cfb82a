import numpy as np
import pytest

from src.raycast.geometry import Wall, boundary_walls, random_wall
from src.raycast.scene import Scene, SceneConfig, initialize


def _make_scene(**kwargs) -> Scene:
    return initialize(960, 640, rng=np.random.default_rng(3), **kwargs)


def test_initialize_places_observer_and_walls() -> None:
    scene = _make_scene()

    assert scene.size == (960.0, 640.0)
    assert scene.observer == (480.0, 320.0)
    assert scene.boundary_walls == boundary_walls(960, 640)
    assert len(scene.interior_walls) == 6
    assert scene.walls == scene.boundary_walls + scene.interior_walls
    # The boundary encloses the observer, so every direction hits something.
    assert len(scene.rays) == 360


def test_random_walls_stay_inside_margin() -> None:
    rng = np.random.default_rng(7)
    walls = [random_wall(960, 640, rng) for _ in range(200)]

    for wall in walls:
        for x, y in wall.endpoints:
            assert 50 <= x < 910
            assert 50 <= y < 590
            assert x == int(x) and y == int(y)


def test_seeded_initialize_is_reproducible() -> None:
    first = initialize(960, 640, rng=np.random.default_rng(11))
    second = initialize(960, 640, rng=np.random.default_rng(11))

    assert first.interior_walls == second.interior_walls


def test_set_observer_position_is_unconstrained() -> None:
    scene = _make_scene()
    scene.set_observer_position(2000, -50.5)
    scene.tick()

    assert scene.observer == (2000.0, -50.5)
    assert len(scene.rays) < 360
    assert all(ray.origin == (2000.0, -50.5) for ray in scene.rays)


def test_resize_replaces_only_boundary_walls() -> None:
    scene = _make_scene()
    interior_before = scene.interior_walls

    scene.resize(1280, 720)

    assert scene.interior_walls == interior_before
    assert scene.boundary_walls == boundary_walls(1280, 720)
    assert len(scene.boundary_walls) == 4
    assert scene.size == (1280.0, 720.0)


def test_repeated_resize_keeps_four_boundary_walls() -> None:
    scene = _make_scene()
    for width, height in ((800, 600), (1024, 768), (960, 640)):
        scene.resize(width, height)

    assert len(scene.walls) == 10
    assert scene.boundary_walls == boundary_walls(960, 640)


def test_rays_update_only_on_tick() -> None:
    scene = Scene(960, 640)
    before = scene.rays

    scene.resize(960, 800)
    assert scene.rays == before

    scene.tick()
    down = next(ray for ray in scene.rays if ray.angle_deg == 0)
    assert down.end == pytest.approx((480.0, 800.0))
    assert down.distance == pytest.approx(480.0)


def test_scene_accepts_explicit_walls_and_observer() -> None:
    wall = Wall.from_coords(400.0, 400.0, 560.0, 400.0)
    scene = Scene(960, 640, observer=(480, 320), interior_walls=[wall])

    down = next(ray for ray in scene.rays if ray.angle_deg == 0)
    assert down.end == pytest.approx((480.0, 400.0))
    assert scene.interior_walls == (wall,)


def test_initialize_without_interior_walls() -> None:
    scene = _make_scene(config=SceneConfig(interior_wall_count=0))

    assert scene.interior_walls == ()
    assert len(scene.rays) == 360


def test_invalid_scene_arguments() -> None:
    with pytest.raises(ValueError):
        initialize(0, 640)
    with pytest.raises(ValueError):
        initialize(960, 640, config=SceneConfig(interior_wall_count=-1))
    with pytest.raises(ValueError):
        initialize(90, 90, rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        Scene(960, 640).resize(-1, 640)
