from src.raycast.runtime import SceneSession, SessionConfig
from src.raycast.scene import SceneConfig


def test_default_viewport_matches_grid() -> None:
    config = SessionConfig()
    assert config.screen_size == (960, 640)
    assert SessionConfig(viewport=(400, 300)).screen_size == (400, 300)


def test_session_step_advances_tick() -> None:
    session = SceneSession(SessionConfig(seed=5))

    initial = session.snapshot()
    assert initial.tick_index == 0
    assert initial.size == (960.0, 640.0)
    assert len(initial.walls) == 10

    session.set_observer_position(100.0, 150.0)
    after_step = session.step()
    assert after_step.tick_index == 1
    assert after_step.observer == (100.0, 150.0)
    assert len(after_step.rays) == 360
    assert all(segment[0] == (100.0, 150.0) for segment in after_step.ray_segments)


def test_sessions_with_same_seed_share_walls() -> None:
    first = SceneSession(SessionConfig(seed=42)).snapshot()
    second = SceneSession(SessionConfig(seed=42)).snapshot()

    assert first.interior_walls == second.interior_walls


def test_reset_rebuilds_scene_at_current_size() -> None:
    session = SceneSession(SessionConfig(seed=1, scene=SceneConfig(interior_wall_count=3)))
    session.step()
    session.resize(400, 300)

    snapshot = session.reset()
    assert snapshot.tick_index == 0
    assert snapshot.size == (400.0, 300.0)
    assert len(snapshot.interior_walls) == 3
