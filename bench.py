import time
import numpy as np
from src.raycast.scene import SceneConfig, initialize


def benchmark_fan_rebuild(wall_count: int, ticks: int = 200) -> float:
    scene = initialize(960, 640, config=SceneConfig(interior_wall_count=wall_count), rng=np.random.default_rng(0))
    positions = np.random.default_rng(1).uniform((0.0, 0.0), (960.0, 640.0), size=(ticks, 2))
    start = time.perf_counter()
    for x, y in positions:
        scene.set_observer_position(x, y)
        scene.tick()
    elapsed = time.perf_counter() - start
    return ticks / elapsed


for count in (0, 2, 6, 12, 24, 48):
    ticks_per_second = benchmark_fan_rebuild(count)
    print(
        f"{count + 4:3d} walls → {ticks_per_second:8.1f} rebuilds/sec "
        f"({1000.0 / ticks_per_second:6.2f} ms per frame)"
    )
