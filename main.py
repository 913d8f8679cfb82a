"""Entry point running the ray-casting visibility demo with pygame."""

from __future__ import annotations

import argparse
import sys

import numpy as np
import pygame

from src.raycast.input import InputHandler
from src.raycast.render import RenderConfig, Renderer
from src.raycast.runtime import SceneSession, SessionConfig
from src.raycast.scene import SceneConfig


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    try:
        session = _build_session(args)
    except ValueError as exc:
        parser.error(str(exc))

    snapshot = session.snapshot()
    width, height = (int(value) for value in snapshot.size)
    print(f"Seed: {session.config.seed}")
    print(
        f"Scene {width}x{height}: {len(snapshot.interior_walls)} interior walls, "
        f"{len(snapshot.rays)} rays"
    )

    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("Ray Tracking")

    input_handler = InputHandler(session)
    renderer = Renderer(screen, RenderConfig())
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                input_handler.process_event(event)

        renderer.draw(session.step())
        clock.tick(args.fps)

    pygame.quit()
    sys.exit(0)


def _build_parser() -> argparse.ArgumentParser:
    defaults = SessionConfig()
    default_width, default_height = defaults.screen_size
    parser = argparse.ArgumentParser(description="2D ray casting demo")
    parser.add_argument(
        "--width",
        type=int,
        default=default_width,
        help=f"Initial viewport width in pixels (default: {default_width})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=default_height,
        help=f"Initial viewport height in pixels (default: {default_height})",
    )
    parser.add_argument(
        "--walls",
        type=int,
        default=defaults.scene.interior_wall_count,
        help="Number of random interior walls",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for interior wall placement (random if omitted)",
    )
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    return parser


def _build_session(args: argparse.Namespace) -> SceneSession:
    if args.fps <= 0:
        raise ValueError("fps must be positive")
    seed = args.seed
    if seed is None:
        seed = int(np.random.SeedSequence().generate_state(1)[0])
    config = SessionConfig(
        viewport=(args.width, args.height),
        seed=seed,
        scene=SceneConfig(interior_wall_count=args.walls),
    )
    return SceneSession(config)


if __name__ == "__main__":
    main()
