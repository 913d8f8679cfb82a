"""Pygame event handling for the ray-casting demo."""

from __future__ import annotations

import pygame

from .runtime import SceneSession


class InputHandler:
    """Applies pointer motion and window resizes to a session."""

    def __init__(self, session: SceneSession) -> None:
        self._session = session

    @property
    def session(self) -> SceneSession:
        return self._session

    def process_event(self, event: pygame.event.Event) -> bool:
        """Apply ``event`` to the session; return True if it was consumed."""
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self._session.set_observer_position(x, y)
            return True
        if event.type == pygame.VIDEORESIZE:
            width, height = event.w, event.h
            if width <= 0 or height <= 0:
                return False
            self._session.resize(width, height)
            return True
        return False


__all__ = ["InputHandler"]
