"""The window that hosts the player's interface, built on pygame's display."""

from __future__ import annotations

import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

log = logging.getLogger(__name__)

WINDOW_TITLE = "Music Player"
WINDOW_SIZE = (1280, 800)
FRAME_RATE = 60
BACKGROUND = (0, 0, 0)


class Backend:
    """Owns the application window, its event pump and frame presentation."""

    def __init__(
        self,
        *,
        size: tuple[int, int] = WINDOW_SIZE,
        title: str = WINDOW_TITLE,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        self.size = size
        self.title = title
        self.frame_rate = frame_rate
        self.resize_size: tuple[int, int] | None = None
        self._surface: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._input_events: list[pygame.event.Event] = []

    @property
    def surface(self) -> pygame.Surface | None:
        """The window's drawing surface, or None before ``init``."""
        return self._surface

    @property
    def input_events(self) -> list[pygame.event.Event]:
        """Events collected by the most recent ``pre_loop``."""
        return list(self._input_events)

    def _require_surface(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("backend is not initialised")
        return self._surface

    def init(self) -> bool:
        """Open the window; return False if the display cannot be set up."""
        try:
            pygame.display.init()
            pygame.font.init()
            surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        except pygame.error as exc:
            log.error("Could not create the window: %s", exc)
            pygame.display.quit()
            return False
        pygame.display.set_caption(self.title)
        surface.fill(BACKGROUND)
        self._surface = surface
        self._clock = pygame.time.Clock()
        self._input_events = []
        return True

    def pre_loop(self) -> bool:
        """Collect pending window events and clear the frame.

        Returns False once the window has been asked to close.
        """
        self._require_surface()
        self._input_events = pygame.event.get()
        still_open = True
        for event in self._input_events:
            if event.type == pygame.QUIT:
                still_open = False
            elif event.type == pygame.VIDEORESIZE:
                self.resize_size = (event.w, event.h)
        current = pygame.display.get_surface()
        if current is not None:
            self._surface = current
        self._require_surface().fill(BACKGROUND)
        return still_open

    def post_loop(self) -> bool:
        """Present the finished frame, pacing to the frame rate."""
        self._require_surface()
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(self.frame_rate)
        return True

    def shutdown(self) -> bool:
        """Close the window and release the display."""
        pygame.font.quit()
        pygame.display.quit()
        self._surface = None
        self._clock = None
        self._input_events = []
        return True