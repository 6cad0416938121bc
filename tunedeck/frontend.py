"""The player's control panel: drawing it and turning clicks into events."""

from __future__ import annotations

import os
from collections.abc import Iterable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from tunedeck.events import EventSystem, EventType  # noqa: E402

CLOSE_BUTTON_SIZE = 20
CLOSE_BUTTON_INSET = 4
PANEL_MARGIN = 16
CONTROL_TOP = 40
CONTROL_WIDTH = 64
CONTROL_HEIGHT = 24
CONTROL_GAP = 8
SLIDER_TOP = 72
SLIDER_WIDTH = 200
SLIDER_HEIGHT = 20
PROGRESS_TOP = 136
PROGRESS_HEIGHT = 20

WINDOW_BG = (15, 15, 15)
TEXT = (255, 255, 255)
SEPARATOR = (110, 110, 128)
FRAME_BG = (41, 74, 122)
SLIDER_GRAB = (66, 150, 250)
PROGRESS_FILL = (230, 179, 0)

CLOSE_COLOURS = ((200, 60, 60), (255, 80, 80), (180, 40, 40))
CONTROL_COLOURS = ((41, 74, 122), (66, 150, 250), (15, 135, 250))

_BUTTONS = (
    ("close", "x", EventType.QUIT),
    ("play", "Play", EventType.PLAY),
    ("pause", "Pause", EventType.PAUSE),
    ("stop", "Stop", EventType.STOP),
)


class Frontend:
    """Draws the control panel and queues an event for each button clicked."""

    def __init__(self, events: EventSystem, *, volume: float = 0.5) -> None:
        self.events = events
        self.volume = volume
        self.now_playing = "<Track Name>"
        self.progress = 0.3
        self.progress_label = "01:23 / 04:56"
        self._mouse: tuple[int, int] | None = None
        self._pressed: str | None = None
        self._dragging = False
        self._font: pygame.font.Font | None = None

    def render(self, surface: pygame.Surface, input_events: Iterable[pygame.event.Event]) -> None:
        """Handle ``input_events`` against the panel, then draw it on ``surface``."""
        layout = self._layout(surface.get_size())
        for event in input_events:
            self._handle(event, layout)
        self._draw(surface, layout)

    @staticmethod
    def _layout(size: tuple[int, int]) -> dict[str, pygame.Rect]:
        width, _ = size
        rects = {
            "close": pygame.Rect(
                width - CLOSE_BUTTON_SIZE - CLOSE_BUTTON_INSET,
                CLOSE_BUTTON_INSET,
                CLOSE_BUTTON_SIZE,
                CLOSE_BUTTON_SIZE,
            )
        }
        for index, name in enumerate(("play", "pause", "stop")):
            rects[name] = pygame.Rect(
                PANEL_MARGIN + index * (CONTROL_WIDTH + CONTROL_GAP),
                CONTROL_TOP,
                CONTROL_WIDTH,
                CONTROL_HEIGHT,
            )
        rects["volume"] = pygame.Rect(PANEL_MARGIN, SLIDER_TOP, SLIDER_WIDTH, SLIDER_HEIGHT)
        rects["progress"] = pygame.Rect(
            PANEL_MARGIN, PROGRESS_TOP, max(width - 2 * PANEL_MARGIN, 1), PROGRESS_HEIGHT
        )
        return rects

    def _set_volume_from(self, x: int, slider: pygame.Rect) -> None:
        span = max(slider.width - 1, 1)
        self.volume = min(max((x - slider.left) / span, 0.0), 1.0)

    def _handle(self, event: pygame.event.Event, layout: dict[str, pygame.Rect]) -> None:
        if event.type == pygame.MOUSEMOTION:
            self._mouse = event.pos
            if self._dragging:
                self._set_volume_from(event.pos[0], layout["volume"])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse = event.pos
            if layout["volume"].collidepoint(event.pos):
                self._dragging = True
                self._set_volume_from(event.pos[0], layout["volume"])
                return
            self._pressed = next(
                (name for name, _, _ in _BUTTONS if layout[name].collidepoint(event.pos)),
                None,
            )
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse = event.pos
            if self._pressed is not None and layout[self._pressed].collidepoint(event.pos):
                event_type = next(kind for name, _, kind in _BUTTONS if name == self._pressed)
                self.events.query_event(event_type)
            self._pressed = None
            self._dragging = False

    def _get_font(self) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
            self._font = None
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        return self._font

    def _text(self, surface: pygame.Surface, text: str, *, topleft=None, center=None) -> None:
        image = self._get_font().render(text, True, TEXT)
        rect = image.get_rect()
        if center is not None:
            rect.center = center
        else:
            rect.topleft = topleft
        surface.blit(image, rect)

    def _button_colour(self, name: str, rect: pygame.Rect) -> tuple[int, int, int]:
        normal, hovered, active = CLOSE_COLOURS if name == "close" else CONTROL_COLOURS
        hovering = self._mouse is not None and rect.collidepoint(self._mouse)
        if hovering and self._pressed == name:
            return active
        if hovering:
            return hovered
        return normal

    def _draw(self, surface: pygame.Surface, layout: dict[str, pygame.Rect]) -> None:
        width = surface.get_width()
        surface.fill(WINDOW_BG)
        self._text(surface, "Music Player", topleft=(8, 8))
        pygame.draw.line(surface, SEPARATOR, (8, 30), (width - 8, 30))

        for name, label, _ in _BUTTONS:
            rect = layout[name]
            radius = 2 if name == "close" else 0
            pygame.draw.rect(surface, self._button_colour(name, rect), rect, border_radius=radius)
            self._text(surface, label, center=rect.center)

        slider = layout["volume"]
        pygame.draw.rect(surface, FRAME_BG, slider)
        grab_x = slider.left + round(self.volume * (slider.width - 1))
        grab = pygame.Rect(0, slider.top + 2, 8, slider.height - 4)
        grab.centerx = grab_x
        grab.clamp_ip(slider)
        pygame.draw.rect(surface, SLIDER_GRAB, grab)
        self._text(surface, f"{self.volume:.2f}", center=slider.center)
        self._text(surface, "Volume", topleft=(slider.right + 8, slider.top + 3))

        pygame.draw.line(surface, SEPARATOR, (8, 104), (width - 8, 104))
        self._text(surface, f"Now Playing: {self.now_playing}", topleft=(PANEL_MARGIN, 112))

        bar = layout["progress"]
        pygame.draw.rect(surface, FRAME_BG, bar)
        filled = bar.copy()
        filled.width = int(bar.width * min(max(self.progress, 0.0), 1.0))
        if filled.width:
            pygame.draw.rect(surface, PROGRESS_FILL, filled)
        self._text(surface, self.progress_label, center=bar.center)