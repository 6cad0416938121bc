"""Audio players: the common interface and a player backed by pygame's mixer."""

from __future__ import annotations

import abc
import enum
import logging
import os
from typing import Protocol

from tunedeck.events import EventSystem, EventType

log = logging.getLogger(__name__)

DEFAULT_MEDIA_PATH = "media/example.mp3"


class PlayerInitStatus(enum.Enum):
    """Outcome of the most recent attempt to start playback."""

    IDLE = "Idle"
    SUCCESS = "Success"
    FILE_NOT_FOUND = "FileNotFound"
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    DEVICE_ERROR = "DeviceError"
    UNKNOWN_ERROR = "UnknownError"


class PlayerError(Exception):
    """Playback could not be started; ``status`` says why."""

    def __init__(self, status: PlayerInitStatus, message: str) -> None:
        super().__init__(message)
        self.status = status


class Player(abc.ABC):
    """Interface every audio player provides."""

    @abc.abstractmethod
    def play(self, file_path: str) -> None:
        """Start playing ``file_path``."""

    @abc.abstractmethod
    def pause(self) -> None:
        """Pause playback."""

    @abc.abstractmethod
    def stop(self) -> None:
        """Stop playback and release the track."""

    @property
    @abc.abstractmethod
    def position(self) -> float:
        """Playback position in seconds."""

    @position.setter
    @abc.abstractmethod
    def position(self, seconds: float) -> None: ...

    @abc.abstractmethod
    def register_handlers(self, events: EventSystem) -> None:
        """Connect the player to play, pause and stop events."""


class AudioOutput(Protocol):
    """What a player needs from the sound system."""

    def load(self, path: str) -> None: ...
    def start(self) -> None: ...
    def pause(self) -> None: ...
    def stop(self) -> None: ...
    def get_position(self) -> float: ...
    def set_position(self, seconds: float) -> None: ...


def _pygame():
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    return pygame


class _PygameAudio:
    """Sound output through ``pygame.mixer.music``."""

    def __init__(self) -> None:
        self._offset = 0.0

    def load(self, path: str) -> None:
        if not os.path.isfile(path):
            raise PlayerError(PlayerInitStatus.FILE_NOT_FOUND, f"Could not load file: {path}")
        pygame = _pygame()
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                raise PlayerError(
                    PlayerInitStatus.DEVICE_ERROR, "Failed to open playback device."
                ) from exc
        try:
            pygame.mixer.music.load(path)
        except pygame.error as exc:
            raise PlayerError(
                PlayerInitStatus.UNSUPPORTED_FORMAT, f"Could not load file: {path}"
            ) from exc
        self._offset = 0.0

    def start(self) -> None:
        pygame = _pygame()
        try:
            pygame.mixer.music.play()
        except pygame.error as exc:
            raise PlayerError(
                PlayerInitStatus.DEVICE_ERROR, "Failed to start playback device."
            ) from exc

    def pause(self) -> None:
        _pygame().mixer.music.pause()

    def stop(self) -> None:
        music = _pygame().mixer.music
        music.stop()
        music.unload()
        self._offset = 0.0

    def get_position(self) -> float:
        elapsed_ms = _pygame().mixer.music.get_pos()
        if elapsed_ms < 0:
            return self._offset
        return self._offset + elapsed_ms / 1000.0

    def set_position(self, seconds: float) -> None:
        pygame = _pygame()
        try:
            pygame.mixer.music.play(start=seconds)
        except pygame.error as exc:
            raise PlayerError(
                PlayerInitStatus.DEVICE_ERROR, "Failed to seek on playback device."
            ) from exc
        self._offset = seconds


class RawPlayer(Player):
    """Plays one file at a time straight to the default output device."""

    def __init__(
        self,
        events: EventSystem | None = None,
        *,
        default_path: str = DEFAULT_MEDIA_PATH,
        audio: AudioOutput | None = None,
    ) -> None:
        self.default_path = default_path
        self.init_status = PlayerInitStatus.IDLE
        self.current_path: str | None = None
        self._audio: AudioOutput = audio if audio is not None else _PygameAudio()
        self._loaded = False
        if events is not None:
            self.register_handlers(events)

    @property
    def is_loaded(self) -> bool:
        """Whether a track is open on the output."""
        return self._loaded

    def play(self, file_path: str) -> None:
        """Open ``file_path`` (or the default track if empty) and play it from the start.

        Raises PlayerError, after recording its status in ``init_status``.
        """
        path = file_path or self.default_path
        if self._loaded:
            self._audio.stop()
            self._loaded = False
            self.current_path = None
        try:
            self._audio.load(path)
            self._audio.start()
        except PlayerError as exc:
            self.init_status = exc.status
            raise
        self._loaded = True
        self.current_path = path
        self.init_status = PlayerInitStatus.SUCCESS

    def pause(self) -> None:
        if self._loaded:
            self._audio.pause()

    def stop(self) -> None:
        if self._loaded:
            self._audio.stop()
            self._loaded = False
            self.current_path = None

    @property
    def position(self) -> float:
        """Seconds played of the current track; 0.0 when nothing is loaded."""
        return self._audio.get_position() if self._loaded else 0.0

    @position.setter
    def position(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("position must not be negative")
        if self._loaded:
            self._audio.set_position(seconds)

    def _play_default(self) -> None:
        try:
            self.play("")
        except PlayerError as exc:
            log.error("%s", exc)

    def register_handlers(self, events: EventSystem) -> None:
        events.register_event_handler(EventType.PLAY, self._play_default)
        events.register_event_handler(EventType.PAUSE, self.pause)
        events.register_event_handler(EventType.STOP, self.stop)