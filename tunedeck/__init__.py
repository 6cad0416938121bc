"""A small desktop music player: a queued event system, a pygame window and an audio player."""

__version__ = "0.1.0"
__all__ = ["app", "backend", "events", "frontend", "player"]