"""The application: window, control panel, event queue and player run together."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from tunedeck.backend import Backend
from tunedeck.events import EventSystem, EventType
from tunedeck.frontend import Frontend
from tunedeck.player import Player, RawPlayer


class App:
    """Runs the frame loop until the user quits or the window closes."""

    def __init__(
        self,
        *,
        events: EventSystem | None = None,
        backend=None,
        frontend: Frontend | None = None,
        player: Player | None = None,
    ) -> None:
        self.events = events if events is not None else EventSystem()
        self.backend = backend if backend is not None else Backend()
        self.frontend = frontend if frontend is not None else Frontend(self.events)
        self.player = player
        self._exit = False

    @property
    def exiting(self) -> bool:
        """Whether the loop has been asked to stop."""
        return self._exit

    def init(self) -> bool:
        """Set up the player, the quit handler and the window."""
        if self.player is None:
            self.player = RawPlayer(self.events)
        else:
            self.player.register_handlers(self.events)
        self.events.register_event_handler(EventType.QUIT, self.exit)
        return self.backend.init()

    def run(self) -> bool:
        """Draw, dispatch events and present frames until told to stop."""
        while self.backend.pre_loop() and not self._exit:
            self.frontend.render(self.backend.surface, self.backend.input_events)
            self.events.process_events()
            if not self.backend.post_loop():
                break
        return self.shutdown()

    def shutdown(self) -> bool:
        """Release the window."""
        return self.backend.shutdown()

    def exit(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._exit = True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tunedeck", description="A small music player.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    app = App()
    if not app.init():
        app.shutdown()
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())