import pygame
import pytest

from tunedeck.app import App, main
from tunedeck.events import EventType
from tunedeck.frontend import CLOSE_BUTTON_INSET, CLOSE_BUTTON_SIZE, CONTROL_HEIGHT, CONTROL_TOP, PANEL_MARGIN
from tunedeck.player import Player, PlayerInitStatus, RawPlayer

WIDTH, HEIGHT = 400, 300
CLOSE_POINT = (WIDTH - CLOSE_BUTTON_SIZE - CLOSE_BUTTON_INSET + 3, CLOSE_BUTTON_INSET + 3)
PLAY_POINT = (PANEL_MARGIN + 3, CONTROL_TOP + CONTROL_HEIGHT // 2)


def click(pos):
    return [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1),
        pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1),
    ]


class FakeBackend:
    def __init__(self, frames, *, init_ok=True, post_ok=True):
        self.frames = list(frames)
        self.init_ok = init_ok
        self.post_ok = post_ok
        self.surface = pygame.Surface((WIDTH, HEIGHT))
        self.input_events = []
        self.pre_calls = 0
        self.post_calls = 0
        self.shutdowns = 0

    def init(self):
        return self.init_ok

    def pre_loop(self):
        self.pre_calls += 1
        if not self.frames:
            return False
        self.input_events = self.frames.pop(0)
        return True

    def post_loop(self):
        self.post_calls += 1
        return self.post_ok

    def shutdown(self):
        self.shutdowns += 1
        return True


class FakePlayer(Player):
    def __init__(self):
        self.calls = []
        self._position = 0.0

    def play(self, file_path):
        self.calls.append("play")

    def pause(self):
        self.calls.append("pause")

    def stop(self):
        self.calls.append("stop")

    @property
    def position(self):
        return self._position

    @position.setter
    def position(self, seconds):
        self._position = seconds

    def register_handlers(self, events):
        events.register_event_handler(EventType.PLAY, lambda: self.play(""))
        events.register_event_handler(EventType.PAUSE, self.pause)
        events.register_event_handler(EventType.STOP, self.stop)


@pytest.fixture(autouse=True)
def _release_fonts():
    yield
    pygame.font.quit()


@pytest.mark.parametrize("ok", [True, False])
def test_init_returns_backend_result(ok):
    app = App(backend=FakeBackend([], init_ok=ok), player=FakePlayer())
    assert app.init() is ok


def test_quit_event_sets_exit():
    app = App(backend=FakeBackend([]), player=FakePlayer())
    app.init()
    app.events.query_event(EventType.QUIT)
    app.events.process_events()
    assert app.exiting is True


def test_default_player_is_raw_player():
    app = App(backend=FakeBackend([]))
    app.init()
    assert isinstance(app.player, RawPlayer)
    assert app.player.init_status is PlayerInitStatus.IDLE
    assert app.player.position == 0.0
    app.events.query_event(EventType.STOP)
    app.events.process_events()
    assert app.player.is_loaded is False
    assert app.player.init_status is PlayerInitStatus.IDLE
    assert app.exiting is False


def test_close_click_ends_loop():
    backend = FakeBackend([click(CLOSE_POINT), [], []])
    app = App(backend=backend, player=FakePlayer())
    app.init()
    assert app.run() is True
    assert app.exiting is True
    assert (backend.pre_calls, backend.post_calls, backend.shutdowns) == (2, 1, 1)


def test_play_click_reaches_player():
    backend = FakeBackend([click(PLAY_POINT)])
    player = FakePlayer()
    app = App(backend=backend, player=player)
    app.init()
    app.run()
    assert player.calls == ["play"]
    assert backend.pre_calls == 2
    assert backend.shutdowns == 1


def test_failed_post_loop_breaks():
    backend = FakeBackend([[], [], []], post_ok=False)
    app = App(backend=backend, player=FakePlayer())
    app.init()
    app.run()
    assert (backend.pre_calls, backend.post_calls) == (1, 1)


def test_exit_before_run_skips_frames():
    backend = FakeBackend([[], []])
    app = App(backend=backend, player=FakePlayer())
    app.init()
    app.exit()
    app.run()
    assert (backend.pre_calls, backend.post_calls, backend.shutdowns) == (1, 0, 1)


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_returns_one_when_window_cannot_open(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "no_such_driver")
    pygame.display.quit()
    assert main([]) == 1
    assert pygame.display.get_init() is False