import pygame
import pytest

from tunedeck.backend import Backend


@pytest.fixture
def backend(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.quit()
    instance = Backend()
    assert instance.init() is True
    yield instance
    instance.shutdown()
    pygame.quit()


def test_init_opens_window_with_source_size_and_title(backend):
    assert backend.surface.get_size() == (1280, 800)
    assert pygame.display.get_caption()[0] == "Music Player"


def test_pre_loop_collects_posted_events(backend):
    pygame.event.post(pygame.event.Event(pygame.USEREVENT, tag="marker"))
    assert backend.pre_loop() is True
    tags = [getattr(e, "tag", None) for e in backend.input_events if e.type == pygame.USEREVENT]
    assert tags == ["marker"]


def test_pre_loop_reports_window_close(backend):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert backend.pre_loop() is False


def test_pre_loop_records_resize(backend):
    pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, size=(640, 480), w=640, h=480))
    backend.pre_loop()
    assert backend.resize_size == (640, 480)


def test_pre_loop_clears_frame_to_black(backend):
    backend.surface.fill((255, 255, 255))
    backend.pre_loop()
    assert tuple(backend.surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_post_loop_presents_frame(backend):
    backend.pre_loop()
    assert backend.post_loop() is True


def test_shutdown_releases_display(backend):
    assert backend.shutdown() is True
    assert pygame.display.get_init() is False
    assert backend.surface is None


def test_loop_before_init_raises():
    fresh = Backend()
    with pytest.raises(RuntimeError):
        fresh.pre_loop()
    with pytest.raises(RuntimeError):
        fresh.post_loop()


def test_init_fails_on_unavailable_driver(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "no_such_driver")
    pygame.display.quit()
    fresh = Backend()
    assert fresh.init() is False
    assert fresh.surface is None
    fresh.shutdown()