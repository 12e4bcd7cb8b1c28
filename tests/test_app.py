"""
Tests for the presenter application glue.
"""

import logging
from types import SimpleNamespace

import pygame
import pytest

from quizdeck.core import SilentAudioCue, SlideSet, SlideView, ViewKind
from quizdeck.ui.app import (
    IDLE_TEXT,
    PresenterApp,
    SlideRenderer,
    key_symbol,
    main,
    parse_args,
    window_caption,
    wrap_text,
)
from quizdeck.utils import Config


class FakeFont:
    """Every character is 10 pixels wide."""

    def size(self, text):
        return (len(text) * 10, 10)


@pytest.fixture
def app_factory(write_slides, tmp_path):
    def _make(document=None, **kwargs):
        path = write_slides(document if document is not None else {
            "main_slides": {"0": {"question": "A", "answer": "a"}, "1": {"question": "B"}},
            "special_slides": {"1": {"question": "S"}},
        })
        kwargs.setdefault("audio_enabled", False)
        return PresenterApp(path, tmp_path, **kwargs)
    return _make


class TestKeySymbol:
    """Tests for translating pygame key events."""

    def test_backspace_and_delete(self):
        assert key_symbol(SimpleNamespace(key=pygame.K_BACKSPACE, unicode="\b")) == "backspace"
        assert key_symbol(SimpleNamespace(key=pygame.K_DELETE, unicode="\x7f")) == "delete"

    def test_character(self):
        assert key_symbol(SimpleNamespace(key=pygame.K_q, unicode="q")) == "q"

    def test_no_character(self):
        assert key_symbol(SimpleNamespace(key=pygame.K_LSHIFT, unicode="")) is None


class TestWrapText:
    """Tests for word wrapping."""

    def test_wraps_on_width(self):
        assert wrap_text("aaa bbb ccc", FakeFont(), 70) == ["aaa bbb", "ccc"]

    def test_keeps_newlines(self):
        assert wrap_text("one\ntwo", FakeFont(), 1000) == ["one", "two"]

    def test_long_word_gets_own_line(self):
        assert wrap_text("a verylongword b", FakeFont(), 50) == ["a", "verylongword", "b"]


class TestPresenterApp:
    """Tests for loading and key handling without a window."""

    def test_load(self, app_factory):
        app = app_factory()

        assert app.load()
        assert isinstance(app.audio, SilentAudioCue)
        assert app.current_view().kind == ViewKind.IDLE

    def test_load_failure_view(self, app_factory):
        app = app_factory({"main_slides": {"first": {"question": "A"}}})

        assert not app.load()

        view = app.current_view()
        assert view.kind == ViewKind.LOAD_FAILED
        assert "first" in view.text

    def test_keys_ignored_after_load_failure(self, app_factory):
        app = app_factory({"main_slides": []})
        app.load()

        assert not app.handle_key("q")

    def test_handle_key(self, app_factory):
        app = app_factory(show_idle_splash=False)
        app.load()

        assert app.current_view().text == "A"
        assert app.handle_key("a")
        assert app.current_view().text == "a"
        assert not app.handle_key("z")
        assert not app.handle_key(None)

    def test_start_screen_hint_reaches_first_slide(self, app_factory):
        app = app_factory()
        app.load()
        assert "Backspace" in IDLE_TEXT

        assert app.handle_key("backspace")
        assert app.current_view().text == "A"

    def test_empty_deck_shows_loading(self, app_factory):
        app = app_factory({})
        app.load()

        assert app.current_view().kind == ViewKind.LOADING


class TestCommandLine:
    """Tests for argument parsing and start-up validation."""

    def test_parse_args(self, tmp_path):
        args = parse_args(["--slides", str(tmp_path / "s.json"), "--no-audio", "--no-splash"])

        assert args.slides == tmp_path / "s.json"
        assert args.audio is False
        assert args.splash is False

    def test_defaults_from_config(self):
        args = parse_args([])

        assert args.slides == Config.SLIDES_FILE
        assert args.assets == Config.ASSETS_DIR

    def test_invalid_config_exits(self, monkeypatch):
        monkeypatch.setattr(Config, "AUDIO_POLICY", "queue")

        assert main(["--no-audio"]) == 2


class TestPresenterCallbacks:
    """Tests for the navigator and router callbacks the app installs."""

    def test_redraw_only_on_state_change(self, app_factory):
        app = app_factory()
        app.load()

        assert app.handle_key("q")
        assert not app.handle_key("z")
        assert not app.handle_key("a")  # slide "B" has no answer

    def test_missing_special_slide_is_logged(self, app_factory, caplog):
        caplog.set_level(logging.INFO, logger="quizdeck.ui.app")
        app = app_factory()
        app.load()

        assert not app.handle_key("5")
        assert "no such special slide" in caplog.text


class TestWindowCaption:
    """Tests for the slide position in the window title."""

    def test_main_slide(self):
        view = SlideView(kind=ViewKind.QUESTION, text="Q", slide_set=SlideSet.MAIN, index=0)
        assert window_caption(view) == "QuizDeck - Slide 1"

    def test_special_slide(self):
        view = SlideView(kind=ViewKind.IMAGE, image="pic", slide_set=SlideSet.SPECIAL, index=1)
        assert window_caption(view) == "QuizDeck - Special 2"

    def test_no_slide(self):
        assert window_caption(SlideView(kind=ViewKind.IDLE)) == "QuizDeck"


@pytest.fixture
def screen(monkeypatch):
    """Headless pygame display."""
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    surface = pygame.display.set_mode((640, 480))
    yield surface
    pygame.quit()


@pytest.fixture
def renderer(screen, tmp_path):
    picture = pygame.Surface((40, 20))
    picture.fill((200, 0, 0))
    pygame.image.save(picture, str(tmp_path / "Picture.png"))
    return SlideRenderer(screen, tmp_path, question_size=32, option_size=24, padding=20)


def _has_ink(surface) -> bool:
    """True if anything other than the white background was drawn."""
    return any(byte != 255 for byte in pygame.image.tostring(surface, "RGB"))


class TestSlideRenderer:
    """Draws every view kind on a headless display."""

    @pytest.mark.parametrize("view", [
        SlideView(kind=ViewKind.LOAD_FAILED, text="bad key"),
        SlideView(kind=ViewKind.LOADING, text="Loading..."),
        SlideView(kind=ViewKind.IDLE),
        SlideView(kind=ViewKind.ANSWER, text="Paris", slide_set=SlideSet.MAIN, index=1),
        SlideView(kind=ViewKind.IMAGE, image="Picture", slide_set=SlideSet.MAIN, index=2),
        SlideView(kind=ViewKind.IMAGE, image="Missing", slide_set=SlideSet.MAIN, index=2),
        SlideView(
            kind=ViewKind.QUESTION,
            text="What is the capital of France?",
            options=(("A", "Berlin"), ("C", "Paris")),
            slide_set=SlideSet.SPECIAL,
            index=0,
        ),
    ])
    def test_draws_content(self, renderer, screen, view):
        renderer.draw(view)

        assert _has_ink(screen)
        assert pygame.display.get_caption()[0] == window_caption(view)

    def test_splash_is_blank(self, renderer, screen):
        renderer.draw(SlideView(kind=ViewKind.SPLASH))
        assert not _has_ink(screen)

    def test_image_drawn_in_center(self, renderer, screen):
        renderer.draw(SlideView(kind=ViewKind.IMAGE, image="Picture"))

        assert screen.get_at(screen.get_rect().center)[:3] == (200, 0, 0)

    def test_missing_image_logged_once(self, renderer, caplog):
        view = SlideView(kind=ViewKind.IMAGE, image="Missing")

        renderer.draw(view)
        renderer.draw(view)

        assert caplog.text.count("Image asset 'Missing' not found") == 1
