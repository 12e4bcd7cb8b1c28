"""
QuizDeck - pygame presenter
Single-window flashcard presenter driven by the keyboard.

Controls:
    Q                   - Next slide (returns to the main deck)
    A                   - Show/hide the answer
    1-9                 - Special slide with alarm
    Backspace/Delete    - Previous slide

The start screen is left with Q (second slide) or Backspace (first slide).
Run with --no-splash to open directly on the first slide.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pygame

from ..core import (
    AudioCue,
    InputRouter,
    InteractionEvent,
    InteractionType,
    LoadError,
    PresentationState,
    SilentAudioCue,
    SlideNavigator,
    SlideSet,
    SlideStore,
    SlideView,
    ViewKind,
    create_audio_cue,
)
from ..utils import Config, IMAGE_EXTENSIONS, resolve_asset

logger = logging.getLogger(__name__)

FRAME_RATE = 30
IDLE_TEXT = "Press Backspace to start"


def key_symbol(event) -> Optional[str]:
    """
    Translate a pygame KEYDOWN event into the router's key symbol.

    Modified keys produce a different character (or none) and are ignored downstream.
    """
    if event.key == pygame.K_BACKSPACE:
        return "backspace"
    if event.key == pygame.K_DELETE:
        return "delete"
    return event.unicode or None


def window_caption(view: SlideView) -> str:
    """Window title with the position of the slide on screen, e.g. "QuizDeck - Special 2"."""
    if view.slide_set is None or view.index is None:
        return "QuizDeck"
    deck = "Special" if view.slide_set is SlideSet.SPECIAL else "Slide"
    return f"QuizDeck - {deck} {view.index + 1}"


def wrap_text(text: str, font, max_width: int) -> List[str]:
    """Greedy word wrap. A word wider than max_width gets a line of its own."""
    lines = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and font.size(candidate)[0] > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


class SlideRenderer:
    """Draws a SlideView onto a pygame surface."""

    def __init__(
        self,
        screen: pygame.Surface,
        assets_dir: Path,
        font_name: Optional[str] = None,
        question_size: int = 72,
        option_size: int = 52,
        padding: int = 100,
        background=(255, 255, 255),
        foreground=(0, 0, 0),
    ):
        self.screen = screen
        self.assets_dir = Path(assets_dir)
        self.padding = padding
        self.background = background
        self.foreground = foreground

        self.question_font = self._make_font(font_name, question_size)
        self.option_font = self._make_font(font_name, option_size)

        self._images: Dict[str, Optional[pygame.Surface]] = {}

    @staticmethod
    def _make_font(name: Optional[str], size: int):
        if name:
            return pygame.font.SysFont(name, size, bold=True)
        font = pygame.font.Font(None, size)
        font.set_bold(True)
        return font

    @property
    def content_rect(self) -> pygame.Rect:
        return self.screen.get_rect().inflate(-2 * self.padding, -2 * self.padding)

    def draw(self, view: SlideView) -> None:
        """Clear the screen and draw the view."""
        self.screen.fill(self.background)

        if view.kind == ViewKind.LOAD_FAILED:
            self._draw_block([
                (self.question_font, "Failed to load slides", True),
                (self.option_font, view.text, True),
            ])

        elif view.kind == ViewKind.LOADING:
            self._draw_block([(self.question_font, view.text, True)])

        elif view.kind == ViewKind.IDLE:
            self._draw_block([(self.option_font, IDLE_TEXT, True)])

        elif view.kind == ViewKind.SPLASH:
            pass

        elif view.kind == ViewKind.ANSWER:
            self._draw_block([(self.question_font, view.text, True)])

        elif view.kind == ViewKind.IMAGE:
            self._draw_image(view.image)

        elif view.kind == ViewKind.QUESTION:
            parts = [(self.question_font, view.text, True)]
            parts.extend((self.option_font, f"{label}: {text}", False) for label, text in view.options)
            self._draw_block(parts)

        pygame.display.set_caption(window_caption(view))
        pygame.display.flip()

    def _draw_block(self, parts) -> None:
        """Draw (font, text, centered) parts stacked and vertically centred."""
        area = self.content_rect
        rendered = []
        for font, text, centered in parts:
            for line in wrap_text(text, font, area.width):
                rendered.append((font.render(line, True, self.foreground), centered))

        spacing = 20
        total = sum(surface.get_height() for surface, _ in rendered) + spacing * max(len(rendered) - 1, 0)
        y = area.centery - total // 2

        for surface, centered in rendered:
            rect = surface.get_rect(top=y)
            if centered:
                rect.centerx = area.centerx
            else:
                rect.left = area.left
            self.screen.blit(surface, rect)
            y += surface.get_height() + spacing

    def _draw_image(self, name: str) -> None:
        image = self._load_image(name)
        if image is None:
            self._draw_block([(self.option_font, name, True)])
            return

        area = self.content_rect
        scale = min(area.width / image.get_width(), area.height / image.get_height())
        size = (max(1, int(image.get_width() * scale)), max(1, int(image.get_height() * scale)))
        scaled = pygame.transform.smoothscale(image, size)
        self.screen.blit(scaled, scaled.get_rect(center=area.center))

    def _load_image(self, name: str) -> Optional[pygame.Surface]:
        # Failures are cached too, so each missing image is logged once
        if name in self._images:
            return self._images[name]

        image = None
        path = resolve_asset(self.assets_dir, name, IMAGE_EXTENSIONS)
        if path is None:
            logger.warning("Image asset '%s' not found in %s", name, self.assets_dir)
        else:
            try:
                image = pygame.image.load(str(path)).convert_alpha()
            except pygame.error as e:
                logger.warning("Error loading image '%s' from %s: %s", name, path, e)

        self._images[name] = image
        return image


class PresenterApp:
    """Owns the window, the deck and the presentation loop."""

    def __init__(
        self,
        slides_file: Path,
        assets_dir: Path,
        audio_enabled: bool = True,
        audio_policy: str = "allow_overlap",
        alarm_asset: str = "Alarm",
        alarm_on_invalid_jump: bool = True,
        show_idle_splash: bool = True,
        fullscreen: bool = False,
    ):
        self.slides_file = Path(slides_file)
        self.assets_dir = Path(assets_dir)
        self.audio_enabled = audio_enabled
        self.audio_policy = audio_policy
        self.alarm_asset = alarm_asset
        self.alarm_on_invalid_jump = alarm_on_invalid_jump
        self.show_idle_splash = show_idle_splash
        self.fullscreen = fullscreen

        self.audio: AudioCue = SilentAudioCue()
        self.navigator: Optional[SlideNavigator] = None
        self.router: Optional[InputRouter] = None
        self.load_error: Optional[str] = None
        self.needs_redraw = True

    def load(self) -> bool:
        """
        Load the deck and wire up navigation.

        Returns:
            True if slides were loaded; otherwise ``load_error`` is set
        """
        try:
            deck = SlideStore(self.slides_file).load()
        except LoadError as e:
            logger.error("Error loading slides: %s", e)
            self.load_error = str(e)
            return False

        self.audio = create_audio_cue(self.assets_dir, self.audio_enabled, self.audio_policy)
        self.navigator = SlideNavigator(
            deck,
            self.audio,
            alarm_asset=self.alarm_asset,
            alarm_on_invalid_jump=self.alarm_on_invalid_jump,
            show_idle_splash=self.show_idle_splash,
        )
        self.navigator.on_state_change = self._on_state_change
        self.router = InputRouter(self.navigator)
        self.router.on_interaction = self._on_interaction
        return True

    def _on_state_change(self, state: PresentationState) -> None:
        self.needs_redraw = True

    def _on_interaction(self, event: InteractionEvent) -> None:
        if event.interaction_type == InteractionType.SPECIAL_SLIDE and not event.changed:
            logger.info("Key %s: no such special slide", event.key)

    def current_view(self) -> SlideView:
        if self.navigator is None:
            return SlideView(kind=ViewKind.LOAD_FAILED, text=self.load_error or "")
        return self.navigator.current_view()

    def handle_key(self, key: Optional[str]) -> bool:
        """Route one key. Returns True if the screen needs redrawing."""
        if key is None or self.router is None:
            return False
        self.needs_redraw = False
        self.router.handle_key(key)
        return self.needs_redraw

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            flags = pygame.FULLSCREEN if self.fullscreen else 0
            size = (0, 0) if self.fullscreen else (Config.WINDOW_WIDTH, Config.WINDOW_HEIGHT)
            screen = pygame.display.set_mode(size, flags)
            pygame.display.set_caption("QuizDeck")

            renderer = SlideRenderer(
                screen,
                self.assets_dir,
                font_name=Config.FONT_NAME,
                question_size=Config.QUESTION_FONT_SIZE,
                option_size=Config.OPTION_FONT_SIZE,
                padding=Config.PADDING,
                background=Config.BACKGROUND_COLOR,
                foreground=Config.TEXT_COLOR,
            )

            self.load()
            renderer.draw(self.current_view())

            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if self.handle_key(key_symbol(event)):
                            renderer.draw(self.current_view())
                    elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWEXPOSED):
                        renderer.draw(self.current_view())
                clock.tick(FRAME_RATE)
        finally:
            self.audio.close()
            pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="quizdeck",
        description="Keyboard-driven flashcard presenter",
    )
    parser.add_argument("--slides", type=Path, default=Config.SLIDES_FILE,
                        help=f"Slides JSON file (default: {Config.SLIDES_FILE})")
    parser.add_argument("--assets", type=Path, default=Config.ASSETS_DIR,
                        help=f"Directory with image and sound assets (default: {Config.ASSETS_DIR})")
    parser.add_argument("--fullscreen", action="store_true", default=Config.FULLSCREEN,
                        help="Present full screen")
    parser.add_argument("--no-audio", dest="audio", action="store_false", default=Config.AUDIO_ENABLED,
                        help="Disable sound cues")
    parser.add_argument("--no-splash", dest="splash", action="store_false", default=Config.SHOW_IDLE_SPLASH,
                        help="Start on the first slide instead of the start screen")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = parse_args(argv)

    # Setup Logging
    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        Config.validate()
    except ValueError as e:
        logger.error("%s", e)
        return 2

    app = PresenterApp(
        slides_file=args.slides,
        assets_dir=args.assets,
        audio_enabled=args.audio,
        audio_policy=Config.AUDIO_POLICY,
        alarm_asset=Config.ALARM_ASSET,
        alarm_on_invalid_jump=Config.ALARM_ON_INVALID_JUMP,
        show_idle_splash=args.splash,
        fullscreen=args.fullscreen,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
