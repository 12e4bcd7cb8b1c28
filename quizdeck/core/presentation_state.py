"""
Presentation State - Tracks the slide being presented and applies navigation.
Derives what the renderer should draw from the current state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .slide_store import Slide, SlideDeck, SlideSet
from .audio_cue import AudioCue

logger = logging.getLogger(__name__)

SPECIAL_KEYS = range(1, 10)


@dataclass
class PresentationState:
    """Current state of the presentation."""
    active_set: SlideSet = SlideSet.MAIN
    main_index: int = 0
    special_index: int = 0
    show_answer: bool = False
    show_splash: bool = True
    idle: bool = True  # start-up splash, as opposed to the end-of-deck splash

    @property
    def index(self) -> int:
        """Position within the active set."""
        if self.active_set is SlideSet.SPECIAL:
            return self.special_index
        return self.main_index


class ViewKind(Enum):
    """What the renderer should draw."""
    LOAD_FAILED = "load_failed"
    LOADING = "loading"
    IDLE = "idle"
    SPLASH = "splash"
    ANSWER = "answer"
    IMAGE = "image"
    QUESTION = "question"


@dataclass(frozen=True)
class SlideView:
    """Render model derived from the presentation state."""
    kind: ViewKind
    text: str = ""
    options: Tuple[Tuple[str, str], ...] = ()
    image: Optional[str] = None
    slide_set: Optional[SlideSet] = None
    index: Optional[int] = None


class SlideNavigator:
    """State machine over the main and special decks."""

    def __init__(
        self,
        deck: SlideDeck,
        audio: AudioCue,
        alarm_asset: str = "Alarm",
        alarm_on_invalid_jump: bool = True,
        show_idle_splash: bool = True,
    ):
        """
        Initialize slide navigator.

        Args:
            deck: Loaded slide deck
            audio: Cue player for slide audio and the special-slide alarm
            alarm_asset: Asset name played when a special slide is requested
            alarm_on_invalid_jump: Play the alarm even when the requested
                special slide does not exist
            show_idle_splash: Start on the idle splash instead of the first slide
        """
        self.deck = deck
        self.audio = audio
        self.alarm_asset = alarm_asset
        self.alarm_on_invalid_jump = alarm_on_invalid_jump

        self.state = PresentationState(show_splash=show_idle_splash, idle=show_idle_splash)

        # Callbacks
        self.on_state_change: Optional[Callable[[PresentationState], None]] = None

    def advance(self) -> bool:
        """
        Move to the next slide.

        Always returns focus to the main deck. Running off the end of either
        deck shows the splash instead of wrapping around.

        Returns:
            True if the state changed
        """
        before = self._snapshot()
        terminal = False

        if self.state.active_set is SlideSet.SPECIAL:
            if self.state.special_index < len(self.deck.special) - 1:
                self.state.special_index += 1
            else:
                terminal = True
        else:
            if self.state.main_index < len(self.deck.main) - 1:
                self.state.main_index += 1
                slide = self.deck.main[self.state.main_index]
                if slide.audio:
                    self.audio.play(slide.audio)
            else:
                terminal = True

        self.state.show_answer = False
        self.state.active_set = SlideSet.MAIN
        self.state.idle = False
        self.state.show_splash = terminal

        if terminal:
            logger.info("Reached end of deck, showing splash")
        return self._changed(before)

    def retreat(self) -> bool:
        """
        Move to the previous slide in the active set.

        A no-op on the index at the first slide, but the answer overlay and
        splash are always cleared. Leaving the end-of-deck splash shows the
        last slide again without moving.

        Returns:
            True if the state changed
        """
        before = self._snapshot()
        if self.state.show_splash and not self.state.idle:
            logger.debug("Leaving end-of-deck splash")
        elif self.state.active_set is SlideSet.SPECIAL:
            if self.state.special_index > 0:
                self.state.special_index -= 1
        else:
            if self.state.main_index > 0:
                self.state.main_index -= 1

        self.state.show_answer = False
        self.state.show_splash = False
        self.state.idle = False
        return self._changed(before)

    def toggle_answer(self) -> bool:
        """
        Show or hide the answer of the current main slide.

        Returns:
            True if the state changed
        """
        if self.state.active_set is not SlideSet.MAIN:
            return False

        slide = self.deck.get(SlideSet.MAIN, self.state.main_index)
        if slide is None or not slide.has_answer:
            return False

        before = self._snapshot()
        self.state.show_answer = not self.state.show_answer
        return self._changed(before)

    def jump_to_special(self, number: int) -> bool:
        """
        Show special slide ``number`` (1-based) and sound the alarm.

        A valid jump dismisses any splash so the special slide is visible.

        Args:
            number: Special slide number, 1 to 9

        Returns:
            True if the state changed
        """
        if number not in SPECIAL_KEYS:
            raise ValueError(f"Special slide number must be between 1 and 9, got {number}")

        index = number - 1
        valid = index < len(self.deck.special)

        if valid or self.alarm_on_invalid_jump:
            self.audio.play(self.alarm_asset)

        if not valid:
            logger.info(
                "No special slide %d (deck has %d)", number, len(self.deck.special)
            )
            return False

        before = self._snapshot()
        self.state.active_set = SlideSet.SPECIAL
        self.state.special_index = index
        self.state.show_answer = False
        self.state.show_splash = False
        self.state.idle = False
        return self._changed(before)

    def current_slide(self) -> Optional[Slide]:
        """Slide at the active position, or None if that deck is empty."""
        return self.deck.get(self.state.active_set, self.state.index)

    def current_view(self) -> SlideView:
        """Derive what should be drawn from the current state."""
        state = self.state

        if not self.deck.main:
            return SlideView(kind=ViewKind.LOADING, text="Loading...")

        if state.show_splash:
            return SlideView(kind=ViewKind.IDLE if state.idle else ViewKind.SPLASH)

        if state.show_answer:
            slide = self.deck.main[state.main_index]
            return SlideView(
                kind=ViewKind.ANSWER,
                text=slide.answer,
                slide_set=SlideSet.MAIN,
                index=state.main_index,
            )

        slide = self.current_slide()
        if slide is None:
            # Special deck is empty; jump_to_special never enters it
            return SlideView(kind=ViewKind.LOADING, text="Loading...")

        if slide.image:
            return SlideView(
                kind=ViewKind.IMAGE,
                image=slide.image,
                slide_set=state.active_set,
                index=state.index,
            )

        return SlideView(
            kind=ViewKind.QUESTION,
            text=slide.question,
            options=tuple(slide.options),
            slide_set=state.active_set,
            index=state.index,
        )

    def _snapshot(self) -> Tuple:
        s = self.state
        return (s.active_set, s.main_index, s.special_index, s.show_answer, s.show_splash, s.idle)

    def _changed(self, before: Tuple) -> bool:
        changed = self._snapshot() != before
        if changed and self.on_state_change:
            self.on_state_change(self.state)
        return changed
