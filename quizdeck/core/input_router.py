"""
Input Router - Maps key presses to presentation transitions.
"""

import logging
from typing import Optional, Callable
from enum import Enum
from dataclasses import dataclass

from .presentation_state import SlideNavigator
from ..utils.helpers import format_key

logger = logging.getLogger(__name__)

NEXT_KEY = "q"
ANSWER_KEY = "a"
SPECIAL_DIGITS = "123456789"
BACK_KEYS = ("\b", "\x7f", "backspace", "delete")


class InteractionType(Enum):
    """Types of user interactions."""
    NEXT_SLIDE = "next"
    PREVIOUS_SLIDE = "previous"
    TOGGLE_ANSWER = "answer"
    SPECIAL_SLIDE = "special"


@dataclass
class InteractionEvent:
    """Represents a routed key press."""
    interaction_type: InteractionType
    key: str
    special_number: Optional[int] = None
    changed: bool = False


class InputRouter:
    """Routes each key press to exactly one navigator transition."""

    def __init__(self, navigator: SlideNavigator):
        """
        Initialize input router.

        Args:
            navigator: State machine receiving the transitions
        """
        self.navigator = navigator

        # Callback for UI updates
        self.on_interaction: Optional[Callable[[InteractionEvent], None]] = None

    def classify(self, key: str) -> Optional[InteractionEvent]:
        """
        Map a key symbol to an interaction without applying it.

        Args:
            key: Unmodified key character, or "backspace"/"delete"

        Returns:
            The interaction, or None for unmapped keys
        """
        if key == NEXT_KEY:
            return InteractionEvent(InteractionType.NEXT_SLIDE, key)

        elif key == ANSWER_KEY:
            return InteractionEvent(InteractionType.TOGGLE_ANSWER, key)

        elif len(key) == 1 and key in SPECIAL_DIGITS:
            return InteractionEvent(InteractionType.SPECIAL_SLIDE, key, special_number=int(key))

        elif key in BACK_KEYS:
            return InteractionEvent(InteractionType.PREVIOUS_SLIDE, key)

        return None

    def handle_key(self, key: str) -> Optional[InteractionEvent]:
        """
        Apply the transition mapped to a key.

        Args:
            key: Unmodified key character, or "backspace"/"delete"

        Returns:
            The interaction that fired, or None if the key is ignored
        """
        event = self.classify(key)
        if event is None:
            return None

        if event.interaction_type == InteractionType.NEXT_SLIDE:
            event.changed = self._handle_next_slide()

        elif event.interaction_type == InteractionType.TOGGLE_ANSWER:
            event.changed = self._handle_toggle_answer()

        elif event.interaction_type == InteractionType.SPECIAL_SLIDE:
            event.changed = self._handle_special_slide(event.special_number)

        elif event.interaction_type == InteractionType.PREVIOUS_SLIDE:
            event.changed = self._handle_previous_slide()

        logger.debug(
            "Key %s -> %s (changed=%s)", format_key(key), event.interaction_type.value, event.changed
        )

        # Notify UI of the interaction
        if self.on_interaction:
            self.on_interaction(event)

        return event

    def _handle_next_slide(self) -> bool:
        """Handle next slide action."""
        return self.navigator.advance()

    def _handle_previous_slide(self) -> bool:
        """Handle previous slide action."""
        return self.navigator.retreat()

    def _handle_toggle_answer(self) -> bool:
        """Handle answer reveal action."""
        return self.navigator.toggle_answer()

    def _handle_special_slide(self, number: int) -> bool:
        """Handle special slide action."""
        return self.navigator.jump_to_special(number)
