"""
Slide Store - Loads the question/answer deck from the bundled JSON data file.
Holds the main and special slide sequences, ordered by their numeric keys.
"""

import json
import logging
import re
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..utils.helpers import load_json

logger = logging.getLogger(__name__)

MAIN_GROUP = "main_slides"
SPECIAL_GROUP = "special_slides"
OPTIONAL_FIELDS = ("image", "option_a", "option_b", "option_c", "option_d", "answer", "audio")

_INTEGER_KEY = re.compile(r"[+-]?[0-9]+")


class LoadError(Exception):
    """Raised when the slide data source cannot be loaded."""


class SlideSet(Enum):
    """Which deck is being browsed."""
    MAIN = "main"
    SPECIAL = "special"


@dataclass(frozen=True)
class Slide:
    """A single flashcard slide."""
    question: str
    image: Optional[str] = None
    option_a: Optional[str] = None
    option_b: Optional[str] = None
    option_c: Optional[str] = None
    option_d: Optional[str] = None
    answer: Optional[str] = None
    audio: Optional[str] = None

    @property
    def options(self) -> List[Tuple[str, str]]:
        """Non-empty multiple-choice options as (label, text) pairs."""
        pairs = [
            ("A", self.option_a),
            ("B", self.option_b),
            ("C", self.option_c),
            ("D", self.option_d),
        ]
        return [(label, text) for label, text in pairs if text]

    @property
    def has_answer(self) -> bool:
        return bool(self.answer)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Slide':
        """
        Create Slide from a slide record.

        Unknown keys are ignored.

        Raises:
            LoadError: If the record is not a mapping, has no string question,
                or an optional field holds something other than a string
        """
        if not isinstance(data, dict):
            raise LoadError(f"slide record must be an object, got {type(data).__name__}")

        question = data.get("question")
        if not isinstance(question, str):
            raise LoadError("slide record is missing a string 'question'")

        fields = {}
        for name in OPTIONAL_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise LoadError(f"slide field '{name}' must be a string, got {type(value).__name__}")
            fields[name] = value

        return cls(question=question, **fields)


@dataclass(frozen=True)
class SlideDeck:
    """The two ordered slide sequences. Immutable once built."""
    main: Tuple[Slide, ...] = ()
    special: Tuple[Slide, ...] = ()

    def slides(self, slide_set: SlideSet) -> Tuple[Slide, ...]:
        return self.main if slide_set is SlideSet.MAIN else self.special

    def size(self, slide_set: SlideSet) -> int:
        return len(self.slides(slide_set))

    def get(self, slide_set: SlideSet, index: int) -> Optional[Slide]:
        """Slide at index in the given set, or None when out of range."""
        slides = self.slides(slide_set)
        if 0 <= index < len(slides):
            return slides[index]
        return None

    @property
    def is_empty(self) -> bool:
        return not self.main and not self.special


class SlideStore:
    """Load slide decks from a JSON data file."""

    def __init__(self, data_path: Path):
        """
        Initialize slide store.

        Args:
            data_path: Path to the slides JSON file
        """
        self.data_path = Path(data_path)
        self.deck: Optional[SlideDeck] = None

    def load(self) -> SlideDeck:
        """
        Read and parse the data file.

        Returns:
            The loaded SlideDeck, also kept on ``self.deck``

        Raises:
            LoadError: If the file is missing, unreadable or malformed
        """
        start = time.time()

        if not self.data_path.is_file():
            raise LoadError(f"Slides file not found: {self.data_path}")

        try:
            document = load_json(self.data_path)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read {self.data_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {self.data_path}: {e}") from e

        try:
            self.deck = self.parse(document)
        except LoadError as e:
            raise LoadError(f"{self.data_path}: {e}") from e

        logger.info(
            "Loaded %d main and %d special slides from %s in %.3fs",
            len(self.deck.main), len(self.deck.special), self.data_path, time.time() - start,
        )
        return self.deck

    @classmethod
    def parse(cls, document: Dict) -> SlideDeck:
        """
        Build a SlideDeck from a decoded document.

        Args:
            document: Mapping with optional ``main_slides`` and ``special_slides`` groups

        Returns:
            SlideDeck with both groups sorted by numeric key
        """
        if not isinstance(document, dict):
            raise LoadError(f"top level must be an object, got {type(document).__name__}")

        return SlideDeck(
            main=cls._parse_group(document, MAIN_GROUP),
            special=cls._parse_group(document, SPECIAL_GROUP),
        )

    @staticmethod
    def _parse_group(document: Dict, group: str) -> Tuple[Slide, ...]:
        """Parse one group, sorted by integer value of its keys."""
        records = document.get(group)
        if records is None:
            logger.debug("No '%s' group in slide data", group)
            return ()
        if not isinstance(records, dict):
            raise LoadError(f"'{group}' must be an object, got {type(records).__name__}")

        keyed = []
        for key, record in records.items():
            if not _INTEGER_KEY.fullmatch(key):
                raise LoadError(f"'{group}' has non-numeric key '{key}'")
            try:
                slide = Slide.from_dict(record)
            except LoadError as e:
                raise LoadError(f"'{group}' key '{key}': {e}") from e
            keyed.append((int(key), slide))

        # sorted() is stable, so keys with equal value keep document order
        keyed.sort(key=lambda item: item[0])
        return tuple(slide for _, slide in keyed)
