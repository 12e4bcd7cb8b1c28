"""
Pytest configuration and fixtures.
"""

import json
import sys
from pathlib import Path
from typing import Callable, Dict
from unittest.mock import Mock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizdeck.core import AudioCue, Slide, SlideDeck, SlideNavigator


@pytest.fixture
def audio() -> Mock:
    """Audio cue that records calls instead of playing."""
    return Mock(spec=AudioCue)


@pytest.fixture
def three_slide_deck() -> SlideDeck:
    return SlideDeck(
        main=(
            Slide(question="First", answer="One"),
            Slide(question="Second", option_a="x", option_b="y", audio="Ding"),
            Slide(question="Third", image="Picture", option_a="hidden", answer="Three"),
        ),
        special=(
            Slide(question="Special one"),
            Slide(question="Special two"),
        ),
    )


@pytest.fixture
def navigator(three_slide_deck: SlideDeck, audio: Mock) -> SlideNavigator:
    """Navigator starting on the idle splash at the first main slide."""
    return SlideNavigator(three_slide_deck, audio)


@pytest.fixture
def write_slides(tmp_path: Path) -> Callable[[Dict], Path]:
    """Write a slides document to a temporary JSON file."""
    def _write(document, name: str = "slides.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write
