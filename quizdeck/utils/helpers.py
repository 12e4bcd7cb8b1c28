"""
Utility helper functions for QuizDeck.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional


AUDIO_EXTENSIONS = (".wav", ".ogg", ".mp3", ".flac")
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")


def load_json(file_path: Path) -> Dict[str, Any]:
    """Load data from JSON file."""
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def resolve_asset(assets_dir: Path, name: str, extensions: Iterable[str]) -> Optional[Path]:
    """
    Resolve a logical asset name to a file in the assets directory.

    The bare name is tried first, then the name with each extension in order.

    Args:
        assets_dir: Directory holding the assets
        name: Logical asset name, e.g. "Alarm"
        extensions: Candidate file extensions, including the dot

    Returns:
        Path to the first existing file, or None
    """
    if not name:
        return None

    candidates = [assets_dir / name]
    candidates.extend(assets_dir / f"{name}{ext}" for ext in extensions)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def format_key(key: str) -> str:
    """Printable form of a key symbol for log messages."""
    names = {"\b": "<backspace>", "\x7f": "<delete>", " ": "<space>"}
    return names.get(key, key)
