"""
Configuration management for QuizDeck.
Loads environment variables and provides centralized config access.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent
    DATA_DIR = PROJECT_ROOT / "data"
    SLIDES_FILE = Path(os.getenv("QUIZDECK_SLIDES_FILE", str(DATA_DIR / "slides.json")))
    ASSETS_DIR = Path(os.getenv("QUIZDECK_ASSETS_DIR", str(DATA_DIR / "assets")))

    # Audio
    AUDIO_ENABLED = _env_bool("QUIZDECK_AUDIO_ENABLED", "true")
    AUDIO_POLICY = os.getenv("QUIZDECK_AUDIO_POLICY", "allow_overlap")  # allow_overlap, cancel_and_restart
    ALARM_ASSET = os.getenv("QUIZDECK_ALARM_ASSET", "Alarm")
    ALARM_ON_INVALID_JUMP = _env_bool("QUIZDECK_ALARM_ON_INVALID_JUMP", "true")

    # Presentation
    SHOW_IDLE_SPLASH = _env_bool("QUIZDECK_SHOW_IDLE_SPLASH", "true")
    WINDOW_WIDTH = int(os.getenv("QUIZDECK_WINDOW_WIDTH", "1280"))
    WINDOW_HEIGHT = int(os.getenv("QUIZDECK_WINDOW_HEIGHT", "800"))
    FULLSCREEN = _env_bool("QUIZDECK_FULLSCREEN", "false")
    FONT_NAME = os.getenv("QUIZDECK_FONT_NAME", "") or None  # None = pygame default font
    QUESTION_FONT_SIZE = int(os.getenv("QUIZDECK_QUESTION_FONT_SIZE", "72"))
    OPTION_FONT_SIZE = int(os.getenv("QUIZDECK_OPTION_FONT_SIZE", "52"))
    PADDING = int(os.getenv("QUIZDECK_PADDING", "100"))
    BACKGROUND_COLOR = (255, 255, 255)
    TEXT_COLOR = (0, 0, 0)

    # Logging
    LOG_LEVEL = os.getenv("QUIZDECK_LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls):
        """Validate that the configuration is usable."""
        errors = []

        if cls.AUDIO_POLICY not in ("allow_overlap", "cancel_and_restart"):
            errors.append(
                f"QUIZDECK_AUDIO_POLICY must be 'allow_overlap' or 'cancel_and_restart', got '{cls.AUDIO_POLICY}'"
            )

        if not cls.ALARM_ASSET:
            errors.append("QUIZDECK_ALARM_ASSET must not be empty")

        if cls.WINDOW_WIDTH <= 0 or cls.WINDOW_HEIGHT <= 0:
            errors.append("Window size must be positive")

        if cls.QUESTION_FONT_SIZE <= 0 or cls.OPTION_FONT_SIZE <= 0:
            errors.append("Font sizes must be positive")

        if cls.PADDING < 0:
            errors.append("QUIZDECK_PADDING must not be negative")

        if cls.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown QUIZDECK_LOG_LEVEL: {cls.LOG_LEVEL}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True
