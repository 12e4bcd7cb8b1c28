"""
Audio Cue - Fire-and-forget playback of named sound assets.
Supports a pygame mixer backend and a silent backend for disabled audio.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import pygame

from ..utils.helpers import AUDIO_EXTENSIONS, resolve_asset

logger = logging.getLogger(__name__)


class OverlapPolicy(Enum):
    """What happens to cues still playing when a new one starts."""
    ALLOW_OVERLAP = "allow_overlap"
    CANCEL_AND_RESTART = "cancel_and_restart"


class AudioCue:
    """Plays a named asset. Never reports back to the caller."""

    def play(self, asset_name: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Release playback resources."""


class SilentAudioCue(AudioCue):
    """Logs cues instead of playing them."""

    def play(self, asset_name: str) -> None:
        logger.debug("Audio disabled, skipping cue '%s'", asset_name)


class PygameAudioCue(AudioCue):
    """Play cues through the pygame mixer."""

    def __init__(self, assets_dir: Path, policy: OverlapPolicy = OverlapPolicy.ALLOW_OVERLAP):
        """
        Initialize pygame audio playback.

        Args:
            assets_dir: Directory the asset names are resolved against
            policy: Whether a new cue may overlap cues already playing

        Raises:
            pygame.error: If the mixer cannot be opened
        """
        self.assets_dir = Path(assets_dir)
        self.policy = policy
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

        # Initialize pygame mixer for audio playback
        if not pygame.mixer.get_init():
            pygame.mixer.init()

    def play(self, asset_name: str) -> None:
        """Start playing an asset. Missing or undecodable assets are logged and skipped."""
        sound = self._load(asset_name)
        if sound is None:
            return

        if self.policy is OverlapPolicy.CANCEL_AND_RESTART:
            pygame.mixer.stop()

        sound.play()
        logger.debug("Playing cue '%s'", asset_name)

    def _load(self, asset_name: str) -> Optional[pygame.mixer.Sound]:
        if asset_name in self._sounds:
            return self._sounds[asset_name]

        path = resolve_asset(self.assets_dir, asset_name, AUDIO_EXTENSIONS)
        if path is None:
            logger.warning("Audio asset '%s' not found in %s", asset_name, self.assets_dir)
            return None

        try:
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.warning("Error loading audio asset '%s' from %s: %s", asset_name, path, e)
            return None

        self._sounds[asset_name] = sound
        return sound

    def close(self) -> None:
        self._sounds.clear()
        if pygame.mixer.get_init():
            pygame.mixer.quit()


def create_audio_cue(assets_dir: Path, enabled: bool = True, policy: str = "allow_overlap") -> AudioCue:
    """
    Build the audio backend for the presenter.

    Falls back to SilentAudioCue when audio is disabled or the mixer cannot be opened.

    Args:
        assets_dir: Directory holding the sound assets
        enabled: Whether audio is enabled at all
        policy: Overlap policy name (allow_overlap, cancel_and_restart)

    Returns:
        An AudioCue implementation
    """
    if not enabled:
        logger.info("Audio disabled")
        return SilentAudioCue()

    try:
        return PygameAudioCue(assets_dir, OverlapPolicy(policy))
    except pygame.error as e:
        logger.warning("Could not open audio device, continuing without sound: %s", e)
        return SilentAudioCue()
