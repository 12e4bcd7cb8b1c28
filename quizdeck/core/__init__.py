# Core module initialization
from .slide_store import SlideStore, Slide, SlideDeck, SlideSet, LoadError
from .audio_cue import AudioCue, PygameAudioCue, SilentAudioCue, OverlapPolicy, create_audio_cue
from .presentation_state import PresentationState, SlideNavigator, SlideView, ViewKind
from .input_router import InputRouter, InteractionType, InteractionEvent

__all__ = [
    "SlideStore",
    "Slide",
    "SlideDeck",
    "SlideSet",
    "LoadError",
    "AudioCue",
    "PygameAudioCue",
    "SilentAudioCue",
    "OverlapPolicy",
    "create_audio_cue",
    "PresentationState",
    "SlideNavigator",
    "SlideView",
    "ViewKind",
    "InputRouter",
    "InteractionType",
    "InteractionEvent",
]
