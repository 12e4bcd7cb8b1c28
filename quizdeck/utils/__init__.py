# Utils module initialization
from .config import Config
from .helpers import (
    AUDIO_EXTENSIONS,
    IMAGE_EXTENSIONS,
    load_json,
    resolve_asset,
    format_key,
)

__all__ = [
    "Config",
    "AUDIO_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "load_json",
    "resolve_asset",
    "format_key",
]
