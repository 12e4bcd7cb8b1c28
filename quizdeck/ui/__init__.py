# UI module initialization
from .app import PresenterApp, SlideRenderer, main

__all__ = ["PresenterApp", "SlideRenderer", "main"]
