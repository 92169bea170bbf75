"""Presentation layer: the SessionView interface and a terminal view."""

from ui.console import ConsoleView, Viewport
from ui.view import SessionView

__all__ = ["ConsoleView", "SessionView", "Viewport"]
