"""Terminal implementation of the SessionView.

ConsoleView keeps the rendered message list as display lines behind a
scrollable viewport and paints the visible window to an output callable.
"""

import logging
from typing import Callable

from pydantic import BaseModel, Field

from client.models import Channel, Guild, Message, User
from models.emoji import palette_rows
from ui.formatting import (
    EMPTY_CHANNEL_PLACEHOLDER,
    channel_header,
    format_message,
    initial,
    input_placeholder,
    sanitize,
)
from ui.view import SessionView

logger = logging.getLogger(__name__)


class Viewport(BaseModel):
    """Scroll position over a list of display lines.

    Args:
        scroll_top: Index of the first visible line.
        client_height: Number of visible lines.
        scroll_height: Total number of lines.
    """

    scroll_top: int = Field(default=0, ge=0)
    client_height: int = Field(default=20, ge=1)
    scroll_height: int = Field(default=0, ge=0)

    @property
    def max_scroll_top(self) -> int:
        return max(0, self.scroll_height - self.client_height)

    @property
    def is_at_bottom(self) -> bool:
        return self.scroll_height - self.scroll_top <= self.client_height

    @property
    def is_at_top(self) -> bool:
        return self.scroll_top == 0

    def scroll_by(self, lines: int) -> None:
        self.scroll_top = max(0, min(self.max_scroll_top, self.scroll_top + lines))

    def pin_to_bottom(self) -> None:
        self.scroll_top = self.max_scroll_top

    def resize(self, scroll_height: int) -> None:
        """Set a new content height, keeping scroll_top within range."""
        self.scroll_height = scroll_height
        self.scroll_top = min(self.scroll_top, self.max_scroll_top)


class ConsoleView(SessionView):
    """SessionView that renders to a line-oriented terminal.

    Args:
        write: Output callable, one call per display line.
        height: Number of message lines shown at once.
    """

    def __init__(self, write: Callable[[str], None] = print, height: int = 20) -> None:
        self._write = write
        self.viewport = Viewport(client_height=height)
        self.lines: list[str] = []
        self.palette: dict[str, str] = {}
        self.header = ""
        self.placeholder = ""
        self.draft = ""
        self.error: str | None = None
        self.channels: list[Channel] = []
        self.active_channel_id: str | None = None
        self.screen = "setup"

    # SessionView hooks

    def apply_theme(self, palette: dict[str, str]) -> None:
        self.palette = dict(palette)

    def show_setup(self, error: str | None = None) -> None:
        self.screen = "setup"
        self.error = error
        self._write("== Connect a bot ==")
        if error:
            self._write(f"! {error}")
        self._write("Use /login <bot-token> <server-id> [--remember]")

    def show_main(self) -> None:
        self.screen = "main"
        self.error = None

    def on_guild_loaded(self, guild: Guild, me: User | None, display_name: str) -> None:
        self._write(f"[{initial(guild.name)}] {sanitize(guild.name)}")
        if display_name:
            self._write(f"Signed in as {sanitize(display_name)}")

    def on_channels_changed(self, channels: list[Channel], active_channel_id: str | None) -> None:
        self.channels = list(channels)
        self.active_channel_id = active_channel_id
        self.paint_channels()

    def on_channel_selected(self, channel: Channel) -> None:
        self.active_channel_id = channel.id
        self.header = channel_header(channel)
        self.placeholder = input_placeholder(channel)
        self.viewport.scroll_top = 0
        self._write(self.header)

    def on_message_buffer_changed(self, messages: list[Message]) -> None:
        """Redraw the message list.

        If the viewport was at the bottom, or at the very top (nothing
        scrolled yet), it is pinned to the bottom after the redraw; otherwise
        the old offset is kept as far as the new content allows.
        """
        self.error = None
        if not messages:
            self.lines = [EMPTY_CHANNEL_PLACEHOLDER]
            self.viewport.resize(1)
            self.viewport.scroll_top = 0
            self.paint()
            return

        stick = self.viewport.is_at_bottom or self.viewport.is_at_top
        lines: list[str] = []
        for message in messages:
            lines.extend(format_message(message))
        self.lines = lines
        self.viewport.resize(len(lines))
        if stick:
            self.viewport.pin_to_bottom()
        self.paint()

    def on_messages_failed(self, channel_id: str, error: Exception) -> None:
        self.error = f"Failed to load messages: {error}"
        self.lines = [self.error]
        self.viewport.resize(1)
        self.viewport.scroll_top = 0
        self.paint()

    def on_logged_out(self) -> None:
        self.lines = []
        self.viewport = Viewport(client_height=self.viewport.client_height)
        self.header = ""
        self.placeholder = ""
        self.draft = ""
        self.channels = []
        self.active_channel_id = None

    # Painting

    @property
    def visible_lines(self) -> list[str]:
        top = self.viewport.scroll_top
        return self.lines[top:top + self.viewport.client_height]

    def paint(self) -> None:
        for line in self.visible_lines:
            self._write(line)

    def paint_channels(self) -> None:
        for index, channel in enumerate(self.channels, start=1):
            marker = ">" if channel.id == self.active_channel_id else " "
            self._write(f"{marker} {index:>2}. #{sanitize(channel.name)}")

    def paint_emoji_picker(self) -> None:
        self._write("Select an emoji")
        number = 1
        for row in palette_rows():
            cells = []
            for emoji in row:
                cells.append(f"{number:>2}:{emoji}")
                number += 1
            self._write(" ".join(cells))

    def scroll(self, lines: int) -> None:
        self.viewport.scroll_by(lines)
        self.paint()

    def report(self, message: str) -> None:
        """Show an inline error or notice."""
        self._write(f"! {message}")
