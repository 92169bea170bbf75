"""Base class for all presentation layers.

The core never touches a rendering technology. It calls these hooks on a
SessionView, and the view decides how to show the result.
"""

from abc import ABC, abstractmethod

from client.models import Channel, Guild, Message, User


class SessionView(ABC):
    """Presentation hooks invoked by the ClientController and its components.

    Hooks are called synchronously from the event loop and must not block.
    """

    @abstractmethod
    def apply_theme(self, palette: dict[str, str]) -> None:
        """Apply the computed appearance palette.

        Called at startup before any request is made, and again whenever the
        settings change.

        Args:
            palette: Token name to CSS-style value (see models.theme).
        """
        pass

    @abstractmethod
    def show_setup(self, error: str | None = None) -> None:
        """Show the credential form, optionally with an error line."""
        pass

    @abstractmethod
    def show_main(self) -> None:
        """Switch to the channel/message screen."""
        pass

    @abstractmethod
    def on_guild_loaded(self, guild: Guild, me: User | None, display_name: str) -> None:
        """Guild header and user panel are available."""
        pass

    @abstractmethod
    def on_channels_changed(self, channels: list[Channel], active_channel_id: str | None) -> None:
        """The channel list was (re)loaded."""
        pass

    @abstractmethod
    def on_channel_selected(self, channel: Channel) -> None:
        """A channel became active; refresh its header and input placeholder."""
        pass

    @abstractmethod
    def on_message_buffer_changed(self, messages: list[Message]) -> None:
        """Redraw the message list from the buffer.

        Args:
            messages: Buffered messages, oldest first. Empty means the channel
                has no messages and the placeholder should be shown.
        """
        pass

    @abstractmethod
    def on_messages_failed(self, channel_id: str, error: Exception) -> None:
        """A user-visible message load failed; show an error in the list area."""
        pass

    @abstractmethod
    def on_logged_out(self) -> None:
        """Session ended; clear forms and any per-session display state."""
        pass
