"""Session state for one authenticated client session."""

from pydantic import BaseModel, Field

from client.models import Channel, Guild, Message, User, snowflake_key
from models.credentials import Credentials


class SessionState(BaseModel):
    """Single authoritative holder of the session's data.

    Owned by the ClientController and injected into the components that need
    it. Every setter replaces its field in one assignment, so a caller that
    fetches first and commits after success can never leave a field half
    written. The message buffer is only written by the MessageSynchronizer;
    everyone else reads it.

    Args:
        credentials: Token and guild id, or None when logged out.
        guild: Guild snapshot fetched at connect.
        me: The bot user.
        channels: Text channels ordered by position.
        active_channel_id: Selected channel, or None when idle.
        messages: Buffered messages, oldest first.
    """

    credentials: Credentials | None = Field(default=None)
    guild: Guild | None = Field(default=None)
    me: User | None = Field(default=None)
    channels: list[Channel] = Field(default_factory=list)
    active_channel_id: str | None = Field(default=None)
    messages: list[Message] = Field(default_factory=list)

    @property
    def is_authenticated(self) -> bool:
        return self.credentials is not None

    @property
    def active_channel(self) -> Channel | None:
        if self.active_channel_id is None:
            return None
        return self.find_channel(self.active_channel_id)

    @property
    def newest_message_id(self) -> str | None:
        """Id of the newest buffered message, or None if the buffer is empty."""
        if not self.messages:
            return None
        return self.messages[-1].id

    def find_channel(self, channel_id: str) -> Channel | None:
        return next((ch for ch in self.channels if ch.id == channel_id), None)

    def find_message(self, message_id: str) -> Message | None:
        return next((m for m in self.messages if m.id == message_id), None)

    def set_credentials(self, credentials: Credentials) -> None:
        self.credentials = credentials

    def set_guild(self, guild: Guild) -> None:
        self.guild = guild

    def set_self(self, user: User) -> None:
        self.me = user

    def set_channels(self, channels: list[Channel]) -> None:
        self.channels = list(channels)

    def set_active_channel(self, channel_id: str | None) -> None:
        """Mark a channel as active, or clear the selection.

        Args:
            channel_id: A channel from the current list, or None.

        Raises:
            ValueError: If channel_id is not in the channel list.
        """
        if channel_id is not None and self.find_channel(channel_id) is None:
            raise ValueError(f"Unknown channel: {channel_id}")
        self.active_channel_id = channel_id

    def replace_messages(self, messages: list[Message]) -> None:
        """Replace the whole message buffer.

        Args:
            messages: Messages in ascending chronological order.

        Raises:
            ValueError: If messages are not ordered oldest first.
        """
        keys = [snowflake_key(m.id) for m in messages]
        if any(a > b for a, b in zip(keys, keys[1:])):
            raise ValueError("Message buffer must be in ascending chronological order")
        self.messages = list(messages)

    def clear(self) -> None:
        """Reset everything (logout)."""
        self.credentials = None
        self.guild = None
        self.me = None
        self.channels = []
        self.active_channel_id = None
        self.messages = []
