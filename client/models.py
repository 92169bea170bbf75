"""Response models for the Discord REST API.

Only the fields the web client consumes are declared; anything else Discord
sends is ignored.
"""

from datetime import datetime

from pydantic import BaseModel

__all__ = [
    "GUILD_TEXT",
    "Channel",
    "Guild",
    "Message",
    "User",
    "snowflake_key",
]


# Discord channel type for a guild text channel
GUILD_TEXT = 0


def snowflake_key(snowflake: str) -> int:
    """Sort key for a snowflake id.

    Snowflakes grow monotonically with creation time but are transmitted as
    decimal strings of varying length, so they must be compared numerically.

    Args:
        snowflake: Decimal snowflake string.

    Returns:
        The snowflake as an integer.
    """
    return int(snowflake)


class User(BaseModel):
    """A Discord user (the bot itself or a message author).

    Attributes:
        id: User snowflake.
        username: Account username.
        global_name: Display name, if the user set one.
        avatar: Avatar hash, if any.
        bot: Whether the account is a bot.
    """

    id: str
    username: str
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    @property
    def avatar_url(self) -> str | None:
        """CDN URL of the avatar, or None for the default avatar."""
        if not self.avatar:
            return None
        return f"https://cdn.discordapp.com/avatars/{self.id}/{self.avatar}.png"


class Guild(BaseModel):
    """Snapshot of a guild, fetched once per session.

    Attributes:
        id: Guild snowflake.
        name: Guild name.
        icon: Icon hash, if any.
    """

    id: str
    name: str
    icon: str | None = None

    @property
    def initial(self) -> str:
        return self.name[:1].upper()

    @property
    def icon_url(self) -> str | None:
        if not self.icon:
            return None
        return f"https://cdn.discordapp.com/icons/{self.id}/{self.icon}.png"


class Channel(BaseModel):
    """A guild channel.

    Attributes:
        id: Channel snowflake.
        name: Channel name.
        type: Discord channel type (0 for text).
        position: Sorting position within the guild.
        topic: Channel topic, if set.
    """

    id: str
    name: str
    type: int
    position: int = 0
    topic: str | None = None

    @property
    def is_text(self) -> bool:
        return self.type == GUILD_TEXT


class Message(BaseModel):
    """A channel message.

    Attributes:
        id: Message snowflake; increases with creation order.
        channel_id: Channel the message belongs to.
        author: The message author.
        content: Raw message text.
        timestamp: When the message was created.
        edited_timestamp: When it was last edited, if ever.
    """

    id: str
    channel_id: str | None = None
    author: User
    content: str = ""
    timestamp: datetime
    edited_timestamp: datetime | None = None

    @property
    def author_id(self) -> str:
        return self.author.id

    @property
    def author_username(self) -> str:
        return self.author.username

    @property
    def author_avatar_url(self) -> str | None:
        return self.author.avatar_url

    @property
    def created_at(self) -> datetime:
        return self.timestamp

    @property
    def is_edited(self) -> bool:
        return self.edited_timestamp is not None
