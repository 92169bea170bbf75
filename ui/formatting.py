"""Plain-text formatting of guild, channel and message data."""

import re
from datetime import datetime

from client.models import Channel, Message

EMPTY_CHANNEL_PLACEHOLDER = "No messages yet. Start the conversation!"

URL_PATTERN = re.compile(r"(https?://[^\s]+)")

# C0/C1 control characters except tab and newline; they could drive the terminal
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def sanitize(text: str) -> str:
    """Strip control characters so remote text cannot emit terminal escapes."""
    return _CONTROL_CHARS.sub("", text)


def initial(name: str) -> str:
    """Upper-cased first character, used as an avatar placeholder."""
    return sanitize(name)[:1].upper()


def format_time(timestamp: datetime) -> str:
    """Local wall-clock time as HH:MM."""
    return timestamp.astimezone().strftime("%H:%M")


def find_links(content: str) -> list[str]:
    return URL_PATTERN.findall(content)


def format_content(content: str) -> str:
    """Sanitize message text and mark URLs as links (<url>)."""
    return URL_PATTERN.sub(r"<\1>", sanitize(content))


def channel_header(channel: Channel) -> str:
    return f"# {sanitize(channel.name)}"


def input_placeholder(channel: Channel) -> str:
    return f"Message #{sanitize(channel.name)}"


def format_message(message: Message) -> list[str]:
    """Render one message as display lines.

    The first line carries the avatar initial, author and time; the content
    follows, one display line per line of text.
    """
    author = sanitize(message.author_username)
    header = f"[{initial(author)}] {author}  {format_time(message.created_at)}"
    body = format_content(message.content).splitlines() or [""]
    if message.is_edited:
        body[-1] = f"{body[-1]} (edited)"
    return [header] + [f"    {line}" for line in body]
