"""Emoji palette offered by the picker."""

EMOJI_PALETTE: tuple[str, ...] = (
    "😀", "😃", "😄", "😁", "😆", "😅", "🤣", "😂",
    "🙂", "🙃", "😉", "😊", "😇", "🥰", "😍", "🤩",
    "😘", "😗", "😚", "😙", "🥲", "😋", "😛", "😜",
    "🤪", "😝", "🤑", "🤗", "🤭", "🤫", "🤔", "🤐",
    "🤨", "😐", "😑", "😶", "😏", "😒", "🙄", "😬",
    "🤥", "😌", "😔", "😪", "🤤", "😴", "😷", "🤒",
    "👍", "👎", "👌", "✌️", "🤞", "🤟", "🤘", "🤙",
    "👏", "🙌", "👐", "🤝", "🙏", "✍️", "💪", "🦾",
    "❤️", "🧡", "💛", "💚", "💙", "💜", "🖤", "🤍",
    "💔", "❣️", "💕", "💞", "💓", "💗", "💖", "💘",
    "🔥", "💯", "✨", "⭐", "🌟", "💫", "🎉", "🎊",
)

PICKER_COLUMNS = 8


def palette_rows(columns: int = PICKER_COLUMNS) -> list[tuple[str, ...]]:
    """Split the palette into grid rows for display."""
    return [EMOJI_PALETTE[i:i + columns] for i in range(0, len(EMOJI_PALETTE), columns)]


def insert_emoji(draft: str, emoji: str) -> str:
    """Append an emoji to the message draft.

    Raises:
        ValueError: If the emoji is not in the palette.
    """
    if emoji not in EMOJI_PALETTE:
        raise ValueError(f"Not a palette emoji: {emoji!r}")
    return draft + emoji
