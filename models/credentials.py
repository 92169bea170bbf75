"""Bot credentials and their local validation."""

import re

from pydantic import BaseModel, ConfigDict, SecretStr

from client.exceptions import ValidationError

# Discord bot tokens are well over this; anything shorter is a paste error.
TOKEN_MIN_LENGTH = 50

SNOWFLAKE_PATTERN = re.compile(r"^\d{17,19}$")


def is_snowflake(value: str) -> bool:
    """Return True if value has the 17-19 digit shape of a snowflake."""
    return bool(SNOWFLAKE_PATTERN.match(value))


class Credentials(BaseModel):
    """A bot token paired with the guild it operates on.

    Both halves are always present; an unauthenticated session simply has no
    Credentials object. The token is kept as a SecretStr so it never shows up
    in reprs or log lines.

    Args:
        bot_token: Opaque bot token.
        guild_id: Guild snowflake.
    """

    model_config = ConfigDict(frozen=True)

    bot_token: SecretStr
    guild_id: str

    @property
    def token(self) -> str:
        return self.bot_token.get_secret_value()

    @classmethod
    def parse(cls, token: str | None, guild_id: str | None) -> "Credentials":
        """Trim and validate raw form input.

        Args:
            token: Bot token as typed by the operator.
            guild_id: Guild id as typed by the operator.

        Returns:
            Validated credentials.

        Raises:
            ValidationError: If a field is empty, the token is too short, or
                the guild id is not a snowflake.
        """
        token = (token or "").strip()
        guild_id = (guild_id or "").strip()

        if not token or not guild_id:
            raise ValidationError("Please fill in all fields")
        if len(token) < TOKEN_MIN_LENGTH:
            raise ValidationError(
                f"Bot token looks too short (expected at least {TOKEN_MIN_LENGTH} characters)",
                field="bot_token",
            )
        if not is_snowflake(guild_id):
            raise ValidationError(
                "Server ID must be a 17-19 digit number",
                field="guild_id",
            )

        return cls(bot_token=SecretStr(token), guild_id=guild_id)
