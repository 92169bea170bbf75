"""Runtime configuration for the Discord web client.

Values come from environment variables prefixed ``DISCORD_WEB_CLIENT_`` and,
if present, a ``.env`` file in the working directory.

Example:
    DISCORD_WEB_CLIENT_POLL_INTERVAL_SECONDS=5 uv run python main.py
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """Tunable settings for the client session.

    Attributes:
        api_base_url: Discord REST base endpoint.
        poll_interval_seconds: Period of the background message poll.
        message_limit: Number of recent messages fetched per sync.
        request_timeout: Per-request timeout in seconds; None disables it.
        data_dir: Directory holding the local credential/settings store.
        credential_ttl_days: How long remembered credentials stay valid.
        log_level: Root logging level.
    """

    model_config = SettingsConfigDict(
        env_prefix="DISCORD_WEB_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(default="https://discord.com/api/v10")
    poll_interval_seconds: float = Field(default=3.0, gt=0)
    message_limit: int = Field(default=50, ge=1, le=100)
    request_timeout: float | None = Field(default=None)
    data_dir: Path = Field(default=Path.home() / ".discord-web-client")
    credential_ttl_days: int = Field(default=30, ge=1)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def store_path(self) -> Path:
        return self.data_dir / "client.db"
