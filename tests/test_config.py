"""Tests for ClientConfig loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config import ClientConfig


def test_defaults(monkeypatch) -> None:
    for name in ["POLL_INTERVAL_SECONDS", "MESSAGE_LIMIT", "LOG_LEVEL", "API_BASE_URL"]:
        monkeypatch.delenv(f"DISCORD_WEB_CLIENT_{name}", raising=False)

    config = ClientConfig(_env_file=None)

    assert config.api_base_url == "https://discord.com/api/v10"
    assert config.poll_interval_seconds == 3.0
    assert config.message_limit == 50
    assert config.request_timeout is None
    assert config.credential_ttl_days == 30
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DISCORD_WEB_CLIENT_POLL_INTERVAL_SECONDS", "5")
    monkeypatch.setenv("DISCORD_WEB_CLIENT_LOG_LEVEL", "debug")
    monkeypatch.setenv("DISCORD_WEB_CLIENT_DATA_DIR", str(tmp_path))

    config = ClientConfig(_env_file=None)

    assert config.poll_interval_seconds == 5.0
    assert config.log_level == "DEBUG"
    assert config.store_path == Path(tmp_path) / "client.db"


def test_dotenv_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DISCORD_WEB_CLIENT_MESSAGE_LIMIT=25\n")

    assert ClientConfig(_env_file=env_file).message_limit == 25


@pytest.mark.parametrize(
    "field, value",
    [("poll_interval_seconds", 0), ("message_limit", 101), ("log_level", "LOUD")],
)
def test_invalid_values(field, value) -> None:
    with pytest.raises(ValidationError):
        ClientConfig(_env_file=None, **{field: value})
