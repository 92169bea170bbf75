"""User appearance and profile preferences."""

import logging
import re
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.storage import LocalStore

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Settings(BaseModel):
    """Presentation preferences, independent of the session credentials.

    Args:
        display_name: Name shown in the user panel instead of the bot's.
        avatar_url: Custom avatar image URL.
        banner_url: Profile banner image URL.
        about_me: Short profile text.
        accent_color: Accent colour as #rrggbb.
        theme: "dark" or "light".
        compact_mode: Denser message list.
        font_size: Base font size in px.
    """

    display_name: str = Field(default="", max_length=32)
    avatar_url: str = Field(default="")
    banner_url: str = Field(default="")
    about_me: str = Field(default="", max_length=190)
    accent_color: str = Field(default="#5865f2")
    theme: Literal["dark", "light"] = Field(default="dark")
    compact_mode: bool = Field(default=False)
    font_size: int = Field(default=16, ge=12, le=24)

    @field_validator("accent_color")
    @classmethod
    def _normalise_color(cls, value: str) -> str:
        value = value.strip()
        if not _HEX_COLOR.match(value):
            raise ValueError(f"accent_color must be #rgb or #rrggbb, got {value!r}")
        if len(value) == 4:
            value = "#" + "".join(ch * 2 for ch in value[1:])
        return value.lower()


class SettingsStore:
    """Loads, validates and persists Settings.

    Args:
        store: Local store holding the settings entry (never expires).
    """

    def __init__(self, store: LocalStore) -> None:
        self._store = store
        self._settings = self._load()

    @property
    def settings(self) -> Settings:
        return self._settings

    def _load(self) -> Settings:
        raw = self._store.get(SETTINGS_KEY)
        if raw is None:
            return Settings()
        try:
            return Settings(**raw)
        except (ValidationError, TypeError) as e:
            logger.warning(f"Stored settings are invalid, using defaults: {e}")
            return Settings()

    def save(self) -> None:
        self._store.set(SETTINGS_KEY, self._settings.model_dump())

    def update(self, **changes: Any) -> Settings:
        """Apply and persist changes.

        Raises:
            pydantic.ValidationError: If a value is invalid; nothing is saved.
        """
        merged = {**self._settings.model_dump(), **changes}
        self._settings = Settings(**merged)
        self.save()
        return self._settings

    def reset(self) -> Settings:
        self._settings = Settings()
        self.save()
        return self._settings
