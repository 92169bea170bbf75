"""Durable local key/value storage for credentials and preferences.

Values are stored as JSON in a single SQLite table. An entry may carry an
expiry time; expired entries read as missing and are removed on access.
"""

import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Any

from pydantic import SecretStr

from models.credentials import Credentials

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

TOKEN_KEY = "discord_bot_token"
GUILD_ID_KEY = "discord_server_id"


class LocalStore:
    """SQLite-backed key/value store with optional per-entry expiry.

    Args:
        path: Database file, or ":memory:" for a throwaway store.
        clock: Returns the current epoch time; replaceable in tests.
    """

    def __init__(self, path: str | Path = ":memory:", clock=time.time) -> None:
        if path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._clock = clock
        self.conn = sqlite3.connect(str(path))
        self.conn.execute(
            "CREATE TABLE IF NOT EXISTS entries ("
            "key TEXT PRIMARY KEY, value TEXT NOT NULL, expires_at REAL)"
        )
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    def set(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        """Store a JSON-serialisable value.

        Args:
            key: Entry name.
            value: Value to store.
            ttl_seconds: Lifetime in seconds; None keeps it forever.
        """
        expires_at = None if ttl_seconds is None else self._clock() + ttl_seconds
        self.conn.execute(
            "INSERT OR REPLACE INTO entries (key, value, expires_at) VALUES (?, ?, ?)",
            (key, json.dumps(value), expires_at),
        )
        self.conn.commit()

    def get(self, key: str, default: Any = None) -> Any:
        row = self.conn.execute(
            "SELECT value, expires_at FROM entries WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return default

        value, expires_at = row
        if expires_at is not None and expires_at <= self._clock():
            logger.debug(f"Entry {key!r} expired")
            self.delete(key)
            return default
        return json.loads(value)

    def delete(self, key: str) -> None:
        self.conn.execute("DELETE FROM entries WHERE key = ?", (key,))
        self.conn.commit()


class CredentialStore:
    """Remembers the bot token and guild id between runs.

    Args:
        store: Underlying local store.
        ttl_days: Expiry horizon applied on save.
    """

    def __init__(self, store: LocalStore, ttl_days: int = 30) -> None:
        self._store = store
        self.ttl_days = ttl_days

    def save(self, credentials: Credentials) -> None:
        ttl = self.ttl_days * SECONDS_PER_DAY
        self._store.set(TOKEN_KEY, credentials.token, ttl_seconds=ttl)
        self._store.set(GUILD_ID_KEY, credentials.guild_id, ttl_seconds=ttl)

    def load(self) -> Credentials | None:
        """Return remembered credentials if both entries are present and unexpired."""
        token = self._store.get(TOKEN_KEY)
        guild_id = self._store.get(GUILD_ID_KEY)
        if not token or not guild_id:
            return None
        return Credentials(bot_token=SecretStr(token), guild_id=guild_id)

    def clear(self) -> None:
        self._store.delete(TOKEN_KEY)
        self._store.delete(GUILD_ID_KEY)
