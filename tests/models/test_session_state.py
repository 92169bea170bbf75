"""Unit tests for SessionState."""

import pytest

from client.models import Guild
from models.credentials import Credentials
from models.session import SessionState
from tests.fixtures.discord import (
    GUILD_ID,
    TOKEN,
    create_channel,
    create_message,
)


@pytest.fixture
def session() -> SessionState:
    state = SessionState()
    state.set_channels([create_channel("general", 0, channel_id="10"), create_channel("random", 1, channel_id="11")])
    return state


class TestSessionDefaults:
    def test_empty_session(self) -> None:
        state = SessionState()

        assert not state.is_authenticated
        assert state.channels == []
        assert state.messages == []
        assert state.active_channel is None
        assert state.newest_message_id is None


class TestActiveChannel:
    def test_set_and_read(self, session) -> None:
        session.set_active_channel("11")

        assert session.active_channel_id == "11"
        assert session.active_channel.name == "random"

    def test_unknown_channel_rejected(self, session) -> None:
        with pytest.raises(ValueError):
            session.set_active_channel("99")
        assert session.active_channel_id is None

    def test_clear_selection(self, session) -> None:
        session.set_active_channel("10")
        session.set_active_channel(None)
        assert session.active_channel is None


class TestMessageBuffer:
    def test_replace_keeps_ascending_order(self, session) -> None:
        messages = [
            create_message("10", "first", message_id="100000000000000001"),
            create_message("10", "second", message_id="100000000000000002"),
        ]
        session.replace_messages(messages)

        assert [m.content for m in session.messages] == ["first", "second"]
        assert session.newest_message_id == "100000000000000002"
        assert session.find_message("100000000000000001").content == "first"
        assert session.find_message("1") is None

    def test_descending_order_rejected(self, session) -> None:
        messages = [
            create_message("10", "newer", message_id="100000000000000002"),
            create_message("10", "older", message_id="100000000000000001"),
        ]
        with pytest.raises(ValueError):
            session.replace_messages(messages)
        assert session.messages == []

    def test_ordering_is_numeric(self, session) -> None:
        messages = [
            create_message("10", "short id", message_id="99999999999999999"),
            create_message("10", "long id", message_id="100000000000000000"),
        ]
        session.replace_messages(messages)
        assert session.newest_message_id == "100000000000000000"


class TestClear:
    def test_clear_resets_everything(self, session) -> None:
        session.set_credentials(Credentials.parse(TOKEN, GUILD_ID))
        session.set_guild(Guild(id=GUILD_ID, name="Test"))
        session.set_active_channel("10")
        session.replace_messages([create_message("10")])

        session.clear()

        assert not session.is_authenticated
        assert session.guild is None
        assert session.me is None
        assert session.channels == []
        assert session.active_channel_id is None
        assert session.messages == []
