"""Unit tests for ChannelSelector: switching channels and owning the poll loop."""

import asyncio

import pytest

from client import AsyncDiscordClient, ValidationError
from models.channel_selector import ChannelSelector, SelectorState
from models.session import SessionState
from models.synchronizer import MessageSynchronizer
from tests.fixtures.discord import GUILD_ID, TOKEN


@pytest.fixture
async def discord_client(fake_api):
    client = AsyncDiscordClient(TOKEN, transport=fake_api.transport)
    yield client
    await client.close()


@pytest.fixture
async def session(discord_client) -> SessionState:
    state = SessionState()
    state.set_channels(await discord_client.guilds.list_channels(GUILD_ID))
    return state


@pytest.fixture
def synchronizer(session, discord_client, recording_view) -> MessageSynchronizer:
    return MessageSynchronizer(session, discord_client.channels, recording_view)


@pytest.fixture
def selector(session, synchronizer, recording_view):
    selector = ChannelSelector(session, synchronizer, recording_view, poll_interval=60.0)
    yield selector
    selector.stop()


class TestSelect:
    async def test_starts_idle(self, selector) -> None:
        assert selector.state is SelectorState.IDLE
        assert selector.handle is None

    async def test_select_activates_and_loads(
        self, fake_api, selector, session, recording_view
    ) -> None:
        channel = session.channels[0]
        fake_api.add_message(channel.id, "welcome")

        assert await selector.select(channel.id)

        assert selector.state is SelectorState.ACTIVE
        assert session.active_channel_id == channel.id
        assert recording_view.selected == [channel]
        assert [m.content for m in session.messages] == ["welcome"]
        assert selector.handle.is_running
        assert selector.handle.channel_id == channel.id

    async def test_unknown_channel_rejected(self, fake_api, selector) -> None:
        with pytest.raises(ValidationError):
            await selector.select("999")

        assert selector.state is SelectorState.IDLE
        assert fake_api.requests[-1].url.path.endswith("/channels")

    async def test_switch_leaves_exactly_one_handle(self, selector, session) -> None:
        first, second = session.channels[0].id, session.channels[1].id

        await selector.select(first)
        old_handle = selector.handle
        await selector.select(second)

        assert not old_handle.is_running
        assert selector.handle is not old_handle
        assert selector.handle.is_running
        assert selector.handle.channel_id == second

    async def test_buffer_cleared_on_switch(self, fake_api, selector, session, recording_view) -> None:
        first, second = session.channels[0].id, session.channels[1].id
        fake_api.add_message(first, "first channel")
        fake_api.add_message(second, "second channel")
        await selector.select(first)
        gate = fake_api.hold(second)

        pending = asyncio.create_task(selector.select(second))
        await fake_api.until_held(second)

        assert session.messages == []
        gate.set()
        await pending
        assert [m.content for m in session.messages] == ["second channel"]

    async def test_rapid_switch_renders_only_final_channel(
        self, fake_api, selector, session, recording_view
    ) -> None:
        first, second = session.channels[0].id, session.channels[1].id
        fake_api.add_message(first, "from first")
        fake_api.add_message(second, "from second")
        gate = fake_api.hold(first)

        slow = asyncio.create_task(selector.select(first))
        await fake_api.until_held(first)
        await selector.select(second)
        gate.set()
        await slow

        assert [[m.content for m in render] for render in recording_view.renders] == [["from second"]]
        assert session.active_channel_id == second
        assert selector.handle.channel_id == second

    async def test_reselecting_same_channel_replaces_handle(self, selector, session) -> None:
        channel_id = session.channels[0].id
        await selector.select(channel_id)
        old_handle = selector.handle

        await selector.select(channel_id)

        assert not old_handle.is_running
        assert selector.handle.is_running


class TestPolling:
    async def test_poll_picks_up_new_messages(
        self, fake_api, session, synchronizer, recording_view
    ) -> None:
        selector = ChannelSelector(session, synchronizer, recording_view, poll_interval=0.01)
        channel_id = session.channels[0].id
        await selector.select(channel_id)

        fake_api.add_message(channel_id, "arrived later")
        for _ in range(100):
            if session.messages:
                break
            await asyncio.sleep(0.01)
        contents = [m.content for m in session.messages]
        selector.stop()

        assert contents == ["arrived later"]
        assert recording_view.renders[0] == []
        assert [m.content for m in recording_view.renders[-1]] == ["arrived later"]

    async def test_quiet_channel_does_not_rerender(
        self, fake_api, session, synchronizer, recording_view
    ) -> None:
        selector = ChannelSelector(session, synchronizer, recording_view, poll_interval=0.01)
        channel_id = session.channels[0].id
        fake_api.add_message(channel_id, "hello")
        await selector.select(channel_id)

        await asyncio.sleep(0.1)
        ticks = selector.handle.ticks
        selector.stop()

        assert ticks >= 2
        assert len(recording_view.renders) == 1


class TestStop:
    async def test_stop_returns_to_idle(self, selector, session) -> None:
        await selector.select(session.channels[0].id)
        handle = selector.handle

        selector.stop()

        assert selector.state is SelectorState.IDLE
        assert selector.handle is None
        assert not handle.is_running
        assert session.messages == []

    async def test_stop_when_idle_is_harmless(self, selector) -> None:
        selector.stop()
        assert selector.state is SelectorState.IDLE
