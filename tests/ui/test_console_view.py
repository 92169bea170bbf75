"""Tests for ConsoleView and its scroll Viewport."""

import pytest

from client.exceptions import NotFoundError
from models.theme import build_palette
from models.settings import Settings
from ui.console import ConsoleView, Viewport
from ui.formatting import EMPTY_CHANNEL_PLACEHOLDER
from tests.fixtures.discord import create_channel, create_message


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture
def view(output) -> ConsoleView:
    return ConsoleView(write=output.append, height=4)


def make_messages(count: int) -> list:
    return [create_message("1", f"message {i}") for i in range(count)]


class TestViewport:
    def test_short_content_is_at_bottom(self) -> None:
        viewport = Viewport(client_height=10, scroll_height=3)
        assert viewport.is_at_bottom
        assert viewport.max_scroll_top == 0

    def test_scroll_by_clamps(self) -> None:
        viewport = Viewport(client_height=5, scroll_height=20)

        viewport.scroll_by(100)
        assert viewport.scroll_top == 15
        assert viewport.is_at_bottom

        viewport.scroll_by(-100)
        assert viewport.scroll_top == 0
        assert viewport.is_at_top

    def test_resize_keeps_offset_in_range(self) -> None:
        viewport = Viewport(client_height=5, scroll_height=20, scroll_top=15)
        viewport.resize(8)
        assert viewport.scroll_top == 3


class TestMessageRendering:
    def test_empty_buffer_shows_placeholder(self, view, output) -> None:
        view.on_message_buffer_changed([])

        assert view.lines == [EMPTY_CHANNEL_PLACEHOLDER]
        assert output == [EMPTY_CHANNEL_PLACEHOLDER]

    def test_first_render_pins_to_bottom(self, view) -> None:
        view.on_message_buffer_changed(make_messages(5))

        assert len(view.lines) == 10
        assert view.viewport.is_at_bottom
        assert view.visible_lines[-1] == "    message 4"

    def test_stays_pinned_when_new_messages_arrive(self, view) -> None:
        messages = make_messages(5)
        view.on_message_buffer_changed(messages)

        view.on_message_buffer_changed(messages + make_messages(1))

        assert view.viewport.is_at_bottom

    def test_scrolled_up_offset_is_kept(self, view) -> None:
        messages = make_messages(5)
        view.on_message_buffer_changed(messages)
        view.scroll(-3)
        offset = view.viewport.scroll_top

        view.on_message_buffer_changed(messages + make_messages(1))

        assert view.viewport.scroll_top == offset
        assert not view.viewport.is_at_bottom

    def test_failure_replaces_list(self, view, output) -> None:
        view.on_message_buffer_changed(make_messages(2))

        view.on_messages_failed("1", NotFoundError("Unknown Channel", code=10003))

        assert view.lines == ["Failed to load messages: [HTTP 404] [10003] Unknown Channel"]
        assert output[-1] == view.lines[0]


class TestChannelHooks:
    def test_channel_selected_updates_header(self, view, output) -> None:
        view.on_message_buffer_changed(make_messages(5))

        view.on_channel_selected(create_channel("random", channel_id="77"))

        assert view.header == "# random"
        assert view.placeholder == "Message #random"
        assert view.active_channel_id == "77"
        assert view.viewport.scroll_top == 0
        assert output[-1] == "# random"

    def test_channel_list_marks_active(self, view, output) -> None:
        channels = [create_channel("general", channel_id="1"), create_channel("random", channel_id="2")]

        view.on_channels_changed(channels, "2")

        assert output == ["   1. #general", ">  2. #random"]


class TestSessionScreens:
    def test_setup_with_error(self, view, output) -> None:
        view.show_setup(error="Failed to connect: [HTTP 401] 401: Unauthorized")

        assert view.screen == "setup"
        assert "! Failed to connect: [HTTP 401] 401: Unauthorized" in output

    def test_apply_theme_copies_palette(self, view) -> None:
        palette = build_palette(Settings())
        view.apply_theme(palette)
        palette["accent"] = "#000000"
        assert view.palette["accent"] == "#5865f2"

    def test_logout_clears_state(self, view) -> None:
        view.on_channel_selected(create_channel("general"))
        view.on_message_buffer_changed(make_messages(3))
        view.draft = "half typed"

        view.on_logged_out()

        assert view.lines == []
        assert view.header == ""
        assert view.draft == ""
        assert view.channels == []

    def test_emoji_picker_grid(self, view, output) -> None:
        view.paint_emoji_picker()

        assert output[0] == "Select an emoji"
        assert len(output) == 12
        assert output[1].startswith(" 1:")
