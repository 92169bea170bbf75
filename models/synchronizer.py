"""Message synchronization: fetch, diff and render cycles for one channel.

The synchronizer is the only writer of the session's message buffer. Each
cycle fetches the newest page of messages, flips it into oldest-first order,
decides whether anything changed, and asks the view to redraw.

Two modes exist:

- FULL: user-visible loads (first load, after send/edit/delete). Always
  replaces the buffer and redraws; failures are shown in place of the list.
- SILENT: background poll ticks. Redraws only when the newest message id
  differs from the buffered one; failures are logged and otherwise ignored so
  already-rendered messages stay on screen.

Every cycle is tagged with the channel it was started for and with a
sequence number. A response is dropped if its channel is no longer active
or if a cycle started later has already been applied.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from client.exceptions import DiscordClientError
from client.models import Message, snowflake_key
from models.session import SessionState

if TYPE_CHECKING:
    from client._channels import AsyncChannelsClient
    from ui.view import SessionView

logger = logging.getLogger(__name__)


class SyncMode(str, Enum):
    """How a sync cycle treats the fetched page."""

    FULL = "full"
    SILENT = "silent"


class MessageSynchronizer:
    """Keeps the session's message buffer in step with a channel.

    Args:
        session: The session whose buffer this synchronizer owns.
        channels: Gateway for the channel/message endpoints.
        view: Presentation hooks to notify on change or failure.
        limit: Page size of each fetch.
    """

    def __init__(
        self,
        session: SessionState,
        channels: AsyncChannelsClient,
        view: SessionView,
        limit: int = 50,
    ) -> None:
        self.session = session
        self.limit = limit
        self._channels = channels
        self._view = view

        self._issued = 0
        self._applied = 0
        # Channel whose messages the buffer currently reflects
        self._synced_channel_id: str | None = None
        self.render_count = 0

    def reset(self) -> None:
        """Forget what the buffer reflects and empty it.

        Called on channel switch and logout so that responses started before
        the reset cannot be applied afterwards.
        """
        self._applied = self._issued
        self._synced_channel_id = None
        self.session.replace_messages([])

    def _is_current(self, channel_id: str) -> bool:
        return self.session.active_channel_id == channel_id

    async def sync(self, channel_id: str, mode: SyncMode = SyncMode.FULL) -> bool:
        """Run one fetch, diff and render cycle.

        Args:
            channel_id: Channel to fetch; must still be active when the
                response arrives or the response is dropped.
            mode: FULL or SILENT (see module docstring).

        Returns:
            True if the buffer was replaced and the view redrawn.
        """
        self._issued += 1
        seq = self._issued

        try:
            page = await self._channels.list_messages(channel_id, limit=self.limit)
        except DiscordClientError as e:
            if not self._is_current(channel_id) or seq <= self._applied:
                logger.debug(f"Ignoring superseded failure for channel {channel_id}: {e}")
                return False
            if mode is SyncMode.SILENT:
                logger.warning(f"Background sync of channel {channel_id} failed: {e}")
                return False
            logger.info(f"Loading messages for channel {channel_id} failed: {e}")
            self._synced_channel_id = None
            self._view.on_messages_failed(channel_id, e)
            return False

        if not self._is_current(channel_id):
            logger.debug(f"Discarding stale response for channel {channel_id}")
            return False
        if seq <= self._applied:
            logger.debug(f"Discarding out-of-order response #{seq} for channel {channel_id}")
            return False

        # Discord returns newest first; the buffer is oldest first
        messages = sorted(page, key=lambda m: snowflake_key(m.id))

        if mode is SyncMode.SILENT and self._synced_channel_id == channel_id:
            newest_id = messages[-1].id if messages else None
            if newest_id == self.session.newest_message_id:
                logger.debug(f"No new messages in channel {channel_id}")
                return False

        self._apply(channel_id, seq, messages)
        return True

    def _apply(self, channel_id: str, seq: int, messages: list[Message]) -> None:
        self.session.replace_messages(messages)
        self._applied = seq
        self._synced_channel_id = channel_id
        self.render_count += 1
        self._view.on_message_buffer_changed(self.session.messages)

    async def send_message(self, channel_id: str, content: str) -> Message | None:
        """Post a message, then reload the channel.

        Args:
            channel_id: Target channel.
            content: Draft text; surrounding whitespace is dropped.

        Returns:
            The created message, or None when the trimmed draft was empty
            (no request is made in that case).

        Raises:
            DiscordClientError: If the post fails; the buffer is untouched.
        """
        content = content.strip()
        if not content:
            return None

        message = await self._channels.post_message(channel_id, content)
        logger.info(f"Sent message {message.id} to channel {channel_id}")
        await self.sync(channel_id, SyncMode.FULL)
        return message

    async def edit_message(self, channel_id: str, message_id: str, content: str) -> Message | None:
        """Replace a message's content, then reload the channel.

        Returns:
            The updated message, or None when the trimmed content was empty.

        Raises:
            DiscordClientError: If the edit fails; the buffer is untouched.
        """
        content = content.strip()
        if not content:
            return None

        message = await self._channels.patch_message(channel_id, message_id, content)
        logger.info(f"Edited message {message_id} in channel {channel_id}")
        await self.sync(channel_id, SyncMode.FULL)
        return message

    async def delete_message(self, channel_id: str, message_id: str) -> None:
        """Delete a message, then reload the channel.

        Raises:
            DiscordClientError: If the delete fails; the buffer is untouched.
        """
        await self._channels.delete_message(channel_id, message_id)
        logger.info(f"Deleted message {message_id} from channel {channel_id}")
        await self.sync(channel_id, SyncMode.FULL)
