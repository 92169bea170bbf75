"""Channel sub-client for the Discord API.

This module provides AsyncChannelsClient for the channel and message
endpoints (/channels/{id} and /channels/{id}/messages[/{id}]).

This is an internal module. Import from `client` instead.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from client._base import AsyncBaseClient
from client.exceptions import UpstreamError
from client.models import Channel, Message

# Discord caps a single page of channel messages at 100
MAX_MESSAGE_LIMIT = 100
DEFAULT_MESSAGE_LIMIT = 50


class AsyncChannelsClient(AsyncBaseClient):
    """Asynchronous client for channel endpoints (/channels/*).

    Example:
        async with AsyncDiscordClient(token) as client:
            await client.channels.post_message(channel_id, "Hello!")
            latest = await client.channels.list_messages(channel_id)
            print(latest[0].content)  # newest first
    """

    _BASE_PATH = "/channels"

    async def list_messages(
        self,
        channel_id: str,
        limit: int = DEFAULT_MESSAGE_LIMIT,
    ) -> list[Message]:
        """Fetch the most recent messages of a channel.

        The page is returned exactly as Discord orders it: newest first.

        Args:
            channel_id: Channel snowflake.
            limit: Number of messages to fetch (1-100).

        Returns:
            Messages in descending chronological order.

        Raises:
            ValueError: If limit is outside 1-100.
            APIError: If the request fails.
            UpstreamError: If a 2xx body is not a list of messages.
        """
        if not 1 <= limit <= MAX_MESSAGE_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_MESSAGE_LIMIT}, got {limit}")

        data = await self._get(
            f"{self._BASE_PATH}/{channel_id}/messages",
            params={"limit": limit},
        )
        try:
            return [Message(**item) for item in data]
        except (PydanticValidationError, TypeError) as e:
            raise UpstreamError(
                f"Malformed message list for channel {channel_id}",
                status_code=200,
                response_body=data,
            ) from e

    async def post_message(self, channel_id: str, content: str) -> Message:
        """Send a message.

        Args:
            channel_id: Channel snowflake.
            content: Message text.

        Returns:
            The created message.
        """
        data = await self._post(
            f"{self._BASE_PATH}/{channel_id}/messages",
            json={"content": content},
        )
        return Message(**data)

    async def patch_message(self, channel_id: str, message_id: str, content: str) -> Message:
        """Replace the content of a message the bot authored.

        Args:
            channel_id: Channel snowflake.
            message_id: Message snowflake.
            content: New message text.

        Returns:
            The updated message.

        Raises:
            PermissionError: If the message belongs to another user.
        """
        data = await self._patch(
            f"{self._BASE_PATH}/{channel_id}/messages/{message_id}",
            json={"content": content},
        )
        return Message(**data)

    async def delete_message(self, channel_id: str, message_id: str) -> None:
        """Delete a message.

        Args:
            channel_id: Channel snowflake.
            message_id: Message snowflake.
        """
        await self._delete(f"{self._BASE_PATH}/{channel_id}/messages/{message_id}")

    async def patch_channel(
        self,
        channel_id: str,
        name: str | None = None,
        topic: str | None = None,
        clear_topic: bool = False,
    ) -> Channel:
        """Modify a channel's name and/or topic.

        Args:
            channel_id: Channel snowflake.
            name: New channel name (omitted when None).
            topic: New topic (omitted when None unless clear_topic is set).
            clear_topic: Send ``"topic": null`` to remove the topic.

        Returns:
            The updated channel.
        """
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if topic is not None:
            body["topic"] = topic
        elif clear_topic:
            body["topic"] = None

        data = await self._patch(f"{self._BASE_PATH}/{channel_id}", json=body)
        return Channel(**data)
