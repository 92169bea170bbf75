"""Main Discord client class.

This module provides the entry point for talking to the Discord REST API:
- AsyncDiscordClient: Asynchronous client authenticated with a bot token

The client provides namespaced access to the endpoints the web client uses
through sub-client properties (client.guilds, client.channels, client.users).

Example:
    Asynchronous usage::

        from client import AsyncDiscordClient

        async with AsyncDiscordClient(token) as client:
            guild = await client.guilds.get_guild(guild_id)
            channels = await client.guilds.list_channels(guild_id)
            await client.channels.post_message(channels[0].id, "Hello")
"""

from typing import Any

from client._channels import AsyncChannelsClient
from client._guilds import AsyncGuildsClient
from client._http import DEFAULT_BASE_URL, AsyncHTTPClient
from client._users import AsyncUsersClient


class AsyncDiscordClient:
    """Asynchronous client for the Discord REST API.

    Holds no session state of its own; every call is an independent request
    authenticated with the bot token given at construction.

    Attributes:
        base_url: The Discord API base URL.
        timeout: Request timeout in seconds, or None.

    Example:
        Manual lifecycle management::

            client = AsyncDiscordClient(token)
            try:
                me = await client.users.get_self()
            finally:
                await client.close()
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: Any = None,
    ) -> None:
        """Initialize the Discord client.

        Args:
            token: Bot token.
            base_url: The Discord API base URL (default: v10 on discord.com).
            timeout: Request timeout in seconds (default: no timeout).
            transport: Custom HTTP transport (e.g., MockTransport for testing).
        """
        self._base_url = base_url
        self._timeout = timeout

        self._http = AsyncHTTPClient(
            token=token,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

        self._guilds: AsyncGuildsClient | None = None
        self._channels: AsyncChannelsClient | None = None
        self._users: AsyncUsersClient | None = None

    async def __aenter__(self) -> "AsyncDiscordClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float | None:
        return self._timeout

    # Sub-client properties (lazy initialization)

    @property
    def guilds(self) -> AsyncGuildsClient:
        """Access guild endpoints (/guilds/*).

        Returns:
            AsyncGuildsClient instance.
        """
        if self._guilds is None:
            self._guilds = AsyncGuildsClient(self._http)
        return self._guilds

    @property
    def channels(self) -> AsyncChannelsClient:
        """Access channel and message endpoints (/channels/*).

        Returns:
            AsyncChannelsClient instance.
        """
        if self._channels is None:
            self._channels = AsyncChannelsClient(self._http)
        return self._channels

    @property
    def users(self) -> AsyncUsersClient:
        """Access user endpoints (/users/*).

        Returns:
            AsyncUsersClient instance.
        """
        if self._users is None:
            self._users = AsyncUsersClient(self._http)
        return self._users
