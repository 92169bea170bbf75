"""Guild sub-client for the Discord API.

This module provides AsyncGuildsClient for the guild endpoints
(/guilds/{id} and /guilds/{id}/channels).

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient
from client.models import Channel, Guild


class AsyncGuildsClient(AsyncBaseClient):
    """Asynchronous client for guild endpoints (/guilds/*).

    Example:
        async with AsyncDiscordClient(token) as client:
            guild = await client.guilds.get_guild("123456789012345678")
            channels = await client.guilds.list_channels(guild.id)
            print(f"{guild.name}: {[c.name for c in channels]}")
    """

    _BASE_PATH = "/guilds"

    async def get_guild(self, guild_id: str) -> Guild:
        """Fetch a guild snapshot.

        Args:
            guild_id: Guild snowflake.

        Returns:
            The guild.

        Raises:
            NotFoundError: If the guild does not exist or the bot is not in it.
            APIError: If the request fails for another reason.
        """
        data = await self._get(f"{self._BASE_PATH}/{guild_id}")
        return Guild(**data)

    async def list_channels(self, guild_id: str) -> list[Channel]:
        """List the guild's text channels.

        Voice channels, categories, threads and every other non-text type are
        dropped, and the remainder is ordered by ascending ``position``.

        Args:
            guild_id: Guild snowflake.

        Returns:
            Text channels in display order.

        Raises:
            APIError: If the request fails.
        """
        data = await self._get(f"{self._BASE_PATH}/{guild_id}/channels")
        channels = [Channel(**item) for item in data]
        text_channels = [channel for channel in channels if channel.is_text]
        return sorted(text_channels, key=lambda channel: channel.position)
