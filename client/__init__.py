"""Discord REST API client library.

This module provides a typed async client for the subset of the Discord REST
API used by the web client: guild and channel listing, message
list/create/edit/delete, channel edits and the bot's own user.

Example:
    Asynchronous usage::

        from client import AsyncDiscordClient

        async with AsyncDiscordClient(token) as client:
            messages = await client.channels.list_messages(channel_id)

Exports:
    AsyncDiscordClient: Asynchronous client for the Discord REST API.

    Exceptions:
        DiscordClientError: Base exception for all client errors.
        ValidationError: Input rejected locally before any request.
        NetworkUnreachableError: The request got no HTTP response.
        APIError: Discord returned an error response.
        AuthError: Invalid token (HTTP 401).
        PermissionError: Missing access (HTTP 403).
        NotFoundError: Resource not found (HTTP 404).
        RateLimitedError: Rate limited (HTTP 429).
        ServerError: Discord-side error (HTTP 5xx).
        UpstreamError: Any other error status.
"""

from client._channels import AsyncChannelsClient
from client._guilds import AsyncGuildsClient
from client._users import AsyncUsersClient
from client.exceptions import (
    APIError,
    AuthError,
    DiscordClientError,
    NetworkUnreachableError,
    NotFoundError,
    PermissionError,
    RateLimitedError,
    ServerError,
    UpstreamError,
    ValidationError,
)
from client.models import GUILD_TEXT, Channel, Guild, Message, User, snowflake_key
from client.client import AsyncDiscordClient

__all__ = [
    # Main client
    "AsyncDiscordClient",
    # Sub-clients
    "AsyncGuildsClient",
    "AsyncChannelsClient",
    "AsyncUsersClient",
    # Exceptions
    "DiscordClientError",
    "ValidationError",
    "NetworkUnreachableError",
    "APIError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "RateLimitedError",
    "ServerError",
    "UpstreamError",
    # Response models
    "GUILD_TEXT",
    "Guild",
    "Channel",
    "Message",
    "User",
    "snowflake_key",
]
