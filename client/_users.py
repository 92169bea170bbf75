"""User sub-client for the Discord API.

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient
from client.models import User


class AsyncUsersClient(AsyncBaseClient):
    """Asynchronous client for user endpoints (/users/*)."""

    _BASE_PATH = "/users"

    async def get_self(self) -> User:
        """Fetch the user the bot token belongs to.

        Returns:
            The bot user.

        Raises:
            AuthError: If the token is invalid.
        """
        data = await self._get(f"{self._BASE_PATH}/@me")
        return User(**data)
