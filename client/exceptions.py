"""Exception hierarchy for the Discord web client.

This module defines all exceptions that can be raised by the REST gateway and
by the local input checks performed before any request is made. The hierarchy
is designed to allow catching specific error types or broader categories as
needed.

Exception Hierarchy:
    DiscordClientError (base)
    ├── ValidationError - Locally rejected input (no request was made)
    ├── NetworkUnreachableError - Transport, DNS, TLS or timeout failures
    └── APIError - Discord returned a non-2xx response
        ├── AuthError (HTTP 401)
        ├── PermissionError (HTTP 403)
        ├── NotFoundError (HTTP 404)
        ├── RateLimitedError (HTTP 429)
        ├── ServerError (HTTP 5xx)
        └── UpstreamError (any other status)

Example:
    Catching specific errors::

        try:
            await client.guilds.get_guild(guild_id)
        except AuthError:
            print("The bot token was rejected")
        except NotFoundError as e:
            print(f"Unknown guild: {e.message}")

    Catching all client errors::

        try:
            await client.channels.post_message(channel_id, "hello")
        except DiscordClientError as e:
            print(f"Client error: {e}")
"""

from typing import Any


class DiscordClientError(Exception):
    """Base exception for all Discord web client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


class ValidationError(DiscordClientError):
    """Input was rejected locally before any network call.

    Raised for malformed credentials (token too short, guild id not a
    snowflake), empty required fields, or an empty channel name.

    Attributes:
        message: Human-readable error description.
        field: Name of the offending input field, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            field: Name of the offending input field.
        """
        self.field = field
        super().__init__(message)


class NetworkUnreachableError(DiscordClientError):
    """The request never produced an HTTP response.

    Covers connection refusal, DNS and TLS failures, and timeouts when one is
    configured.

    Attributes:
        message: Human-readable error description.
        url: The URL that could not be reached.
        cause: The underlying transport exception.
        hint: Remediation hint suitable for showing to the operator.
    """

    DEFAULT_HINT = (
        "Check your network connection and that discord.com is reachable "
        "from this machine."
    )

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            url: The URL that failed to connect.
            cause: The underlying exception that caused the failure.
            hint: Remediation hint (defaults to DEFAULT_HINT).
        """
        self.url = url
        self.cause = cause
        self.hint = hint or self.DEFAULT_HINT
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including the hint."""
        return f"{self.message}. {self.hint}"


class APIError(DiscordClientError):
    """Discord returned an error response.

    Base class for all HTTP-level errors.

    Attributes:
        message: Upstream error message, or a generic one.
        status_code: HTTP status code from Discord.
        code: Discord JSON error code from the body (if available).
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from Discord.
            code: Discord JSON error code.
            response_body: Raw response body for debugging.
        """
        self.status_code = status_code
        self.code = code
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including status code."""
        if self.code is not None:
            return f"[HTTP {self.status_code}] [{self.code}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class AuthError(APIError):
    """The bot token is invalid or expired (HTTP 401)."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code=401, code=code, response_body=response_body)


class PermissionError(APIError):
    """The bot lacks access to the resource (HTTP 403).

    Typical causes are a missing channel permission or trying to edit
    another user's message.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code=403, code=code, response_body=response_body)


class NotFoundError(APIError):
    """Resource not found (HTTP 404).

    Usually a wrong guild id, a deleted channel or a deleted message.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message, status_code=404, code=code, response_body=response_body)


class RateLimitedError(APIError):
    """Discord rate limited the request (HTTP 429).

    The client never retries; ``retry_after`` is carried for display only.

    Attributes:
        retry_after: Seconds Discord asked to wait, if reported.
    """

    def __init__(
        self,
        message: str,
        retry_after: float | None = None,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, status_code=429, code=code, response_body=response_body)


class ServerError(APIError):
    """Discord-side failure (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: int | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message, status_code=status_code, code=code, response_body=response_body
        )


class UpstreamError(APIError):
    """Any other non-2xx response, e.g. 400 for an over-long message."""
