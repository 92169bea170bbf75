"""Internal HTTP handling utilities for the Discord client.

This module provides the low-level HTTP communication layer used by all
sub-clients. It handles:
- Making authenticated async HTTP requests
- Response parsing and error classification
- Mapping transport failures to NetworkUnreachableError

Requests are never retried; every failure is terminal for that attempt.

This is an internal module and should not be imported directly by users.
"""

from typing import Any, Literal

import httpx

from client.exceptions import (
    AuthError,
    NetworkUnreachableError,
    NotFoundError,
    PermissionError,
    RateLimitedError,
    ServerError,
    UpstreamError,
)


# HTTP methods used against the Discord API
HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

DEFAULT_BASE_URL = "https://discord.com/api/v10"
USER_AGENT = "DiscordBot (https://github.com/discord-web-client, 0.1.0)"


def _flatten_form_errors(errors: Any, path: str = "") -> list[str]:
    """Flatten Discord's nested ``errors`` object into readable lines.

    Discord reports form validation failures as a tree keyed by field name,
    with leaves under ``_errors``::

        {"content": {"_errors": [{"code": "...", "message": "Too long."}]}}

    Args:
        errors: The ``errors`` value from an error body.
        path: Dotted field path accumulated so far.

    Returns:
        A list of ``"field: message"`` strings.
    """
    if not isinstance(errors, dict):
        return []

    lines: list[str] = []
    for key, value in errors.items():
        if key == "_errors" and isinstance(value, list):
            for err in value:
                if isinstance(err, dict):
                    msg = err.get("message", "invalid")
                    lines.append(f"{path}: {msg}" if path else msg)
        else:
            child = f"{path}.{key}" if path else str(key)
            lines.extend(_flatten_form_errors(value, child))
    return lines


def _parse_error_response(response: httpx.Response) -> tuple[str, int | None, float | None]:
    """Parse an error response to extract message, Discord code and retry hint.

    Attempts to parse the response body as JSON in Discord's error shape.
    Falls back to the raw response text if parsing fails.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, code, retry_after).
    """
    try:
        body = response.json()
    except Exception:
        text = response.text.strip()
        if text:
            return text, None, None
        return f"HTTP {response.status_code} error", None, None

    if not isinstance(body, dict):
        return str(body), None, None

    message = body.get("message") or f"HTTP {response.status_code} error"
    code = body.get("code")
    if not isinstance(code, int):
        code = None

    field_errors = _flatten_form_errors(body.get("errors"))
    if field_errors:
        message = f"{message} ({'; '.join(field_errors)})"

    retry_after = body.get("retry_after")
    if retry_after is not None:
        try:
            retry_after = float(retry_after)
        except (TypeError, ValueError):
            retry_after = None

    return message, code, retry_after


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception for error status codes.

    Args:
        response: The HTTP response to check.

    Raises:
        AuthError: For HTTP 401 responses.
        PermissionError: For HTTP 403 responses.
        NotFoundError: For HTTP 404 responses.
        RateLimitedError: For HTTP 429 responses.
        ServerError: For HTTP 5xx responses.
        UpstreamError: For any other non-2xx response.
    """
    if response.is_success:
        return

    message, code, retry_after = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except Exception:
        response_body = response.text

    if status_code == 401:
        raise AuthError(message, code=code, response_body=response_body)
    elif status_code == 403:
        raise PermissionError(message, code=code, response_body=response_body)
    elif status_code == 404:
        raise NotFoundError(message, code=code, response_body=response_body)
    elif status_code == 429:
        if retry_after is None:
            header = response.headers.get("Retry-After")
            try:
                retry_after = float(header) if header else None
            except ValueError:
                retry_after = None
        raise RateLimitedError(
            message, retry_after=retry_after, code=code, response_body=response_body
        )
    elif status_code >= 500:
        raise ServerError(
            message, status_code=status_code, code=code, response_body=response_body
        )
    else:
        raise UpstreamError(
            message, status_code=status_code, code=code, response_body=response_body
        )


class AsyncHTTPClient:
    """Asynchronous HTTP client for the Discord REST API.

    Wraps httpx.AsyncClient with bot authentication and error classification.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds, or None for no timeout.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async HTTP client.

        Args:
            token: The bot token; sent as ``Authorization: Bot <token>``.
            base_url: The base URL for all API requests.
            timeout: Request timeout in seconds (None disables it).
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bot {token}",
                "User-Agent": USER_AGENT,
            },
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager and close client."""
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The URL path (will be appended to base_url).
            params: Query parameters to include in the URL.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses
            (e.g. HTTP 204 from DELETE).

        Raises:
            NetworkUnreachableError: If no response was received.
            APIError: If Discord returns an error response.
        """
        url = f"{self.base_url}{path}"

        # Filter out None values from params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self._client.request(
                method=method,
                url=path,
                params=params,
                json=json,
            )
        except httpx.TimeoutException as e:
            raise NetworkUnreachableError(
                message=f"Request to {url} timed out",
                url=url,
                cause=e,
            ) from e
        except httpx.TransportError as e:
            raise NetworkUnreachableError(
                message=f"Failed to reach {url}",
                url=url,
                cause=e,
            ) from e

        _raise_for_status(response)

        # Return parsed JSON or None for empty responses
        if response.content:
            return response.json()
        return None

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an async GET request.

        Args:
            path: The URL path.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async POST request.

        Args:
            path: The URL path.
            json: JSON body to send.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return await self.request("POST", path, params=params, json=json)

    async def patch(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async PATCH request.

        Args:
            path: The URL path.
            json: JSON body to send.
            params: Query parameters.

        Returns:
            The parsed JSON response.
        """
        return await self.request("PATCH", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an async DELETE request.

        Args:
            path: The URL path.
            params: Query parameters.

        Returns:
            The parsed JSON response, usually None.
        """
        return await self.request("DELETE", path, params=params)
