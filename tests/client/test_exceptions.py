"""Unit tests for the client exception hierarchy.

The exception hierarchy being tested:
    DiscordClientError (base)
    ├── ValidationError - local input rejection
    ├── NetworkUnreachableError - no HTTP response
    └── APIError - Discord returned an error response
        ├── AuthError (401)
        ├── PermissionError (403)
        ├── NotFoundError (404)
        ├── RateLimitedError (429)
        ├── ServerError (5xx)
        └── UpstreamError (other)
"""

import builtins

import pytest

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


# =============================================================================
# DiscordClientError Tests (Base Exception)
# =============================================================================

class TestDiscordClientError:
    """Tests for the base DiscordClientError exception class."""

    def test_instantiation_with_message(self) -> None:
        error = DiscordClientError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(DiscordClientError) as exc_info:
            raise DiscordClientError("Raised error")
        assert exc_info.value.message == "Raised error"


# =============================================================================
# Local and transport errors
# =============================================================================

class TestValidationError:
    def test_field_is_optional(self) -> None:
        assert ValidationError("bad").field is None

    def test_field_is_stored(self) -> None:
        error = ValidationError("Server ID must be a 17-19 digit number", field="guild_id")
        assert error.field == "guild_id"
        assert isinstance(error, DiscordClientError)
        assert not isinstance(error, APIError)


class TestNetworkUnreachableError:
    def test_default_hint_is_appended(self) -> None:
        error = NetworkUnreachableError("Failed to reach https://discord.com/api/v10/users/@me")
        assert error.hint == NetworkUnreachableError.DEFAULT_HINT
        assert str(error).endswith(NetworkUnreachableError.DEFAULT_HINT)

    def test_custom_hint_and_cause(self) -> None:
        cause = OSError("Network unreachable")
        error = NetworkUnreachableError("Failed", url="https://x", cause=cause, hint="Try a VPN.")
        assert error.cause is cause
        assert error.url == "https://x"
        assert str(error) == "Failed. Try a VPN."


# =============================================================================
# APIError family
# =============================================================================

class TestAPIErrors:
    def test_str_includes_status_and_code(self) -> None:
        error = APIError("Unknown Channel", status_code=404, code=10003)
        assert str(error) == "[HTTP 404] [10003] Unknown Channel"

    def test_str_without_code(self) -> None:
        assert str(APIError("Oops", status_code=400)) == "[HTTP 400] Oops"

    @pytest.mark.parametrize(
        "exc_type, status_code",
        [
            (AuthError, 401),
            (PermissionError, 403),
            (NotFoundError, 404),
            (RateLimitedError, 429),
            (ServerError, 500),
        ],
    )
    def test_fixed_status_codes(self, exc_type: type, status_code: int) -> None:
        error = exc_type("msg")
        assert error.status_code == status_code
        assert isinstance(error, APIError)
        assert isinstance(error, DiscordClientError)

    def test_server_error_keeps_specific_status(self) -> None:
        assert ServerError("bad gateway", status_code=502).status_code == 502

    def test_rate_limited_retry_after(self) -> None:
        assert RateLimitedError("slow", retry_after=1.5).retry_after == 1.5

    def test_upstream_error_takes_any_status(self) -> None:
        error = UpstreamError("Invalid Form Body", status_code=400, code=50035)
        assert error.status_code == 400
        assert error.code == 50035

    def test_permission_error_is_not_builtin(self) -> None:
        """The 403 error is caught by client handlers, not OS permission handlers."""
        assert not issubclass(PermissionError, builtins.PermissionError)
