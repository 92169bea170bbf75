"""Top-level application controller.

The ClientController owns the session state, the REST client, the
synchronizer and the channel selector, and exposes one command handler per
user action. The presentation layer calls these handlers and shows whatever
they raise; the core reports everything else through the SessionView hooks.

Example:
    Wiring a view::

        controller = ClientController(ClientConfig(), view)
        await controller.start()
        await controller.connect(token, guild_id, remember=True)
        await controller.send_message("hello")
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from client.client import AsyncDiscordClient
from client.exceptions import DiscordClientError, ValidationError
from client.models import Channel, Message
from config import ClientConfig
from models.channel_selector import ChannelSelector
from models.credentials import Credentials
from models.session import SessionState
from models.settings import Settings, SettingsStore
from models.storage import CredentialStore, LocalStore
from models.synchronizer import MessageSynchronizer, SyncMode
from models.theme import build_palette

if TYPE_CHECKING:
    from ui.view import SessionView

logger = logging.getLogger(__name__)


def normalize_channel_name(name: str) -> str:
    """Lower-case a channel name and replace whitespace runs with dashes."""
    return re.sub(r"\s+", "-", name.strip().lower())


class ClientController:
    """Application controller for a single client session.

    Attributes:
        config: Runtime configuration.
        session: The session state shared with all components.
        editing_message_id: Message currently open in the edit dialog.
    """

    def __init__(
        self,
        config: ClientConfig,
        view: SessionView,
        store: LocalStore | None = None,
        transport: Any = None,
    ) -> None:
        """Initialize the controller without touching the network.

        Args:
            config: Runtime configuration.
            view: Presentation hooks.
            store: Local store; defaults to the SQLite file under data_dir.
            transport: Custom httpx transport passed to every REST client.
        """
        self.config = config
        self.session = SessionState()
        self.editing_message_id: str | None = None

        self._view = view
        self._transport = transport
        self._store = store if store is not None else LocalStore(config.store_path)
        self._credentials = CredentialStore(self._store, ttl_days=config.credential_ttl_days)
        self._settings = SettingsStore(self._store)

        self._client: AsyncDiscordClient | None = None
        self._synchronizer: MessageSynchronizer | None = None
        self._selector: ChannelSelector | None = None

    # Accessors

    @property
    def settings(self) -> Settings:
        return self._settings.settings

    @property
    def synchronizer(self) -> MessageSynchronizer | None:
        return self._synchronizer

    @property
    def selector(self) -> ChannelSelector | None:
        return self._selector

    @property
    def display_name(self) -> str:
        if self.settings.display_name:
            return self.settings.display_name
        if self.session.me is not None:
            return self.session.me.display_name
        return ""

    def _require_channel(self) -> str:
        if self._synchronizer is None or self.session.active_channel_id is None:
            raise ValidationError("No channel selected", field="channel_id")
        return self.session.active_channel_id

    # Lifecycle

    async def start(self) -> None:
        """Apply appearance settings, then restore a remembered session.

        The palette is applied before any request is made. If remembered
        credentials exist they are used to connect; a failure returns to the
        setup screen with the error but keeps the stored values.
        """
        self._view.apply_theme(build_palette(self.settings))

        credentials = self._credentials.load()
        if credentials is None:
            self._view.show_setup()
            return

        logger.info(f"Restoring saved session for guild {credentials.guild_id}")
        try:
            await self._connect(credentials)
        except DiscordClientError as e:
            logger.warning(f"Saved session could not be restored: {e}")
            self._view.show_setup(error=f"Failed to connect: {e}")

    async def connect(self, token: str, guild_id: str, remember: bool = False) -> None:
        """Validate credentials, connect, and optionally remember them.

        Nothing is committed or persisted unless every fetch succeeds.

        Args:
            token: Bot token from the setup form.
            guild_id: Guild id from the setup form.
            remember: Persist the credentials for credential_ttl_days.

        Raises:
            ValidationError: Before any request, for malformed input.
            DiscordClientError: If the guild, channels or self user cannot be
                fetched.
        """
        credentials = Credentials.parse(token, guild_id)
        await self._connect(credentials)
        if remember:
            self._credentials.save(credentials)

    async def _connect(self, credentials: Credentials) -> None:
        client = AsyncDiscordClient(
            credentials.token,
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
            transport=self._transport,
        )
        try:
            guild = await client.guilds.get_guild(credentials.guild_id)
            channels = await client.guilds.list_channels(credentials.guild_id)
            me = await client.users.get_self()
        except Exception:
            await client.close()
            raise

        await self._teardown()

        self.session.set_credentials(credentials)
        self.session.set_guild(guild)
        self.session.set_self(me)
        self.session.set_channels(channels)

        self._client = client
        self._synchronizer = MessageSynchronizer(
            self.session, client.channels, self._view, limit=self.config.message_limit
        )
        self._selector = ChannelSelector(
            self.session,
            self._synchronizer,
            self._view,
            poll_interval=self.config.poll_interval_seconds,
        )
        logger.info(f"Connected to guild {guild.name} ({guild.id}) with {len(channels)} text channels")

        self._view.on_guild_loaded(guild, me, self.display_name)
        self._view.on_channels_changed(self.session.channels, None)
        self._view.show_main()

        if channels:
            await self._selector.select(channels[0].id)

    async def _teardown(self) -> None:
        if self._selector is not None:
            self._selector.stop()
        if self._client is not None:
            await self._client.close()
        self._client = None
        self._synchronizer = None
        self._selector = None
        self.editing_message_id = None

    async def logout(self) -> None:
        """End the session and forget remembered credentials."""
        await self._teardown()
        self._credentials.clear()
        self.session.clear()
        logger.info("Logged out")
        self._view.on_logged_out()
        self._view.show_setup()

    async def close(self) -> None:
        """Release resources on application exit; remembered credentials stay."""
        await self._teardown()
        self._store.close()

    # Channel commands

    async def select_channel(self, channel_id: str) -> None:
        if self._selector is None:
            raise ValidationError("Not connected")
        self.editing_message_id = None
        await self._selector.select(channel_id)

    async def refresh(self) -> bool:
        channel_id = self._require_channel()
        return await self._synchronizer.sync(channel_id, SyncMode.FULL)

    async def edit_channel(self, name: str, topic: str = "") -> Channel:
        """Rename the active channel and set or clear its topic.

        The channel list is re-fetched afterwards; polling keeps running.

        Args:
            name: New name; normalised to lower-case-with-dashes.
            topic: New topic; empty clears it.

        Returns:
            The channel as returned by Discord.

        Raises:
            ValidationError: If the name is empty.
            DiscordClientError: If the edit or the re-fetch fails; the
                previous channel list stays in place.
        """
        channel_id = self._require_channel()
        if not name.strip():
            raise ValidationError("Channel name cannot be empty", field="name")

        topic = topic.strip()
        updated = await self._client.channels.patch_channel(
            channel_id,
            name=normalize_channel_name(name),
            topic=topic or None,
            clear_topic=not topic,
        )
        logger.info(f"Edited channel {channel_id}: name={updated.name!r}")

        channels = await self._client.guilds.list_channels(self.session.guild.id)
        self.session.set_channels(channels)
        self._view.on_channels_changed(channels, self.session.active_channel_id)

        active = self.session.find_channel(channel_id)
        if active is not None:
            self._view.on_channel_selected(active)
        return updated

    # Message commands

    async def send_message(self, content: str) -> Message | None:
        """Send the draft to the active channel.

        Returns:
            The created message, or None if the trimmed draft was empty or no
            channel is selected (no request is made).
        """
        if not content.strip() or self.session.active_channel_id is None:
            return None
        channel_id = self._require_channel()
        return await self._synchronizer.send_message(channel_id, content)

    def begin_edit(self, message_id: str) -> str | None:
        """Open a buffered message for editing.

        Returns:
            The message's current content, or None if it is not buffered.
        """
        message = self.session.find_message(message_id)
        if message is None:
            return None
        self.editing_message_id = message_id
        return message.content

    def cancel_edit(self) -> None:
        self.editing_message_id = None

    async def save_edit(self, content: str) -> Message | None:
        """Submit the edit opened with begin_edit.

        Returns:
            The updated message, or None when nothing is under edit or the
            trimmed content is empty.
        """
        if self.editing_message_id is None or not content.strip():
            return None
        channel_id = self._require_channel()
        message = await self._synchronizer.edit_message(
            channel_id, self.editing_message_id, content
        )
        self.editing_message_id = None
        return message

    async def delete_message(self, message_id: str) -> None:
        """Delete a message; the caller confirms with the operator first."""
        channel_id = self._require_channel()
        await self._synchronizer.delete_message(channel_id, message_id)

    # Settings commands

    def update_settings(self, **changes: Any) -> Settings:
        """Persist preference changes and re-apply the palette.

        Raises:
            pydantic.ValidationError: If a value is invalid.
        """
        settings = self._settings.update(**changes)
        self._view.apply_theme(build_palette(settings))
        if self.session.guild is not None:
            self._view.on_guild_loaded(self.session.guild, self.session.me, self.display_name)
        return settings

    def reset_settings(self) -> Settings:
        settings = self._settings.reset()
        self._view.apply_theme(build_palette(settings))
        return settings
