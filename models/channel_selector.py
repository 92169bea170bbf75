"""Channel selection and the lifecycle of the polling loop.

States:
    IDLE: no channel selected, no polling.
    ACTIVE: one channel selected, exactly one PollingHandle alive.

Transitions:
    IDLE -> ACTIVE(c)      select(c)
    ACTIVE(c) -> ACTIVE(c') select(c'); the old handle is cancelled first
    ACTIVE(c) -> IDLE      stop() (logout)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from client.exceptions import ValidationError
from models.polling import PollingHandle
from models.session import SessionState
from models.synchronizer import MessageSynchronizer, SyncMode

if TYPE_CHECKING:
    from ui.view import SessionView

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 3.0


class SelectorState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class ChannelSelector:
    """Switches the active channel and owns the single polling handle.

    The handle is always cancelled synchronously, before the active channel
    changes and before any new fetch starts. Combined with the synchronizer's
    channel check, no response for a previous channel can reach the view.

    Attributes:
        poll_interval: Seconds between background syncs.
    """

    def __init__(
        self,
        session: SessionState,
        synchronizer: MessageSynchronizer,
        view: SessionView,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        """Initialize an idle selector.

        Args:
            session: Session state holding the channel list.
            synchronizer: Synchronizer used for the initial and polled loads.
            view: Presentation hooks.
            poll_interval: Seconds between background syncs.
        """
        self.session = session
        self.poll_interval = poll_interval
        self._synchronizer = synchronizer
        self._view = view
        self._handle: PollingHandle | None = None

    @property
    def state(self) -> SelectorState:
        if self.session.active_channel_id is None:
            return SelectorState.IDLE
        return SelectorState.ACTIVE

    @property
    def handle(self) -> PollingHandle | None:
        """The live polling handle, if any."""
        return self._handle

    def _cancel_polling(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def select(self, channel_id: str) -> bool:
        """Make a channel active and start polling it.

        The new handle is started before the initial FULL sync is awaited, so
        an active channel always has a live handle. Its first tick comes one
        interval later.

        Args:
            channel_id: A channel from the session's channel list.

        Returns:
            True if the initial load rendered messages.

        Raises:
            ValidationError: If the channel is not in the channel list.
        """
        channel = self.session.find_channel(channel_id)
        if channel is None:
            raise ValidationError(f"Unknown channel: {channel_id}", field="channel_id")

        self._cancel_polling()
        self.session.set_active_channel(channel_id)
        self._synchronizer.reset()
        logger.info(f"Selected channel #{channel.name} ({channel_id})")
        self._view.on_channel_selected(channel)

        synchronizer = self._synchronizer

        async def poll() -> None:
            await synchronizer.sync(channel_id, SyncMode.SILENT)

        self._handle = PollingHandle(channel_id, poll, interval=self.poll_interval)
        self._handle.start()

        return await synchronizer.sync(channel_id, SyncMode.FULL)

    def stop(self) -> None:
        """Cancel polling and return to IDLE."""
        self._cancel_polling()
        if self.session.active_channel_id is not None:
            logger.info(f"Deselected channel {self.session.active_channel_id}")
        self.session.set_active_channel(None)
        self._synchronizer.reset()
