"""Cancellable recurring task used for background message polling."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class PollingHandle:
    """One recurring background task scoped to a single channel.

    Runs ``callback`` every ``interval`` seconds on the running event loop
    until cancelled. The first tick happens one interval after start().

    Responsibilities:
    - Task management (create, start, cancel)
    - Timing control (sleep between ticks)
    - Error isolation (log tick errors without ending the loop)

    Does NOT decide what a tick does; that is the callback's business.

    Attributes:
        channel_id: Channel this handle polls.
        interval: Seconds between ticks.
        is_running: Whether the loop task is alive.
    """

    def __init__(
        self,
        channel_id: str,
        callback: Callable[[], Awaitable[object]],
        interval: float = 3.0,
    ) -> None:
        """Initialize the handle without starting it.

        Args:
            channel_id: Channel this handle polls.
            callback: Coroutine function run on each tick.
            interval: Seconds between ticks.

        Raises:
            ValueError: If interval is not positive.
        """
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.channel_id = channel_id
        self.interval = interval
        self._callback = callback
        self._task: Optional[asyncio.Task] = None
        self.ticks = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the polling loop on the running event loop.

        Raises:
            RuntimeError: If the handle is already running.
        """
        if self.is_running:
            raise RuntimeError("Polling handle is already running")

        self._task = asyncio.get_running_loop().create_task(
            self._run_loop(), name=f"poll-{self.channel_id}"
        )
        logger.info(f"Polling started for channel {self.channel_id} every {self.interval}s")

    def cancel(self) -> None:
        """Stop the loop.

        Takes effect synchronously: once this returns, the callback will not
        be invoked again, and a tick in progress is interrupted at its next
        suspension point.
        """
        if self._task is None:
            return

        if not self._task.done():
            self._task.cancel()
            logger.info(f"Polling stopped for channel {self.channel_id}")
        self._task = None

    async def _run_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.ticks += 1
            try:
                await self._callback()
            except Exception as e:
                # Log but keep polling
                logger.error(
                    f"Error during poll tick for channel {self.channel_id}: {e}",
                    exc_info=True,
                )
