"""Last-write-wins debouncing on the asyncio event loop."""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import structlog

logger = structlog.get_logger(__name__)


class Debouncer:
    """
    Delays a callback until its input has been stable for a quiet period.

    Each ``trigger`` cancels the pending evaluation (if any) and schedules a
    new one, so only the most recent value after ``delay`` seconds without
    further triggers is ever passed to the callback.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[Any], Awaitable[None]]
    ) -> None:
        """
        Initialize the debouncer.

        Args:
            delay: Quiet period in seconds
            callback: Coroutine function invoked with the settled value
        """
        self.delay = delay
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        """True while an evaluation is scheduled and not yet finished."""
        return self._task is not None and not self._task.done()

    def trigger(self, value: Any) -> None:
        """Restart the quiet period with a new value. Must run inside the event loop."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(value))

    def cancel(self) -> None:
        """Drop any pending evaluation."""
        if self.pending:
            self._task.cancel()
        self._task = None

    async def flush(self) -> None:
        """Wait until no evaluation is pending."""
        while self.pending:
            await asyncio.wait({self._task})

    async def _run(self, value: Any) -> None:
        await asyncio.sleep(self.delay)
        # Nothing awaits this task, so a failure ends here
        try:
            await self.callback(value)
        except Exception as e:
            logger.error("debounced_callback_failed", value=value, error=str(e), exc_info=True)
