"""
Trailing-edge debounce for async callbacks.

Each trigger replaces the pending call: the callback runs once, with the
arguments of the last trigger, after ``delay`` seconds without a new trigger.
Only the waiting period can be cancelled; a callback that has started runs to
completion.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Delays an async callback until triggers stop arriving."""

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]):
        """Initialize the debouncer.

        Args:
            delay: Quiet period in seconds before the callback fires
            callback: Coroutine function invoked with the last trigger's arguments
        """
        self._delay = delay
        self._callback = callback
        self._timer: asyncio.Task | None = None
        self._pending_args: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._inflight: set[asyncio.Task] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a call is waiting for the quiet period to end."""
        return self._timer is not None and not self._timer.done()

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        """Schedule the callback, replacing any call still waiting.

        Must be called from a running event loop.
        """
        self.cancel()
        self._pending_args = (args, kwargs)
        self._timer = asyncio.get_running_loop().create_task(self._wait_then_fire(args, kwargs))

    def cancel(self) -> bool:
        """Drop the waiting call, if any. Returns True if one was dropped."""
        self._pending_args = None
        if self._timer is None or self._timer.done():
            self._timer = None
            return False
        self._timer.cancel()
        self._timer = None
        return True

    async def flush(self) -> None:
        """Run the waiting call now instead of after the delay."""
        if not self.pending or self._pending_args is None:
            return
        args, kwargs = self._pending_args
        self.cancel()
        await self._invoke(args, kwargs)

    async def drain(self) -> None:
        """Wait for the waiting call and every running callback to finish."""
        while self.pending or self._inflight:
            tasks = list(self._inflight)
            if self._timer is not None:
                tasks.append(self._timer)
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _wait_then_fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        await asyncio.sleep(self._delay)

        # Past this point the call is no longer cancellable
        task = asyncio.current_task()
        if self._timer is task:
            self._timer = None
            self._pending_args = None
        self._inflight.add(task)
        try:
            await self._invoke(args, kwargs)
        finally:
            self._inflight.discard(task)

    async def _invoke(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        try:
            await self._callback(*args, **kwargs)
        except Exception:
            logger.exception("Debounced callback failed")
