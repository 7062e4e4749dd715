"""
Game Room Interface

The room is everything a chain game needs from the chat it runs in: a way to
announce text and a way to run a callback later. Games own no other
process-wide resources.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from ..utils.logging_config import get_logger

logger = get_logger(__name__)

TimerCallback = Callable[[], Awaitable[None]]


class TimerHandle(ABC):
    """A pending callback that can be cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        pass


class GameRoom(ABC):
    """Messaging and timer primitives supplied by the host."""

    @abstractmethod
    async def say(self, text: str) -> None:
        """Announce text to the room."""
        pass

    @abstractmethod
    def schedule(self, delay: float, callback: TimerCallback) -> TimerHandle:
        """Run ``callback`` after ``delay`` seconds."""
        pass


class AsyncioTimer(TimerHandle):
    """Timer backed by an asyncio task sleeping for the delay."""

    def __init__(self, delay: float, callback: TimerCallback, name: Optional[str] = None):
        self.delay = delay
        self.callback = callback
        self.task = asyncio.create_task(self._run(), name=name)

    async def _run(self) -> None:
        await asyncio.sleep(self.delay)
        try:
            await self.callback()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Timer callback failed: {e}", exc_info=True)

    def cancel(self) -> None:
        if not self.task.done():
            self.task.cancel()

    @property
    def cancelled(self) -> bool:
        return self.task.cancelled()
