"""Request queue bounding concurrent platform requests."""

from contextlib import asynccontextmanager
from typing import AsyncIterator
import asyncio
import logging

logger = logging.getLogger(__name__)


class RequestQueue:
    """Admit at most ``concurrency`` requests at once.

    Excess requests wait in arrival order until a running one finishes.
    """

    def __init__(self, concurrency: int) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")
        self.concurrency = concurrency
        self._semaphore = asyncio.Semaphore(concurrency)
        self._in_flight = 0
        self._waiting = 0

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Hold one admission slot for the duration of the block."""
        if self._semaphore.locked():
            logger.debug(f"Request queue full ({self.concurrency} in flight), waiting for a slot")
        self._waiting += 1
        try:
            await self._semaphore.acquire()
        finally:
            self._waiting -= 1

        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1
            self._semaphore.release()

    @property
    def in_flight(self) -> int:
        """Number of requests currently admitted."""
        return self._in_flight

    @property
    def waiting(self) -> int:
        """Number of requests queued behind the limit."""
        return self._waiting
