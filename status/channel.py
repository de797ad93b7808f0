from __future__ import annotations
import asyncio
from typing import Optional

from status.codes import StatusCode


class ChannelClosed(Exception):
    pass


class StatusChannel:
    """
    Bounded many-producer / single-consumer queue of StatusCodes.

    Closing is one-way. Codes already buffered are still delivered by poll()
    before it starts raising ChannelClosed.
    """

    def __init__(self, capacity: int = 3) -> None:
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=capacity)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def post(self, code: StatusCode) -> None:
        if self._closed:
            raise ChannelClosed(f"cannot post {code.name}: channel closed")
        await self._queue.put(code)

    def poll(self) -> Optional[StatusCode]:
        """Return the next code, or None if nothing is waiting. Never blocks."""
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            if self._closed:
                raise ChannelClosed("status channel closed")
            return None

    def close(self) -> None:
        self._closed = True
