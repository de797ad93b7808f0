from __future__ import annotations
import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Callable

from config import Timings, DEFAULT_TIMINGS
from status.channel import StatusChannel, ChannelClosed
from logger import log


def hard_exit(code: int) -> None:
    logging.shutdown()
    os._exit(code)


@dataclass
class SignalContext:
    """Everything the workflow and the blink loop share."""
    channel: StatusChannel
    indicator: object
    timings: Timings = DEFAULT_TIMINGS
    exit: Callable[[int], None] = hard_exit
    stopped: asyncio.Event = field(default_factory=asyncio.Event)


class SignalController:
    """Renders the most recent StatusCode as a repeating blink pattern."""

    def __init__(self, ctx: SignalContext) -> None:
        self.ctx = ctx
        self.pattern = 0

    async def render(self, count: int) -> None:
        t = self.ctx.timings
        led = self.ctx.indicator
        for _ in range(count):
            led.on()
            await asyncio.sleep(t.blink_on)
            led.off()
            await asyncio.sleep(t.blink_off)

    async def run(self) -> None:
        try:
            while True:
                try:
                    code = self.ctx.channel.poll()
                except ChannelClosed:
                    log.info("Status channel closed, exiting")
                    self.ctx.exit(1)
                    return
                if code is not None:
                    log.debug("Status now %s", code.name)
                    self.pattern = code.blink_count
                await self.render(self.pattern)
                await asyncio.sleep(self.ctx.timings.blink_idle)
        finally:
            self.ctx.stopped.set()
