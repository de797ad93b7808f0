from __future__ import annotations
import asyncio

from errors import ProvisioningHalted
from status.codes import StatusCode
from status.controller import SignalContext
from logger import log


async def escalate(ctx: SignalContext, code: StatusCode) -> None:
    """
    Show `code` on the LED, then stop for good.

    Closing the channel makes the controller hard-exit the process once the
    code has been on display for `fatal_hold` seconds. Should the controller
    return instead, ProvisioningHalted keeps the rest of the workflow from
    running. Never returns.
    """
    log.error("Fatal: halting with status %s", code.name)
    await ctx.channel.post(code)
    await asyncio.sleep(ctx.timings.fatal_hold)
    ctx.channel.close()
    await ctx.stopped.wait()
    raise ProvisioningHalted(code)
