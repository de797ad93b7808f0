from __future__ import annotations
import asyncio

from config import AgentPaths, Timings, DEFAULT_PATHS, DEFAULT_TIMINGS
from network.hardening import disable_ipv6
from network.runner import CommandRunner
from status.channel import StatusChannel
from status.controller import SignalContext, SignalController
from status.indicator import SysfsLed
from workflow import Provisioner
from logger import log


class ProvisioningAgent:
    """rpac first-boot network provisioning agent."""

    def __init__(
        self,
        paths: AgentPaths = DEFAULT_PATHS,
        timings: Timings = DEFAULT_TIMINGS,
    ) -> None:
        self.paths = paths
        self.timings = timings
        self.ctx = SignalContext(
            channel=StatusChannel(timings.channel_capacity),
            indicator=SysfsLed(paths.led_dir),
            timings=timings,
        )
        self.runner = CommandRunner()
        log.info("ProvisioningAgent started")

    async def run(self) -> None:
        self.ctx.indicator.setup()
        controller = asyncio.create_task(SignalController(self.ctx).run())

        disable_ipv6(self.paths.ipv6_conf_dir)

        provisioner = Provisioner(
            self.ctx, self.runner, paths=self.paths, timings=self.timings
        )
        status = await provisioner.run()

        # Keep showing the outcome until someone pulls the power
        log.info("Idling with status %s", status.name)
        await controller
