from __future__ import annotations
import asyncio
from typing import Sequence

from config import AgentPaths, Timings, DEFAULT_PATHS, DEFAULT_TIMINGS
from network.checks import probe_connectivity
from settings import ProvisioningSettings
from status.channel import StatusChannel
from status.codes import StatusCode
from logger import log

IFDOWN = "/sbin/ifdown"
IFUP = "/sbin/ifup"
IP = "/sbin/ip"
IFCONFIG = "/sbin/ifconfig"
CP = "/bin/cp"
SERVICE = "/usr/sbin/service"
SUPERVISORCTL = "/usr/bin/supervisorctl"


def takes_interface_down(mode: str) -> bool:
    """
    Whether the interface is torn down before reconfiguring.

    Every mode except "leave" qualifies. A "leave" interface is never brought
    back up, so taking it down would strand it.
    """
    return mode != "leave"


def brings_interface_up(mode: str) -> bool:
    return mode in ("dhcp", "static")


class ActionSequencer:
    """
    Applies an installed interfaces file.

    No action failure stops the sequence; it is written to the report and
    the next action runs. Only the connectivity probe changes the result.
    """

    def __init__(
        self,
        settings: ProvisioningSettings,
        runner,
        report,
        channel: StatusChannel,
        paths: AgentPaths = DEFAULT_PATHS,
        timings: Timings = DEFAULT_TIMINGS,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self.report = report
        self.channel = channel
        self.paths = paths
        self.timings = timings

    async def observe(self, tag: str, argv: Sequence[str]):
        record = await self.runner.run(tag, argv)
        self.report.record(record)
        return record

    async def _take_down(self, iface: str) -> None:
        await self.observe(f"ifdown {iface}", [IFDOWN, iface])
        await self.observe(f"linkdown {iface}", [IP, "link", "set", iface, "down"])

    async def run(self) -> StatusCode:
        s = self.settings
        await self.channel.post(StatusCode.BUSY)

        if takes_interface_down(s.wifi_mode):
            await self._take_down("wlan0")
        if takes_interface_down(s.eth_mode):
            await self._take_down("eth0")

        if brings_interface_up(s.wifi_mode):
            await self.observe("ifup wlan0", [IFUP, "wlan0"])
        if brings_interface_up(s.eth_mode):
            await self.observe("ifup eth0", [IFUP, "eth0"])

        log.info("Waiting %.1fs for links to settle", self.timings.settle)
        await asyncio.sleep(self.timings.settle)

        await self.observe("ifconfig", [IFCONFIG, "-a"])
        await self.observe("iplink", [IP, "link", "show"])
        await self.observe("iproute", [IP, "route"])

        check = await probe_connectivity(self.runner)
        self.report.record(check.record)
        status = StatusCode.SUCCESS if check.passed else StatusCode.NO_INTERNET
        log.info("%s", check)
        await self.channel.post(status)

        await self.copy_overlay()

        await self.observe("svcreload", [SERVICE, "supervisor", "restart"])
        await self.observe("svcstatus", [SUPERVISORCTL, "status"])
        return status

    async def copy_overlay(self) -> None:
        overlay = self.paths.overlay_dir
        if not overlay.is_dir():
            log.info("No overlay at %s", overlay)
            self.report.write(f"cpfiles skipped: no {overlay}\n")
            return
        # -T: merge the overlay's contents into root, not root/files
        await self.observe(
            "cpfiles", [CP, "-rT", f"{overlay}/", str(self.paths.root)]
        )
