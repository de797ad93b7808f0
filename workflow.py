from __future__ import annotations
from typing import Optional

from config import AgentPaths, Timings, DEFAULT_PATHS, DEFAULT_TIMINGS
from errors import ProvisioningError
from medium import RemovableMedium
from network.interfaces import InterfacesFile
from network.rewriter import rewrite
from network.sequencer import ActionSequencer
from report import ReportLog
from settings import ProvisioningSettings, load_settings
from status.codes import StatusCode
from status.controller import SignalContext
from status.fatal import escalate
from validators import settings_warnings
from logger import log


class Provisioner:
    """One provisioning pass: medium -> config -> interfaces -> actions."""

    def __init__(
        self,
        ctx: SignalContext,
        runner,
        medium: RemovableMedium = None,
        paths: AgentPaths = DEFAULT_PATHS,
        timings: Timings = DEFAULT_TIMINGS,
    ) -> None:
        self.ctx = ctx
        self.runner = runner
        self.paths = paths
        self.timings = timings
        self.medium = medium or RemovableMedium(runner, paths)
        self.report: Optional[ReportLog] = None

    async def run(self) -> StatusCode:
        """Return the final status, or halt via the fatal path."""
        try:
            await self.medium.mount()
            settings = load_settings(self.paths.config_file)
            self.report = ReportLog(self.paths.report_file)
            status = await self._apply(settings)
        except ProvisioningError as e:
            await self._fail(e)

        self.report.close()
        await self.medium.unmount()
        log.info("Provisioning finished: %s", status.name)
        return status

    async def _apply(self, settings: ProvisioningSettings) -> StatusCode:
        for problem in settings_warnings(settings):
            log.warning("config: %s", problem)
            self.report.warning(problem)

        interfaces = InterfacesFile(self.paths.interfaces)
        new_lines = rewrite(interfaces.read_lines(), settings)
        interfaces.install(new_lines, self.report)

        sequencer = ActionSequencer(
            settings, self.runner, self.report, self.ctx.channel,
            self.paths, self.timings,
        )
        return await sequencer.run()

    async def _fail(self, error: ProvisioningError) -> None:
        log.error("%s", error)
        if self.report is not None:
            self.report.error(str(error))
            self.report.close()
        await self.medium.unmount()
        await escalate(self.ctx, error.status)
