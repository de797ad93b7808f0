from __future__ import annotations

from config import AgentPaths, DEFAULT_PATHS
from errors import MediumError
from status.codes import StatusCode
from logger import log

MOUNT = "/bin/mount"
UMOUNT = "/bin/umount"


class RemovableMedium:
    """The USB stick carrying config.yml."""

    def __init__(self, runner, paths: AgentPaths = DEFAULT_PATHS) -> None:
        self.runner = runner
        self.paths = paths

    async def mount(self) -> None:
        p = self.paths
        try:
            p.mount_point.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as e:
            raise MediumError(f"mkdir error: {e}") from e

        record = await self.runner.run(
            "mount", [MOUNT, "-t", p.fstype, p.device, str(p.mount_point)]
        )
        if not record.ok:
            # No medium means no configuration to apply
            raise MediumError(
                f"mount error: {record.error}: {record.output.strip()}",
                StatusCode.NO_CONFIG,
            )
        log.info("Mounted %s on %s", p.device, p.mount_point)

    async def unmount(self) -> None:
        """Lazy unmount. Failures are logged only."""
        record = await self.runner.run(
            "umount", [UMOUNT, "-l", str(self.paths.mount_point)]
        )
        if record.ok:
            log.info("Unmounted %s", self.paths.mount_point)
        else:
            log.error("umount err: %s %s", record.error, record.output.strip())
