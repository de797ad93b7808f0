from __future__ import annotations
import asyncio
import shlex
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from logger import log


@dataclass
class ActionRecord:
    tag: str
    argv: Tuple[str, ...]
    output: str
    error: Optional[str] = None   # None = ran and exited 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def command(self) -> str:
        return " ".join(shlex.quote(a) for a in self.argv)


class CommandRunner:
    """Runs external commands, capturing stdout and stderr together."""

    async def run(self, tag: str, argv: Sequence[str]) -> ActionRecord:
        argv = tuple(argv)
        log.info("CMD [%s] %s", tag, " ".join(shlex.quote(a) for a in argv))
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
            stdout, _ = await proc.communicate()
        except OSError as e:
            log.warning("[%s] could not start: %s", tag, e)
            return ActionRecord(tag=tag, argv=argv, output="", error=str(e))

        output = stdout.decode(errors="replace")
        if proc.returncode != 0:
            log.warning("[%s] exit status %s", tag, proc.returncode)
            return ActionRecord(
                tag=tag, argv=argv, output=output,
                error=f"exit status {proc.returncode}",
            )
        log.debug("[%s] ok", tag)
        return ActionRecord(tag=tag, argv=argv, output=output)
