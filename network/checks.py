from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from network.runner import ActionRecord
from logger import log

PING = "/bin/ping"
PROBE_HOST = "google.com"
PROBE_DEADLINE_S = 5
PROBE_INTERVAL_S = 0.5


@dataclass
class CheckResult:
    label: str
    target: str
    passed: bool
    record: ActionRecord
    error: str = ""

    def __str__(self) -> str:
        status = "PASS" if self.passed else f"FAIL ({self.error})"
        return f"{self.label}: {self.target} -> {status}"


def ping_argv(
    host: str = PROBE_HOST,
    deadline: int = PROBE_DEADLINE_S,
    interval: float = PROBE_INTERVAL_S,
) -> list:
    """ping exits after `deadline` seconds whatever happens."""
    return [PING, f"-w{deadline}", f"-i{interval}", host]


async def probe_connectivity(
    runner, host: str = PROBE_HOST, *, label: str = "ping"
) -> CheckResult:
    record = await runner.run(label, ping_argv(host))
    passed = record.ok
    error: Optional[str] = record.error
    log.info("Connectivity check %s: %s", "PASS" if passed else "FAIL", host)
    return CheckResult(
        label=label, target=host, passed=passed, record=record,
        error=error or "",
    )
