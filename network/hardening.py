from __future__ import annotations
from pathlib import Path
from typing import List
from logger import log


def disable_ipv6(conf_dir: Path = Path("/proc/sys/net/ipv6/conf")) -> List[Path]:
    """Turn IPv6 off for all current and future interfaces. Best effort."""
    written: List[Path] = []
    for scope in ("all", "default"):
        path = Path(conf_dir) / scope / "disable_ipv6"
        try:
            path.write_text("1")
        except OSError as e:
            log.warning("Could not disable IPv6 via %s: %s", path, e)
            continue
        written.append(path)
    log.info("IPv6 disabled via %d sysctl(s)", len(written))
    return written
