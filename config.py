from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AgentPaths:
    # Removable medium
    device: str = "/dev/sda1"
    fstype: str = "vfat"
    mount_point: Path = Path("/mnt/rpac")
    config_name: str = "config.yml"
    report_name: str = "config.log"
    overlay_name: str = "files"

    # Target system
    interfaces: Path = Path("/etc/network/interfaces")
    root: Path = Path("/")
    led_dir: Path = Path("/sys/class/leds/led0")
    ipv6_conf_dir: Path = Path("/proc/sys/net/ipv6/conf")

    @property
    def config_file(self) -> Path:
        return self.mount_point / self.config_name

    @property
    def report_file(self) -> Path:
        return self.mount_point / self.report_name

    @property
    def overlay_dir(self) -> Path:
        return self.mount_point / self.overlay_name


@dataclass(frozen=True)
class Timings:
    """All delays in seconds."""
    blink_on: float = 0.08
    blink_off: float = 0.27
    blink_idle: float = 0.9
    settle: float = 5.0
    fatal_hold: float = 10.0
    channel_capacity: int = 3


DEFAULT_PATHS = AgentPaths()
DEFAULT_TIMINGS = Timings()

# Operator files pass through byte for byte, whatever their encoding
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"
