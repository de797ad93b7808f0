from __future__ import annotations
from pathlib import Path
from logger import log


class SysfsLed:
    """The board's status LED driven through /sys/class/leds."""

    def __init__(self, led_dir: Path = Path("/sys/class/leds/led0")) -> None:
        self.led_dir = Path(led_dir)
        self._warned = False

    def _write(self, attr: str, value: str) -> None:
        path = self.led_dir / attr
        try:
            path.write_text(value)
        except OSError as e:
            # Logged once; the blink loop would otherwise flood the log
            if not self._warned:
                log.warning("LED write %s failed: %s", path, e)
                self._warned = True

    def setup(self) -> None:
        """Detach the LED from its kernel trigger so we own brightness."""
        self._write("trigger", "none")

    def on(self) -> None:
        self._write("brightness", "1")

    def off(self) -> None:
        self._write("brightness", "0")
