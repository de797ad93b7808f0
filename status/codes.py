from __future__ import annotations
from enum import IntEnum


class StatusCode(IntEnum):
    BUSY = 1
    SUCCESS = 2
    ERROR = 3
    NO_CONFIG = 4
    NO_INTERNET = 5

    @property
    def blink_count(self) -> int:
        return int(self.value)
