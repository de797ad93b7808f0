from __future__ import annotations
from pathlib import Path

from config import TEXT_ENCODING, TEXT_ERRORS
from errors import ReportError
from network.runner import ActionRecord
from logger import log


class ReportLog:
    """
    Append-only report written next to config.yml on the medium.

    It is the only thing the operator gets back besides the LED, so it holds
    every line of the new interfaces file and the output of every action.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            self._fh = open(
                self.path, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS
            )
        except OSError as e:
            raise ReportError(f"Could not create report log: {e}") from e
        self.closed = False
        self.broken = False
        log.info("Writing report to %s", self.path)

    def write(self, text: str) -> None:
        if self.closed:
            log.warning("Report already closed, dropping: %r", text[:80])
            return
        if self.broken:
            return
        try:
            self._fh.write(text)
            self._fh.flush()
        except OSError as e:
            # Medium went bad mid-pass; the actions still have to run
            log.error("Report write failed, dropping further output: %s", e)
            self.broken = True

    def file_line(self, destination: Path, line: str) -> None:
        self.write(f"{destination}: {line}\n")

    def warning(self, message: str) -> None:
        self.write(f"WARNING: {message}\n")

    def error(self, message: str) -> None:
        self.write(f"ERROR: {message}\n")

    def record(self, rec: ActionRecord) -> None:
        if rec.error is not None:
            self.write(f"{rec.tag} exec fail: {rec.error}\n")
        self.write(f"{rec.tag} output:\n")
        self.write(rec.output)
        self.write("\n")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._fh.close()
        except OSError as e:
            log.error("Report close failed: %s", e)
            return
        log.info("Report closed")
