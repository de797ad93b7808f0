from __future__ import annotations
import os
from pathlib import Path
from typing import List

from config import TEXT_ENCODING, TEXT_ERRORS
from errors import InterfacesError
from network.rewriter import split_lines
from logger import log


class InterfacesFile:
    """/etc/network/interfaces, replaced via a staged .new file."""

    def __init__(self, path: Path = Path("/etc/network/interfaces")) -> None:
        self.path = Path(path)
        self.staged = self.path.with_name(self.path.name + ".new")

    def read_lines(self) -> List[str]:
        try:
            text = self.path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
        except OSError as e:
            raise InterfacesError(f"interfaces file error: {e}") from e
        return split_lines(text)

    def install(self, lines: List[str], report) -> None:
        """
        Write `lines` to the staged file, echoing each one into the report,
        then rename it over the live file.
        """
        try:
            with open(self.staged, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
                for line in lines:
                    f.write(line + "\n")
                    report.file_line(self.path, line)
        except OSError as e:
            raise InterfacesError(f"interfaces file error: {e}") from e
        log.info("Wrote %d lines to %s", len(lines), self.staged)

        try:
            os.replace(self.staged, self.path)
        except OSError as e:
            raise InterfacesError(f"Could not switchover interfaces: {e}") from e
        log.info("Installed %s", self.path)
