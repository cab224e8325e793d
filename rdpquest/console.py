"""Terminal input/output helpers and text status bars."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from typing import TextIO

BAR_LENGTH = 20
_TICK_SECONDS = 0.25
_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


class Console:
    """Reads player input and writes game text, with optional pacing delays."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        delay: bool = True,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.delay = delay

    def _sleep(self, seconds: float) -> None:
        if self.delay and seconds > 0:
            time.sleep(seconds)

    def write(self, text: str) -> None:
        """Write text immediately."""
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return one line of input without its line ending."""
        if prompt:
            self.write(prompt)
        line = self._stdin.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Read a line and return the integer it starts with.

        Raises ValueError when the line does not start with an integer.
        """
        line = self.read_line(prompt)
        match = _INT_PATTERN.match(line)
        if match is None:
            raise ValueError(f"not an integer: {line!r}")
        return int(match.group(1))

    def discard_line(self) -> None:
        """Throw away the rest of the current input line."""
        self._stdin.readline()

    def loading(self, count: int, char: str, pause: float = 0) -> None:
        """Print ``char`` ``count`` times at a steady pace, then wait ``pause`` seconds."""
        for _ in range(count):
            self._sleep(_TICK_SECONDS)
            self.write(char)
        self._sleep(pause)

    def clear(self, waiting: float = 0) -> None:
        """Wait ``waiting`` seconds, then clear the terminal if there is one."""
        self._sleep(waiting)
        isatty = getattr(self._stdout, "isatty", None)
        if isatty is None or not isatty():
            return
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)


def _bar(label: str, ratio: float, positive: bool, fill: str) -> str:
    filled = int(ratio * BAR_LENGTH)
    if positive and filled == 0:
        filled = 1
    filled = max(filled, 0)
    return f"{label} - [{fill * filled}{'-' * max(BAR_LENGTH - filled, 0)}]"


def _ratio(current: float, maximum: float) -> float:
    if maximum == 0:
        return 1.0 if current > 0 else 0.0
    return current / maximum


def health_bar(label: str, current: float, maximum: float) -> str:
    """Return a life bar such as ``Hero - [++++----...] (40.00/100.00)``."""
    bar = _bar(label, _ratio(current, maximum), current > 0, "+")
    return f"{bar} ({current:.2f}/{maximum:.2f})"


def xp_bar(label: str, current: int, maximum: int) -> str:
    """Return an experience bar such as ``XP - [##--...] (10/50)``."""
    bar = _bar(label, _ratio(current, maximum), current > 0, "#")
    return f"{bar} ({current}/{maximum})"