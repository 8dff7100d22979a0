"""Line sinks that receive the printed hierarchy."""

from __future__ import annotations

import sys
from typing import TextIO


class PrintSink:
    """Writes each emitted line to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def emit(self, line: str) -> None:
        print(line, file=self.stream if self.stream is not None else sys.stdout)


class ListSink:
    """Collects emitted lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)
