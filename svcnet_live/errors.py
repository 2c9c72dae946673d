from __future__ import annotations
from typing import Sequence


class SvcnetError(Exception):
    pass


class ToolInvocationError(SvcnetError):
    """An external command could not be started, exited non-zero or timed out."""

    def __init__(self, cmd: Sequence[str], reason: str):
        self.cmd = list(cmd)
        self.reason = reason
        super().__init__(f"{' '.join(self.cmd)}: {reason}")


class ParseError(SvcnetError):
    """A single line did not have the minimum expected token shape."""

    def __init__(self, line: str, reason: str = "too few fields"):
        self.line = line
        super().__init__(f"{reason}: {line!r}")


class FatalPipelineError(SvcnetError):
    """The service listing itself could not be obtained."""


class DuplicateLabelError(SvcnetError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"label already exists: {label}")
