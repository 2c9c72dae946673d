from __future__ import annotations
import logging
import subprocess
from typing import Iterable, Sequence

from ..errors import ToolInvocationError

logger = logging.getLogger(__name__)

def run_tool(cmd: Sequence[str], timeout: float = 5.0, ok_codes: Iterable[int] = (0,)) -> str:
    """Run an introspection command and return its stdout.

    Raises ToolInvocationError when the binary is missing, the call times out
    or the exit code is not in ok_codes. Undecodable bytes (non-UTF-8 argv,
    paths) come back as U+FFFD.
    """
    try:
        res = subprocess.run(list(cmd), capture_output=True, text=True, encoding="utf-8",
                             errors="replace", timeout=timeout)
    except subprocess.TimeoutExpired:
        raise ToolInvocationError(cmd, f"timed out after {timeout:g}s") from None
    except UnicodeDecodeError as e:
        raise ToolInvocationError(cmd, f"undecodable output: {e}") from e
    except OSError as e:
        raise ToolInvocationError(cmd, f"{e.__class__.__name__}: {e}") from e
    if res.returncode not in tuple(ok_codes):
        err = (res.stderr or "").strip().splitlines()
        raise ToolInvocationError(cmd, f"exit {res.returncode}" + (f": {err[-1]}" if err else ""))
    logger.debug("%s -> %d bytes", " ".join(cmd), len(res.stdout))
    return res.stdout

def body_lines(text: str) -> list[str]:
    """Non-blank lines after the header line."""
    return [line for line in text.splitlines()[1:] if line.strip()]
