import logging
from typing import Dict

from ..errors import ParseError
from ..models import ProcInfo
from .shell import body_lines

logger = logging.getLogger(__name__)

# ps -ej: USER PID PPID PGID SESS JOBC STAT TT TIME COMMAND
PID_COL = 1
PPID_COL = 2
DEFAULT_CMD_OFFSET = 9

def parse_process_line(line: str, cmd_offset: int = DEFAULT_CMD_OFFSET) -> ProcInfo:
    parts = line.split()
    if len(parts) <= cmd_offset:
        raise ParseError(line)
    return ProcInfo(pid=parts[PID_COL], ppid=parts[PPID_COL], cmd=" ".join(parts[cmd_offset:]))

def parse_process_table(text: str, cmd_offset: int = DEFAULT_CMD_OFFSET) -> Dict[str, ProcInfo]:
    """pid -> ProcInfo. Short lines are dropped without a trace in the result."""
    procs: Dict[str, ProcInfo] = {}
    for line in body_lines(text):
        try:
            info = parse_process_line(line, cmd_offset)
        except ParseError as e:
            logger.debug("process table: skipping %s", e)
            continue
        procs[info.pid] = info
    return procs
