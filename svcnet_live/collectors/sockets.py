import logging
from typing import Iterable, List, Optional, Set

from ..config import DEFAULT_DEV_PORTS
from ..errors import ParseError
from ..models import Listener
from ..utils.net import is_loopback, split_host_port
from .shell import body_lines

logger = logging.getLogger(__name__)

# lsof -iTCP -sTCP:LISTEN -n -P
# COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
PID_COL = 1
NAME_COL = 8

def parse_listener_line(line: str) -> Listener:
    parts = line.split()
    if len(parts) <= NAME_COL:
        raise ParseError(line)
    hp = split_host_port(parts[NAME_COL])
    if hp is None:
        raise ParseError(line, "no trailing port")
    host, port = hp
    return Listener(pid=parts[PID_COL], host=host, port=port)

def keep_listener(lst: Listener, dev_ports: Optional[Set[int]] = None) -> bool:
    """Loopback listeners only count on an allow-listed dev port."""
    if not is_loopback(lst.host):
        return True
    ports = DEFAULT_DEV_PORTS if dev_ports is None else dev_ports
    return lst.port in ports

def filter_listeners(listeners: Iterable[Listener], dev_ports: Optional[Set[int]] = None) -> List[Listener]:
    return [lst for lst in listeners if keep_listener(lst, dev_ports)]

def parse_listeners(text: str, dev_ports: Optional[Set[int]] = None) -> List[Listener]:
    found: List[Listener] = []
    for line in body_lines(text):
        try:
            found.append(parse_listener_line(line))
        except ParseError as e:
            logger.debug("listeners: skipping %s", e)
    return filter_listeners(found, dev_ports)
