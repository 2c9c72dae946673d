from __future__ import annotations
import ipaddress
import re
from typing import Optional, Tuple

TRAILING_PORT_RE = re.compile(r":(?P<port>\d+)$")

def split_host_port(name: str) -> Optional[Tuple[str, int]]:
    """
    Split a socket name as printed by lsof/netstat.
      - '*:8080'          -> ('*', 8080)
      - '127.0.0.1:3000'  -> ('127.0.0.1', 3000)
      - '[::1]:5173'      -> ('::1', 5173)
      - '*:*', 'foo'      -> None
    """
    m = TRAILING_PORT_RE.search(name or "")
    if not m:
        return None
    port = int(m.group("port"))
    if not 1 <= port <= 65535:
        return None
    host = name[:m.start()].strip("[]") or "*"
    return host, port

def is_loopback(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        return ipaddress.ip_address(host.split("%", 1)[0]).is_loopback
    except ValueError:
        return False

def is_ipv4(addr: str) -> bool:
    try:
        return isinstance(ipaddress.ip_address(addr), ipaddress.IPv4Address)
    except ValueError:
        return False
