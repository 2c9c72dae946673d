from __future__ import annotations
import socket
from typing import Dict, List, Optional

import psutil

from ..config import CFG
from ..errors import ToolInvocationError
from ..models import Listener, ProcInfo, ServiceRecord
from ..utils.net import is_loopback
from .introspector import ShellIntrospector
from .sockets import filter_listeners

class PsutilIntrospector:
    """Processes, listeners and addresses from psutil; services still come from the shell listing."""

    def __init__(self, cfg: CFG):
        self.cfg = cfg
        self._shell = ShellIntrospector(cfg)

    def list_services(self) -> List[ServiceRecord]:
        return self._shell.list_services()

    def list_listeners(self) -> List[Listener]:
        found: List[Listener] = []
        try:
            conns = psutil.net_connections(kind='tcp')
        except (psutil.AccessDenied, OSError) as e:
            raise ToolInvocationError(["psutil.net_connections"], str(e) or e.__class__.__name__) from e
        for c in conns:
            if c.status != psutil.CONN_LISTEN or not c.pid or not c.laddr:
                continue
            host = c.laddr.ip if hasattr(c.laddr, 'ip') else c.laddr[0]
            port = c.laddr.port if hasattr(c.laddr, 'port') else c.laddr[1]
            if host in ("0.0.0.0", "::"):
                host = "*"
            found.append(Listener(pid=str(c.pid), host=host, port=int(port)))
        return filter_listeners(found, self.cfg.dev_ports)

    def snapshot_processes(self) -> Dict[str, ProcInfo]:
        procs: Dict[str, ProcInfo] = {}
        for p in psutil.process_iter(['pid', 'ppid', 'name', 'cmdline']):
            info = p.info
            cmd = " ".join(info.get('cmdline') or []) or (info.get('name') or "")
            procs[str(info['pid'])] = ProcInfo(pid=str(info['pid']), ppid=str(info.get('ppid') or 0), cmd=cmd)
        return procs

    def machine_ip(self) -> Optional[str]:
        for _ifname, addrs in psutil.net_if_addrs().items():
            for a in addrs:
                if a.family == socket.AF_INET and not is_loopback(a.address):
                    return a.address
        return None
